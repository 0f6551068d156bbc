"""Tests for audit construction, persistence and queries."""
from __future__ import annotations

import json
from datetime import timedelta

import pytest

from verdure_admin.core.duration import Duration, utcnow
from verdure_admin.db.models import Audit, Fixit, FixitStatus, Vocab
from verdure_admin.services.audit import build_audit, build_entity_audit
from verdure_admin.utils.exceptions import NotFoundError, ValidationError

BEFORE_JSON = '{"learning_lang":"Hello","first_lang":"Hola"}'
AFTER_JSON = '{"learning_lang":"Hello Updated","first_lang":"Hola Updated"}'
CREATED = utcnow()


@pytest.fixture()
def before_vocab() -> Vocab:
    return Vocab(id=1, learning_lang="English", first_lang="Español", created=CREATED)


@pytest.fixture()
def after_vocab() -> Vocab:
    return Vocab(id=1, learning_lang="English Updated", first_lang="Español Updated", created=CREATED)


def test_build_audit_computes_diff() -> None:
    audit = build_audit("vocab", 1, "Updating vocab entry", "tester", BEFORE_JSON, AFTER_JSON)

    assert audit.table_name == "vocab"
    assert audit.object_id == 1
    assert audit.before == BEFORE_JSON
    assert audit.after == AFTER_JSON
    assert json.loads(audit.diff) == [
        {"key": "'first_lang'", "before": "Hola", "after": "Hola Updated"},
        {"key": "'learning_lang'", "before": "Hello", "after": "Hello Updated"},
    ]


def test_build_audit_for_creation_has_empty_diff() -> None:
    audit = build_audit("vocab", 1, "created vocab", "sys", "", AFTER_JSON)

    assert audit.before == ""
    assert audit.diff == ""


def test_build_audit_with_empty_after_still_builds() -> None:
    audit = build_audit("vocab", 1, "This should still proceed", "tester", BEFORE_JSON, "")

    assert json.loads(audit.diff) == [
        {"key": "'first_lang' removed"},
        {"key": "'learning_lang' removed"},
    ]


def test_build_audit_rejects_long_comments() -> None:
    with pytest.raises(ValidationError) as exc_info:
        build_audit("vocab", 1, "x" * 1001, "tester", BEFORE_JSON, AFTER_JSON)

    assert exc_info.value.message == "comments must be shorter than 1000 characters"


def test_build_audit_accepts_comments_at_limit() -> None:
    audit = build_audit("vocab", 1, "x" * 1000, "tester", BEFORE_JSON, AFTER_JSON)

    assert len(audit.comments) == 1000


def test_entity_audit_requires_after(before_vocab) -> None:
    with pytest.raises(ValidationError, match="after value for vocab is required"):
        build_entity_audit("This should fail", "tester", before_vocab, None, table_name="vocab")

    with pytest.raises(ValidationError, match="after value for vocab is required"):
        build_entity_audit("This should fail", "tester", None, None, table_name="vocab")


def test_entity_audit_rejects_identity_mismatch(after_vocab) -> None:
    with pytest.raises(ValidationError) as exc_info:
        build_entity_audit("Mismatch IDs", "tester", Vocab(id=2), after_vocab)

    assert exc_info.value.message == "vocab before id 2 and after id 1 mismatch"


def test_fixit_audit_rejects_identity_mismatch() -> None:
    after = Fixit(id=1, vocab_id=100, status=FixitStatus.COMPLETED, field_name="Definition",
                  comments="Updated comment", created_by="tester")

    with pytest.raises(ValidationError) as exc_info:
        build_entity_audit("Mismatch IDs", "tester", Fixit(id=2), after, table_name="fixit")

    assert exc_info.value.message == "fixit before id 2 and after id 1 mismatch"


def test_create_vocab_audit_persists(audit_service, before_vocab, after_vocab) -> None:
    audit = audit_service.create_vocab_audit("Updating vocab entry", "tester", before_vocab, after_vocab)

    stored = audit_service.find_audit_by_id(audit.id)
    assert stored.table_name == "vocab"
    assert stored.object_id == 1
    assert stored.created_by == "tester"
    assert stored.before == before_vocab.to_json()
    assert stored.after == after_vocab.to_json()
    assert [entry["key"] for entry in json.loads(stored.diff)] == ["'first_lang'", "'learning_lang'"]


def test_create_vocab_audit_rejects_long_comments(audit_service, db_session, before_vocab, after_vocab) -> None:
    with pytest.raises(ValidationError):
        audit_service.create_vocab_audit("x" * 1001, "tester", before_vocab, after_vocab)

    assert db_session.query(Audit).count() == 0


def test_create_fixit_audit_for_transition(audit_service) -> None:
    before = Fixit(id=1, vocab_id=100, status=FixitStatus.PENDING, field_name="Definition",
                   comments="Initial comment", created_by="tester")
    after = Fixit(id=1, vocab_id=100, status=FixitStatus.COMPLETED, field_name="Definition",
                  comments="Updated comment", created_by="tester")

    audit = audit_service.create_fixit_audit("Updating fixit entry", "tester", before, after)

    assert audit.table_name == "fixit"
    assert json.loads(audit.diff) == [
        {"key": "'comments'", "before": "Initial comment", "after": "Updated comment"},
        {"key": "'status'", "before": "pending", "after": "completed"},
    ]


def test_create_fixit_audit_requires_after(audit_service) -> None:
    with pytest.raises(ValidationError, match="after value for fixit is required"):
        audit_service.create_fixit_audit("This should fail", "tester", Fixit(id=1), None)


def test_find_audit_by_id_missing(audit_service) -> None:
    with pytest.raises(NotFoundError):
        audit_service.find_audit_by_id(999)


def test_find_audits_filters_by_table(audit_service) -> None:
    audit_service.create_audit("users", 123, "", "tester", "", "{}")
    audit_service.create_audit("products", 456, "", "tester", "", "{}")
    duration = Duration(start=utcnow() - timedelta(hours=24), end=utcnow() + timedelta(minutes=1))

    assert len(audit_service.find_audits("users", duration, 10)) == 1
    assert audit_service.find_audits("non_existing", duration, 10) == []
    assert len(audit_service.find_audits("", duration, 10)) == 2


def test_find_audits_filters_by_object(audit_service) -> None:
    audit_service.create_audit("vocab", 1, "", "tester", "", "{}")
    audit_service.create_audit("vocab", 2, "", "tester", "", "{}")
    audit_service.create_audit("vocab", 1, "", "tester", "{}", "{}")

    audits = audit_service.find_audits("vocab", None, 10, object_id=1)

    assert [audit.object_id for audit in audits] == [1, 1]
    assert audits[0].id > audits[1].id


def test_find_audits_object_requires_table(audit_service) -> None:
    with pytest.raises(ValidationError, match="object_id requires table name filter"):
        audit_service.find_audits("", None, 10, object_id=1)


def test_find_audits_respects_window_and_limit(audit_service, db_session) -> None:
    old = Audit(table_name="vocab", object_id=1, created_by="tester",
                created=utcnow() - timedelta(days=3))
    db_session.add(old)
    db_session.commit()
    for object_id in range(2, 5):
        audit_service.create_audit("vocab", object_id, "", "tester", "", "{}")
    recent = Duration.resolve(utcnow() - timedelta(hours=1), utcnow() + timedelta(minutes=1))

    assert len(audit_service.find_audits("vocab", recent, 0)) == 3
    assert len(audit_service.find_audits("vocab", recent, 2)) == 2
    assert len(audit_service.find_audits("vocab", None, 0)) == 4
