"""Audit trail construction and queries.

Every vocab and fix-it transition is recorded as one :class:`Audit` row holding
the full JSON state before and after the change plus a structural diff of the
two. Creation events have an empty ``before`` and an empty ``diff``.
"""
from __future__ import annotations

from typing import Protocol

from loguru import logger

from verdure_admin.config import settings
from verdure_admin.core.duration import Duration
from verdure_admin.db.models.audit import Audit
from verdure_admin.repositories.audit import AuditRepository
from verdure_admin.services.diff import compare_json
from verdure_admin.services.validation import validate_audit_comments
from verdure_admin.utils.exceptions import ValidationError


class Auditable(Protocol):
    """An entity whose state can be snapshotted for the audit trail."""

    __tablename__: str
    id: int

    def to_json(self) -> str: ...


def build_audit(
    table_name: str,
    object_id: int,
    comments: str,
    created_by: str,
    before_json: str,
    after_json: str,
) -> Audit:
    """Assemble an unsaved audit record, deriving its diff from the two snapshots."""

    validate_audit_comments(comments)

    diff = compare_json(before_json, after_json) if before_json else ""

    return Audit(
        table_name=table_name,
        object_id=object_id,
        comments=comments or "",
        created_by=created_by,
        before=before_json,
        after=after_json,
        diff=diff,
    )


def build_entity_audit(
    comments: str,
    created_by: str,
    before: Auditable | None,
    after: Auditable | None,
    *,
    table_name: str | None = None,
) -> Audit:
    """Assemble an audit record for the transition ``before`` -> ``after``.

    ``before`` is None for creation events. ``after`` is required and must share
    the identity of ``before`` when both are given.
    """

    label = table_name or _table_name(after if after is not None else before)
    if after is None:
        raise ValidationError(f"after value for {label} is required")
    if before is not None and before.id != after.id:
        raise ValidationError(
            f"{label} before id {before.id} and after id {after.id} mismatch",
            details={"before_id": before.id, "after_id": after.id},
        )

    before_json = before.to_json() if before is not None else ""
    return build_audit(label, after.id, comments, created_by, before_json, after.to_json())


def _table_name(entity: Auditable | None) -> str:
    return getattr(entity, "__tablename__", "entity")


class AuditService:
    """Record and query audit entries."""

    def __init__(self, repo: AuditRepository):
        self.repo = repo

    def find_audit_by_id(self, audit_id: int) -> Audit:
        """Return a single audit entry or raise ``NotFoundError``."""

        return self.repo.find_by_id(audit_id)

    def find_audits(
        self,
        table_name: str | None = None,
        duration: Duration | None = None,
        limit: int = settings.DEFAULT_QUERY_LIMIT,
        *,
        object_id: int = 0,
    ) -> list[Audit]:
        """Return audits for ``table_name`` created within ``duration``, newest first.

        An empty table name matches every table. ``object_id`` narrows the result
        to one entity and is only accepted together with a table name. A limit of
        zero or less returns every match.
        """

        return self.repo.find(
            table_name=table_name or None,
            object_id=object_id,
            duration=duration,
            limit=limit,
        )

    def create_audit(
        self,
        table_name: str,
        object_id: int,
        comments: str,
        created_by: str,
        before_json: str,
        after_json: str,
    ) -> Audit:
        """Build and persist an audit entry from raw JSON snapshots."""

        audit = build_audit(table_name, object_id, comments, created_by, before_json, after_json)
        return self._save(audit)

    def create_vocab_audit(self, comments: str, created_by: str, before, after) -> Audit:
        """Record a vocab transition."""

        return self._save(build_entity_audit(comments, created_by, before, after, table_name="vocab"))

    def create_fixit_audit(self, comments: str, created_by: str, before, after) -> Audit:
        """Record a fix-it transition."""

        return self._save(build_entity_audit(comments, created_by, before, after, table_name="fixit"))

    def _save(self, audit: Audit) -> Audit:
        saved = self.repo.create(audit)
        logger.info(
            "Recorded audit",
            audit_id=saved.id,
            table_name=saved.table_name,
            object_id=saved.object_id,
        )
        return saved
