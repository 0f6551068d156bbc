"""Vocab create and update with their audit trail."""
from __future__ import annotations

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from verdure_admin.config import settings
from verdure_admin.db.models.vocab import Vocab
from verdure_admin.repositories.vocab import VocabRepository
from verdure_admin.schemas.vocab import VocabCreate, VocabUpdate
from verdure_admin.services.audit import AuditService
from verdure_admin.services.validation import (
    validate_audit_comments,
    validate_vocab,
    validate_vocab_update,
)
from verdure_admin.utils.exceptions import AuditWriteError, ConflictError, VerdureAdminError

# Identity, learning_lang, the language codes and the creation timestamp never change.
MUTABLE_VOCAB_FIELDS = (
    "first_lang",
    "alternatives",
    "skill",
    "infinitive",
    "pos",
    "hint",
    "num_learning_words",
)


class VocabService:
    """Business rules for vocab entries."""

    def __init__(self, repo: VocabRepository, audit_service: AuditService):
        self.repo = repo
        self.audit_service = audit_service

    def find_vocab_by_id(self, vocab_id: int) -> Vocab:
        """Return a vocab entry or raise ``NotFoundError``."""

        return self.repo.find_by_id(vocab_id)

    def find_vocabs(
        self, learning_code: str, has_first: bool, limit: int = settings.DEFAULT_QUERY_LIMIT
    ) -> list[Vocab]:
        """Return entries for ``learning_code`` that do (or do not) have a translation prompt."""

        return self.repo.find(learning_code=learning_code, has_first=has_first, limit=limit)

    def create_vocab(
        self,
        payload: VocabCreate,
        *,
        comments: str = "created vocab",
        created_by: str | None = None,
    ) -> Vocab:
        """Validate, insert and audit a new vocab entry.

        Raises ``ConflictError`` when an entry with the same learning text exists.
        The storage unique index backs this check up under concurrent inserts.
        """

        comments = payload.comments or comments
        validate_vocab(payload)
        validate_audit_comments(comments)

        existing = self.repo.find_by_learning_lang(payload.learning_lang)
        if existing is not None:
            raise ConflictError(
                f"vocab with learning lang {payload.learning_lang} and id {existing.id} already exists",
                details={"id": existing.id},
            )

        vocab = self.repo.create(
            Vocab(
                learning_lang=payload.learning_lang,
                known_lang_code=payload.known_lang_code,
                learning_lang_code=payload.learning_lang_code,
                **{field: getattr(payload, field) for field in MUTABLE_VOCAB_FIELDS},
            )
        )
        logger.info("Created vocab", vocab_id=vocab.id, learning_lang=vocab.learning_lang)

        self._audit(comments, created_by, None, vocab)
        return vocab

    def update_vocab(
        self,
        vocab_id: int,
        payload: VocabUpdate,
        *,
        comments: str = "updated vocab",
        created_by: str | None = None,
    ) -> Vocab:
        """Replace the mutable fields of an existing entry and audit the change.

        Raises ``NotFoundError`` for an unknown id and ``ConflictError`` when the
        payload matches the stored entry in every mutable field.
        """

        comments = payload.comments or comments
        validate_vocab_update(payload)
        validate_audit_comments(comments)

        current = self.repo.find_by_id(vocab_id)
        before = current.clone()
        vocab = current.clone()

        changed = [
            field for field in MUTABLE_VOCAB_FIELDS if getattr(vocab, field) != getattr(payload, field)
        ]
        if not changed:
            raise ConflictError(f"update for vocab {vocab_id} has no changes", details={"id": vocab_id})

        for field in changed:
            setattr(vocab, field, getattr(payload, field))

        vocab = self.repo.update(vocab)
        logger.info("Updated vocab", vocab_id=vocab.id, fields=changed)

        self._audit(comments, created_by, before, vocab)
        return vocab

    def _audit(self, comments: str, created_by: str | None, before: Vocab | None, after: Vocab) -> None:
        try:
            self.audit_service.create_vocab_audit(
                comments, created_by or settings.AUDIT_SYSTEM_USER, before, after
            )
        except (VerdureAdminError, SQLAlchemyError) as exc:
            logger.error("Vocab saved but audit failed", vocab_id=after.id, error=str(exc))
            raise AuditWriteError(
                f"vocab {after.id} was saved but its audit failed: {exc}",
                entity=after,
                details={"id": after.id},
            ) from exc
