"""Fix-it create and update with their audit trail."""
from __future__ import annotations

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from verdure_admin.config import settings
from verdure_admin.core.duration import Duration
from verdure_admin.db.models.fixit import Fixit, FixitStatus
from verdure_admin.repositories.fixit import FixitRepository
from verdure_admin.schemas.fixit import FixitCreate, FixitUpdate
from verdure_admin.services.audit import AuditService
from verdure_admin.services.validation import validate_fixit
from verdure_admin.utils.exceptions import AuditWriteError, ConflictError, VerdureAdminError

MUTABLE_FIXIT_FIELDS = ("status", "field_name", "comments")


class FixitService:
    """Business rules for fix-it requests."""

    def __init__(self, repo: FixitRepository, audit_service: AuditService):
        self.repo = repo
        self.audit_service = audit_service

    def find_fixit_by_id(self, fixit_id: int) -> Fixit:
        return self.repo.find_by_id(fixit_id)

    def find_fixits(
        self,
        status: FixitStatus | None = None,
        vocab_id: int = 0,
        duration: Duration | None = None,
        limit: int = settings.DEFAULT_QUERY_LIMIT,
    ) -> list[Fixit]:
        """Return fix-its, optionally narrowed by status, target vocab and creation window."""

        return self.repo.find(status=status, vocab_id=vocab_id, duration=duration, limit=limit)

    def create_fixit(self, payload: FixitCreate, *, created_by: str | None = None) -> Fixit:
        """Validate, insert and audit a new fix-it request."""

        validate_fixit(payload)

        actor = payload.created_by or created_by or settings.AUDIT_SYSTEM_USER
        fixit = self.repo.create(
            Fixit(
                vocab_id=payload.vocab_id,
                status=payload.status,
                field_name=payload.field_name,
                comments=payload.comments,
                created_by=actor,
            )
        )
        logger.info("Created fixit", fixit_id=fixit.id, vocab_id=fixit.vocab_id)

        self._audit("created fixit", actor, None, fixit)
        return fixit

    def update_fixit(self, fixit_id: int, payload: FixitUpdate, *, created_by: str | None = None) -> Fixit:
        """Change status, field name or comments of an existing request and audit it."""

        validate_fixit(payload)

        current = self.repo.find_by_id(fixit_id)
        before = current.clone()
        fixit = current.clone()

        changed = [
            field for field in MUTABLE_FIXIT_FIELDS if getattr(fixit, field) != getattr(payload, field)
        ]
        if not changed:
            raise ConflictError(f"update for fixit {fixit_id} has no changes", details={"id": fixit_id})

        for field in changed:
            setattr(fixit, field, getattr(payload, field))

        fixit = self.repo.update(fixit)
        logger.info("Updated fixit", fixit_id=fixit.id, fields=changed)

        self._audit("updated fixit", created_by or settings.AUDIT_SYSTEM_USER, before, fixit)
        return fixit

    def _audit(self, comments: str, created_by: str, before: Fixit | None, after: Fixit) -> None:
        try:
            self.audit_service.create_fixit_audit(comments, created_by, before, after)
        except (VerdureAdminError, SQLAlchemyError) as exc:
            logger.error("Fixit saved but audit failed", fixit_id=after.id, error=str(exc))
            raise AuditWriteError(
                f"fixit {after.id} was saved but its audit failed: {exc}",
                entity=after,
                details={"id": after.id},
            ) from exc
