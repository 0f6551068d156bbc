"""Shared SQLAlchemy repository plumbing."""
from __future__ import annotations

from typing import Generic, TypeVar

from loguru import logger
from sqlalchemy import Select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from verdure_admin.core.duration import Duration
from verdure_admin.db.base import Base
from verdure_admin.utils.exceptions import ConflictError, NotFoundError, PersistenceError

ModelT = TypeVar("ModelT", bound=Base)


class SqlRepository(Generic[ModelT]):
    """Find, create and update operations for one mapped model."""

    model: type[ModelT]
    label: str

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, record_id: int) -> ModelT:
        """Return the record with ``record_id`` or raise ``NotFoundError``."""

        try:
            record = self.db.get(self.model, record_id)
        except SQLAlchemyError as exc:
            raise self._failure(f"error finding {self.label} with id {record_id}", exc) from exc
        if record is None:
            raise NotFoundError(
                f"{self.label} with id {record_id} not found", details={"id": record_id}
            )
        return record

    def create(self, record: ModelT) -> ModelT:
        """Insert ``record`` and return it with its identity populated."""

        try:
            self.db.add(record)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._failure(f"error creating {self.label}", exc) from exc
        self.db.refresh(record)
        return record

    def _list(self, stmt: Select, limit: int) -> list[ModelT]:
        stmt = stmt.order_by(self.model.created.desc(), self.model.id.desc())
        if limit > 0:
            stmt = stmt.limit(limit)
        try:
            return list(self.db.scalars(stmt))
        except SQLAlchemyError as exc:
            raise self._failure(f"error finding {self.label} records", exc) from exc

    def _within(self, stmt: Select, duration: Duration | None) -> Select:
        if duration is None:
            return stmt
        return stmt.where(self.model.created >= duration.start, self.model.created <= duration.end)

    def _failure(self, message: str, exc: SQLAlchemyError) -> Exception:
        self.db.rollback()
        if isinstance(exc, IntegrityError):
            logger.warning(f"{message}: integrity violation", error=str(exc.orig))
            return ConflictError(f"{message}: {exc.orig}")
        logger.error(f"{message}: {exc}")
        return PersistenceError(f"{message}: {exc}")


class MutableSqlRepository(SqlRepository[ModelT]):
    """Repository for records that may be rewritten after creation."""

    def update(self, record: ModelT) -> ModelT:
        """Persist the full state of ``record`` over the stored row and return it."""

        try:
            merged = self.db.merge(record)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._failure(f"error updating {self.label} with id {record.id}", exc) from exc
        return merged
