"""Audit persistence. Audit rows are append-only, so there is no update."""
from __future__ import annotations

from typing import Protocol

from sqlalchemy import select

from verdure_admin.core.duration import Duration
from verdure_admin.db.models.audit import Audit
from verdure_admin.repositories.base import SqlRepository
from verdure_admin.utils.exceptions import ValidationError


class AuditRepository(Protocol):
    """Storage operations the audit service relies on."""

    def find_by_id(self, record_id: int) -> Audit: ...

    def find(
        self,
        *,
        table_name: str | None,
        object_id: int,
        duration: Duration | None,
        limit: int,
    ) -> list[Audit]: ...

    def create(self, record: Audit) -> Audit: ...


class SqlAuditRepository(SqlRepository[Audit]):
    """SQLAlchemy-backed audit repository."""

    model = Audit
    label = "audit"

    def find(
        self,
        *,
        table_name: str | None,
        object_id: int,
        duration: Duration | None,
        limit: int,
    ) -> list[Audit]:
        """Return audits for a table (and optionally one object) within a window."""

        stmt = select(Audit)
        if table_name:
            stmt = stmt.where(Audit.table_name == table_name)
            if object_id > 0:
                stmt = stmt.where(Audit.object_id == object_id)
        elif object_id > 0:
            raise ValidationError(
                "invalid audit query, object_id requires table name filter",
                details={"object_id": object_id},
            )
        stmt = self._within(stmt, duration)
        return self._list(stmt, limit)
