"""Fix-it persistence."""
from __future__ import annotations

from typing import Protocol

from sqlalchemy import select

from verdure_admin.core.duration import Duration
from verdure_admin.db.models.fixit import Fixit, FixitStatus
from verdure_admin.repositories.base import MutableSqlRepository


class FixitRepository(Protocol):
    """Storage operations the fix-it service relies on."""

    def find_by_id(self, record_id: int) -> Fixit: ...

    def find(
        self,
        *,
        status: FixitStatus | None,
        vocab_id: int,
        duration: Duration | None,
        limit: int,
    ) -> list[Fixit]: ...

    def create(self, record: Fixit) -> Fixit: ...

    def update(self, record: Fixit) -> Fixit: ...


class SqlFixitRepository(MutableSqlRepository[Fixit]):
    """SQLAlchemy-backed fix-it repository."""

    model = Fixit
    label = "fixit"

    def find(
        self,
        *,
        status: FixitStatus | None,
        vocab_id: int,
        duration: Duration | None,
        limit: int,
    ) -> list[Fixit]:
        """Return fix-its filtered by status, target vocab and creation window."""

        stmt = select(Fixit)
        if status is not None:
            stmt = stmt.where(Fixit.status == status)
        if vocab_id > 0:
            stmt = stmt.where(Fixit.vocab_id == vocab_id)
        stmt = self._within(stmt, duration)
        return self._list(stmt, limit)
