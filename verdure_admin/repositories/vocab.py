"""Vocab persistence."""
from __future__ import annotations

from typing import Protocol

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError

from verdure_admin.db.models.vocab import Vocab
from verdure_admin.repositories.base import MutableSqlRepository


class VocabRepository(Protocol):
    """Storage operations the vocab service relies on."""

    def find_by_id(self, record_id: int) -> Vocab: ...

    def find_by_learning_lang(self, learning_lang: str) -> Vocab | None: ...

    def find(self, *, learning_code: str, has_first: bool, limit: int) -> list[Vocab]: ...

    def create(self, record: Vocab) -> Vocab: ...

    def update(self, record: Vocab) -> Vocab: ...


class SqlVocabRepository(MutableSqlRepository[Vocab]):
    """SQLAlchemy-backed vocab repository."""

    model = Vocab
    label = "vocab"

    def find_by_learning_lang(self, learning_lang: str) -> Vocab | None:
        """Return the entry whose learning text matches exactly, if any."""

        stmt = select(Vocab).where(Vocab.learning_lang == learning_lang).limit(1)
        try:
            return self.db.scalars(stmt).first()
        except SQLAlchemyError as exc:
            raise self._failure(f"error finding vocab with learning lang {learning_lang}", exc) from exc

    def find(self, *, learning_code: str, has_first: bool, limit: int) -> list[Vocab]:
        """Return entries for a learning language, with or without a translation prompt."""

        stmt = select(Vocab).where(Vocab.learning_lang_code == learning_code)
        if has_first:
            stmt = stmt.where(Vocab.first_lang != "", Vocab.first_lang.is_not(None))
        else:
            stmt = stmt.where(or_(Vocab.first_lang == "", Vocab.first_lang.is_(None)))
        return self._list(stmt, limit)
