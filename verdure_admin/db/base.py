"""SQLAlchemy base declarative class and shared entity helpers."""
from __future__ import annotations

import enum
import json
from datetime import datetime
from typing import Any

from sqlalchemy.orm import DeclarativeBase

from verdure_admin.core.duration import to_rfc3339


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""

    pass


class AuditableMixin:
    """JSON projection and cloning for entities whose changes are audited."""

    def to_dict(self) -> dict[str, Any]:
        """Return every column in table order with JSON-friendly values."""

        payload: dict[str, Any] = {}
        for column in self.__table__.columns:  # type: ignore[attr-defined]
            value = getattr(self, column.key)
            if isinstance(value, datetime):
                value = to_rfc3339(value)
            elif isinstance(value, enum.Enum):
                value = value.value
            payload[column.key] = value
        return payload

    def to_json(self) -> str:
        """Serialize the entity as compact JSON."""

        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))

    def clone(self):
        """Return a detached copy carrying the same column values, identity included."""

        values = {column.key: getattr(self, column.key) for column in self.__table__.columns}  # type: ignore[attr-defined]
        return type(self)(**values)
