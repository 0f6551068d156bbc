"""Audit log database model."""
from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from verdure_admin.core.duration import utcnow
from verdure_admin.db.base import Base


class Audit(Base):
    """Immutable record of one entity transition and its structural diff.

    ``before`` is empty for creation events, in which case ``diff`` is empty too.
    """

    __tablename__ = "audit"

    id = Column(Integer, primary_key=True, autoincrement=True)
    object_id = Column(Integer, nullable=False, index=True)
    table_name = Column(String(40), nullable=False, index=True)
    diff = Column(Text, nullable=False, default="")
    before = Column(Text, nullable=False, default="")
    after = Column(Text, nullable=False, default="")
    comments = Column(String(1000), nullable=False, default="")
    created_by = Column(String(255), nullable=False)
    created = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now(), index=True
    )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Audit id={self.id!r} table_name={self.table_name!r} object_id={self.object_id!r}>"
