"""Fix-it request database model."""
import enum

from sqlalchemy import Column, DateTime, Enum, Integer, String
from sqlalchemy.sql import func

from verdure_admin.core.duration import utcnow
from verdure_admin.db.base import AuditableMixin, Base


class FixitStatus(str, enum.Enum):
    """Lifecycle states of a correction proposal."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class Fixit(AuditableMixin, Base):
    """A correction proposal targeting one field of a vocab entry."""

    __tablename__ = "fixit"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vocab_id = Column(Integer, nullable=False, index=True)  # reference only, no ownership
    status = Column(
        Enum(
            FixitStatus,
            name="status_type",
            values_callable=lambda members: [member.value for member in members],
        ),
        nullable=False,
        default=FixitStatus.PENDING,
    )
    field_name = Column(String(40), nullable=False, default="")
    comments = Column(String(2000), nullable=False, default="")
    created_by = Column(String(255), nullable=False)
    created = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now(), index=True
    )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Fixit id={self.id!r} vocab_id={self.vocab_id!r} status={self.status!r}>"
