"""Vocabulary database model."""
from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String
from sqlalchemy.sql import func

from verdure_admin.core.duration import utcnow
from verdure_admin.db.base import AuditableMixin, Base


class Vocab(AuditableMixin, Base):
    """A learnable word or phrase with its translation prompt."""

    __tablename__ = "vocab"
    __table_args__ = (
        CheckConstraint("num_learning_words >= 1", name="ck_vocab_num_learning_words"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    learning_lang = Column(String(40), nullable=False, unique=True)
    first_lang = Column(String(40), nullable=False, default="")
    created = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())

    alternatives = Column(String(255), nullable=False, default="")
    skill = Column(String(100), nullable=False, default="")
    infinitive = Column(String(40), nullable=False, default="")
    pos = Column(String(40), nullable=False, default="")
    hint = Column(String(255), nullable=False, default="")

    num_learning_words = Column(Integer, nullable=False, default=1)
    known_lang_code = Column(String(2), nullable=False, default="en")
    learning_lang_code = Column(String(2), nullable=False, default="es")

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Vocab id={self.id!r} learning_lang={self.learning_lang!r}>"
