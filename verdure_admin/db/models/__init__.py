"""Database models package."""
from verdure_admin.db.models.audit import Audit
from verdure_admin.db.models.fixit import Fixit, FixitStatus
from verdure_admin.db.models.vocab import Vocab

__all__ = [
    "Audit",
    "Fixit",
    "FixitStatus",
    "Vocab",
]
