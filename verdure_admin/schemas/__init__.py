"""Pydantic schemas package."""

from verdure_admin.schemas.audit import AuditRead
from verdure_admin.schemas.fixit import FixitCreate, FixitRead, FixitUpdate
from verdure_admin.schemas.vocab import VocabCreate, VocabRead, VocabUpdate

__all__ = [
    "AuditRead",
    "FixitCreate",
    "FixitRead",
    "FixitUpdate",
    "VocabCreate",
    "VocabRead",
    "VocabUpdate",
]
