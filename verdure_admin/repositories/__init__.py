"""Storage boundary for vocab, fix-it and audit records."""
from verdure_admin.repositories.audit import AuditRepository, SqlAuditRepository
from verdure_admin.repositories.fixit import FixitRepository, SqlFixitRepository
from verdure_admin.repositories.vocab import SqlVocabRepository, VocabRepository

__all__ = [
    "AuditRepository",
    "FixitRepository",
    "SqlAuditRepository",
    "SqlFixitRepository",
    "SqlVocabRepository",
    "VocabRepository",
]
