"""Shared API dependencies."""
from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from verdure_admin.db.session import get_db
from verdure_admin.repositories import SqlAuditRepository, SqlFixitRepository, SqlVocabRepository
from verdure_admin.services.audit import AuditService
from verdure_admin.services.fixit import FixitService
from verdure_admin.services.vocab import VocabService

__all__ = ["get_db", "get_audit_service", "get_vocab_service", "get_fixit_service"]


def get_audit_service(db: Session = Depends(get_db)) -> AuditService:
    """Assemble the audit service on the request session."""

    return AuditService(SqlAuditRepository(db))


def get_vocab_service(
    db: Session = Depends(get_db),
    audit_service: AuditService = Depends(get_audit_service),
) -> VocabService:
    """Assemble the vocab service with request-scoped dependencies."""

    return VocabService(SqlVocabRepository(db), audit_service)


def get_fixit_service(
    db: Session = Depends(get_db),
    audit_service: AuditService = Depends(get_audit_service),
) -> FixitService:
    """Assemble the fix-it service with request-scoped dependencies."""

    return FixitService(SqlFixitRepository(db), audit_service)
