"""Read-only audit trail endpoints."""
from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query

from verdure_admin.api import deps
from verdure_admin.config import settings
from verdure_admin.core.duration import Duration
from verdure_admin.db.models.audit import Audit
from verdure_admin.schemas import AuditRead
from verdure_admin.services.audit import AuditService

router = APIRouter(prefix="/audits", tags=["audits"])


@router.get("/", response_model=list[AuditRead])
def list_audits(
    table_name: str | None = Query(default=None, max_length=40),
    object_id: int = Query(default=0, ge=0),
    start: datetime | None = Query(default=None, description="ISO-8601 start, defaults to one hour ago"),
    end: datetime | None = Query(default=None, description="ISO-8601 end, defaults to now"),
    limit: int = Query(default=settings.DEFAULT_QUERY_LIMIT, ge=1, le=settings.MAX_QUERY_LIMIT),
    service: AuditService = Depends(deps.get_audit_service),
) -> list[Audit]:
    """Return audit entries created within a time window, newest first."""

    duration = Duration.resolve(start, end)
    return service.find_audits(table_name, duration, limit, object_id=object_id)


@router.get("/{audit_id}", response_model=AuditRead)
def get_audit(audit_id: int, service: AuditService = Depends(deps.get_audit_service)) -> Audit:
    """Retrieve a single audit entry."""

    return service.find_audit_by_id(audit_id)
