"""Fix-it request endpoints."""
from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Header, Query, status

from verdure_admin.api import deps
from verdure_admin.config import settings
from verdure_admin.core.duration import Duration
from verdure_admin.db.models.fixit import Fixit, FixitStatus
from verdure_admin.schemas import FixitCreate, FixitRead, FixitUpdate
from verdure_admin.services.fixit import FixitService

router = APIRouter(prefix="/fixits", tags=["fixits"])


@router.get("/", response_model=list[FixitRead])
def list_fixits(
    status_filter: FixitStatus | None = Query(default=None, alias="status"),
    vocab_id: int = Query(default=0, ge=0),
    start: datetime | None = Query(default=None, description="ISO-8601 start, defaults to one hour ago"),
    end: datetime | None = Query(default=None, description="ISO-8601 end, defaults to now"),
    limit: int = Query(default=settings.DEFAULT_QUERY_LIMIT, ge=1, le=settings.MAX_QUERY_LIMIT),
    service: FixitService = Depends(deps.get_fixit_service),
) -> list[Fixit]:
    """Return fix-it requests created within a time window."""

    duration = Duration.resolve(start, end)
    return service.find_fixits(status_filter, vocab_id, duration, limit)


@router.get("/{fixit_id}", response_model=FixitRead)
def get_fixit(fixit_id: int, service: FixitService = Depends(deps.get_fixit_service)) -> Fixit:
    """Retrieve a fix-it request by identifier."""

    return service.find_fixit_by_id(fixit_id)


@router.post("/", response_model=FixitRead, status_code=status.HTTP_201_CREATED)
def create_fixit(
    payload: FixitCreate,
    service: FixitService = Depends(deps.get_fixit_service),
    actor: str | None = Header(default=None, alias="X-Actor"),
) -> Fixit:
    """Submit a correction proposal."""

    return service.create_fixit(payload, created_by=actor)


@router.put("/{fixit_id}", response_model=FixitRead)
def update_fixit(
    fixit_id: int,
    payload: FixitUpdate,
    service: FixitService = Depends(deps.get_fixit_service),
    actor: str | None = Header(default=None, alias="X-Actor"),
) -> Fixit:
    """Move a correction proposal along or amend its details."""

    return service.update_fixit(fixit_id, payload, created_by=actor)
