"""Vocab administration endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Header, Query, status

from verdure_admin.api import deps
from verdure_admin.config import settings
from verdure_admin.db.models.vocab import Vocab
from verdure_admin.schemas import VocabCreate, VocabRead, VocabUpdate
from verdure_admin.services.vocab import VocabService

router = APIRouter(prefix="/vocab", tags=["vocab"])


@router.get("/", response_model=list[VocabRead])
def list_vocab(
    learning_code: str = Query(..., min_length=2, max_length=2, description="Learning language code"),
    has_first: bool = Query(default=True, description="Only entries with (or without) a translation prompt"),
    limit: int = Query(default=settings.DEFAULT_QUERY_LIMIT, ge=1, le=settings.MAX_QUERY_LIMIT),
    service: VocabService = Depends(deps.get_vocab_service),
) -> list[Vocab]:
    """Return vocab entries for one learning language."""

    return service.find_vocabs(learning_code, has_first, limit)


@router.get("/{vocab_id}", response_model=VocabRead)
def get_vocab(vocab_id: int, service: VocabService = Depends(deps.get_vocab_service)) -> Vocab:
    """Retrieve a vocab entry by identifier."""

    return service.find_vocab_by_id(vocab_id)


@router.post("/", response_model=VocabRead, status_code=status.HTTP_201_CREATED)
def create_vocab(
    payload: VocabCreate,
    service: VocabService = Depends(deps.get_vocab_service),
    actor: str | None = Header(default=None, alias="X-Actor"),
) -> Vocab:
    """Create a vocab entry and record its creation audit."""

    return service.create_vocab(payload, created_by=actor)


@router.put("/{vocab_id}", response_model=VocabRead)
def update_vocab(
    vocab_id: int,
    payload: VocabUpdate,
    service: VocabService = Depends(deps.get_vocab_service),
    actor: str | None = Header(default=None, alias="X-Actor"),
) -> Vocab:
    """Replace the mutable fields of a vocab entry and record the change."""

    return service.update_vocab(vocab_id, payload, created_by=actor)
