"""API router for version 1."""
from fastapi import APIRouter

from verdure_admin.api.v1.endpoints import audits, fixits, vocab

api_router = APIRouter()
api_router.include_router(vocab.router)
api_router.include_router(fixits.router)
api_router.include_router(audits.router)
