"""Custom exception classes and error handling utilities."""
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger


class VerdureAdminError(Exception):
    """Base exception for the application."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(VerdureAdminError):
    """Field content, identity or query parameter rejected before any write."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class NotFoundError(VerdureAdminError):
    """Lookup or update target does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(VerdureAdminError):
    """Duplicate entry or an update that changes nothing."""

    status_code = status.HTTP_409_CONFLICT


class PersistenceError(VerdureAdminError):
    """Storage layer failure."""


class AuditWriteError(PersistenceError):
    """The entity write committed but recording its audit entry failed.

    The saved entity is kept on ``entity`` so callers can still report it; the
    two writes are not atomic.
    """

    def __init__(self, message: str, entity: Any, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.entity = entity


async def handle_application_error(request: Request, error: VerdureAdminError) -> JSONResponse:
    """Translate a domain error into a JSON response."""

    if error.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{type(error).__name__}: {error.message}", path=request.url.path)
    else:
        logger.warning(f"{type(error).__name__}: {error.message}", path=request.url.path)
    return JSONResponse(
        status_code=error.status_code,
        content={"message": error.message, "details": error.details},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain error handler on ``app``."""

    app.add_exception_handler(VerdureAdminError, handle_application_error)
