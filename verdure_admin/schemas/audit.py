"""Pydantic schemas for audit endpoints."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class AuditRead(BaseModel):
    """Representation of an audit entry."""

    id: int
    object_id: int
    table_name: str
    diff: str
    before: str
    after: str
    comments: str
    created_by: str
    created: datetime

    model_config = ConfigDict(from_attributes=True)
