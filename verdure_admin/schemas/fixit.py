"""Pydantic schemas for fix-it endpoints."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from verdure_admin.db.models.fixit import FixitStatus


class FixitUpdate(BaseModel):
    """Fields of a fix-it request an update may change."""

    status: FixitStatus
    field_name: str = ""
    comments: str = ""

    model_config = ConfigDict(extra="forbid")


class FixitCreate(FixitUpdate):
    """Input for a new fix-it request."""

    vocab_id: int = Field(ge=1)
    status: FixitStatus = FixitStatus.PENDING
    created_by: str | None = Field(default=None, max_length=255)


class FixitRead(BaseModel):
    """Representation of a fix-it request."""

    id: int
    vocab_id: int
    status: FixitStatus
    field_name: str
    comments: str
    created_by: str
    created: datetime

    model_config = ConfigDict(from_attributes=True)
