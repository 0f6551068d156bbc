"""Pydantic schemas for vocab endpoints."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class VocabUpdate(BaseModel):
    """Whole-record replacement of the fields an update may change."""

    first_lang: str = ""
    alternatives: str = ""
    skill: str = ""
    infinitive: str = ""
    pos: str = ""
    hint: str = ""
    num_learning_words: int = 1
    comments: str | None = Field(
        default=None, description="Note stored on the audit entry for this change"
    )

    model_config = ConfigDict(extra="forbid")


class VocabCreate(VocabUpdate):
    """Input for a new vocab entry."""

    learning_lang: str
    known_lang_code: str = "en"
    learning_lang_code: str = "es"


class VocabRead(BaseModel):
    """Representation of a vocab entry."""

    id: int
    learning_lang: str
    first_lang: str
    alternatives: str
    skill: str
    infinitive: str
    pos: str
    hint: str
    num_learning_words: int
    known_lang_code: str
    learning_lang_code: str
    created: datetime

    model_config = ConfigDict(from_attributes=True)
