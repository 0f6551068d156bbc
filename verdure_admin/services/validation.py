"""Field content checks run before any vocab, fix-it or audit write."""
from __future__ import annotations

import re
from typing import Any

from loguru import logger

from verdure_admin.utils.exceptions import ValidationError

MAX_LEARNING_LANG_LEN = 40
MAX_FIRST_LANG_LEN = 40
MAX_ALTERNATIVES_LEN = 255
MAX_SKILL_LEN = 100
MAX_INFINITIVE_LEN = 40
MAX_POS_LEN = 40
MAX_HINT_LEN = 255
MAX_FIXIT_FIELD_NAME_LEN = 40
MAX_FIXIT_COMMENTS_LEN = 2000
MAX_AUDIT_COMMENTS_LEN = 1000

LANG_CODE_PATTERN = re.compile(r"^[a-z]{2}$")


def validate_field_content(value: str | None, field_name: str, max_length: int) -> None:
    """Reject overlong values and markup-like content.

    Length is counted in code points. A value is treated as markup when it holds
    an angle bracket together with a double quote or slash.
    """

    value = value or ""
    if len(value) > max_length:
        raise ValidationError(
            f"{field_name} must be shorter than {max_length} characters",
            details={"field": field_name, "max_length": max_length},
        )
    if any(ch in value for ch in "<>") and any(ch in value for ch in "\"/"):
        logger.warning("Rejected field content", field=field_name, value=value)
        raise ValidationError(f"{field_name} contains invalid characters", details={"field": field_name})


def validate_vocab(vocab: Any) -> None:
    """Validate a complete vocab entry before it is created."""

    validate_field_content(vocab.learning_lang, "Learning language", MAX_LEARNING_LANG_LEN)
    if not vocab.learning_lang:
        raise ValidationError("learning lang field is required", details={"field": "learning_lang"})

    validate_vocab_update(vocab)

    if not LANG_CODE_PATTERN.match(vocab.known_lang_code or "") or not LANG_CODE_PATTERN.match(
        vocab.learning_lang_code or ""
    ):
        raise ValidationError("Language codes must consist of two lowercase letters")


def validate_vocab_update(vocab: Any) -> None:
    """Validate the fields an update is allowed to change."""

    validate_field_content(vocab.first_lang, "First language", MAX_FIRST_LANG_LEN)
    validate_field_content(vocab.alternatives, "Alternatives", MAX_ALTERNATIVES_LEN)
    validate_field_content(vocab.skill, "Skill", MAX_SKILL_LEN)
    validate_field_content(vocab.infinitive, "Infinitive", MAX_INFINITIVE_LEN)
    validate_field_content(vocab.pos, "Part of speech", MAX_POS_LEN)
    validate_field_content(vocab.hint, "Hint", MAX_HINT_LEN)

    if vocab.num_learning_words is None or vocab.num_learning_words < 1:
        raise ValidationError(
            "num learning words must be at least 1", details={"field": "num_learning_words"}
        )


def validate_fixit(fixit: Any) -> None:
    """Validate the free-text fields of a fix-it request."""

    validate_field_content(fixit.field_name, "Field name", MAX_FIXIT_FIELD_NAME_LEN)
    validate_field_content(fixit.comments, "Comments", MAX_FIXIT_COMMENTS_LEN)


def validate_audit_comments(comments: str | None) -> None:
    """Audit comments are the only field checked when building an audit record."""

    validate_field_content(comments, "comments", MAX_AUDIT_COMMENTS_LEN)
