"""Time helpers shared by queries and entity projections."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from verdure_admin.config import settings
from verdure_admin.utils.exceptions import ValidationError


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_rfc3339(value: datetime | None) -> str | None:
    """Render ``value`` in UTC with a ``Z`` suffix."""

    if value is None:
        return None
    return ensure_utc(value).isoformat().replace("+00:00", "Z")


def parse_iso_datetime(text: str) -> datetime:
    """Parse an RFC 3339 / ISO-8601 timestamp into an aware UTC datetime."""

    value = text.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(value))


@dataclass(frozen=True)
class Duration:
    """Closed time interval ``[start, end]`` used as a query filter."""

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        """Return True when ``moment`` falls inside the interval, bounds included."""

        moment = ensure_utc(moment)
        return self.start <= moment <= self.end

    @classmethod
    def resolve(
        cls,
        start: datetime | str | None = None,
        end: datetime | str | None = None,
        *,
        now: datetime | None = None,
    ) -> "Duration":
        """Build a duration, defaulting to the last lookback window ending now.

        Strings are parsed as ISO-8601. An absent start means
        ``DEFAULT_LOOKBACK_MINUTES`` before now and an absent end means now.
        """

        now = ensure_utc(now) if now is not None else utcnow()

        if start is None or start == "":
            resolved_start = now - timedelta(minutes=settings.DEFAULT_LOOKBACK_MINUTES)
        else:
            resolved_start = _coerce(start, "start")

        if end is None or end == "":
            resolved_end = now
        else:
            resolved_end = _coerce(end, "end")

        if resolved_start > resolved_end:
            raise ValidationError(
                "start time must be before end time",
                details={"start": to_rfc3339(resolved_start), "end": to_rfc3339(resolved_end)},
            )
        return cls(start=resolved_start, end=resolved_end)


def _coerce(value: datetime | str, label: str) -> datetime:
    if isinstance(value, datetime):
        return ensure_utc(value)
    try:
        return parse_iso_datetime(value)
    except ValueError as exc:
        raise ValidationError(f"invalid {label} time: {exc}") from exc
