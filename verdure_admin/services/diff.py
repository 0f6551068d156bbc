"""Structural diff between two JSON object documents.

The comparison walks the keys of the *before* document only. A key missing
from *after* is reported as removed, a leaf whose value changed is reported
with both values, and maps present on both sides are compared recursively
with their keys prefixed by ``parent.``. Keys that exist only in *after* are
not reported, and a key whose value changes kind (map against scalar) is not
reported either.
"""
from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any, Dict, List, Union

from loguru import logger

JsonValue = Union[None, bool, int, float, str, List["JsonValue"], Dict[str, "JsonValue"]]


class JsonKind(enum.Enum):
    """Variants of a decoded JSON value."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def json_kind(value: JsonValue) -> JsonKind:
    """Classify a decoded JSON value. ``bool`` is checked before numbers."""

    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOL
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"not a JSON value: {type(value)!r}")


def json_equal(left: JsonValue, right: JsonValue) -> bool:
    """Deep value equality over decoded JSON, keeping ``true`` distinct from ``1``."""

    kind = json_kind(left)
    if kind is not json_kind(right):
        return False
    if kind is JsonKind.ARRAY:
        return len(left) == len(right) and all(json_equal(a, b) for a, b in zip(left, right))
    if kind is JsonKind.OBJECT:
        return left.keys() == right.keys() and all(json_equal(left[k], right[k]) for k in left)
    return left == right


@dataclass(frozen=True)
class FieldDiff:
    """One field-level difference.

    Removed keys carry only their descriptive key; changed leaves carry both values.
    """

    key: str
    before: JsonValue = None
    after: JsonValue = None
    removed: bool = False

    def as_dict(self) -> Dict[str, Any]:
        if self.removed:
            return {"key": self.key}
        return {"key": self.key, "before": self.before, "after": self.after}


def _reject_constant(name: str) -> None:
    raise ValueError(f"invalid JSON constant {name}")


def decode_object(document: str) -> Dict[str, JsonValue]:
    """Decode ``document`` as a JSON object; anything else yields an empty mapping.

    ``NaN`` and ``Infinity`` are rejected, as is nesting too deep to decode.
    """

    if not document:
        return {}
    try:
        decoded = json.loads(document, parse_constant=_reject_constant)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("Ignoring undecodable JSON document", error=str(exc))
        return {}
    if not isinstance(decoded, dict):
        logger.debug("Ignoring JSON document that is not an object", kind=json_kind(decoded).value)
        return {}
    return decoded


def find_diffs(before: Dict[str, JsonValue], after: Dict[str, JsonValue], path: str = "") -> List[FieldDiff]:
    """Return the differences between two decoded objects, sorted by key."""

    diffs: List[FieldDiff] = []
    for key, before_value in before.items():
        full_key = f"{path}{key}"
        if key not in after:
            diffs.append(FieldDiff(key=f"'{full_key}' removed", removed=True))
            continue

        after_value = after[key]
        if isinstance(before_value, dict):
            if isinstance(after_value, dict):
                diffs.extend(find_diffs(before_value, after_value, f"{full_key}."))
        elif not json_equal(before_value, after_value):
            diffs.append(FieldDiff(key=f"'{full_key}'", before=before_value, after=after_value))

    diffs.sort(key=lambda diff: diff.key)
    return diffs


def compare(before_json: str, after_json: str) -> List[FieldDiff]:
    """Compare two JSON object documents. Never raises; bad input compares as ``{}``."""

    return find_diffs(decode_object(before_json), decode_object(after_json))


def render_diffs(diffs: List[FieldDiff]) -> str:
    """Serialize diffs as compact JSON, the form stored on audit records."""

    return json.dumps([diff.as_dict() for diff in diffs], ensure_ascii=False, separators=(",", ":"))


def compare_json(before_json: str, after_json: str) -> str:
    """Compare two JSON documents and return the rendered diff list."""

    return render_diffs(compare(before_json, after_json))
