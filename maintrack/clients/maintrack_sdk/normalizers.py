from __future__ import annotations

import math
import re
from typing import Any

_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"^\s*[+-]?\d+")

LIST_KEYS = ("data", "records", "items")


def to_float(value: Any) -> float:
    """Leading-number parse; anything unparsable or non-finite becomes 0."""
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else 0.0
    if not isinstance(value, str):
        return 0.0
    match = _FLOAT_PREFIX.match(value)
    if not match:
        return 0.0
    number = float(match.group(0))
    return number if math.isfinite(number) else 0.0


def to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if not isinstance(value, str):
        return 0
    match = _INT_PREFIX.match(value)
    return int(match.group(0)) if match else 0


def extract_rows(payload: Any) -> list[Any]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in LIST_KEYS:
            if isinstance(payload.get(key), list):
                return payload[key]
    return []


def extract_entity(payload: Any) -> dict[str, Any] | None:
    if not isinstance(payload, dict):
        return None
    nested = payload.get("data")
    if isinstance(nested, dict):
        return nested
    return payload


def extract_message(payload: Any) -> str | None:
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return None


def build_query_params(filters: dict[str, Any] | None) -> dict[str, Any] | None:
    if not filters:
        return None
    params = {key: value for key, value in filters.items() if value is not None}
    return params or None
