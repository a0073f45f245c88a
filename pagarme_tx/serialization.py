"""Shared serialization utilities for gateway payloads."""

import json
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

EMPTY_VALUES: tuple[Any, ...] = (None, "", [], {}, ())


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def compact(payload: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is empty, keeping insertion order.

    Zero and ``False`` are real values and are kept.
    """
    return {key: value for key, value in payload.items() if value not in EMPTY_VALUES}


def to_json(payload: dict[str, Any]) -> str:
    """Encode a payload as compact JSON, the way the gateway expects it."""
    return json.dumps(serialize_value(payload), separators=(",", ":"), ensure_ascii=False)


def parse_datetime(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp as sent by the gateway.

    Parameters
    ----------
    value : Any
        Raw JSON value, usually ``"2017-04-20T18:30:00.000Z"``.

    Returns
    -------
    datetime | None
        Parsed timestamp, or ``None`` for empty or unparsable values.
    """
    if not value or not isinstance(value, str):
        return None
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None
