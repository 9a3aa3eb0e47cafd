"""Conversion of arbitrary values to strings."""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from dataclasses import is_dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from .types import to_payload


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _format_time(value: datetime) -> str:
    text = value.strftime("%Y-%m-%d %H:%M:%S")
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    if value.tzinfo is not None:
        offset = value.strftime("%z")
        text += f" {offset} {value.tzname() or offset}"
    return text


def _dumps(value: Any, sort_keys: bool = False) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), sort_keys=sort_keys)


def to_string(value: Any) -> str:
    """Render a value as a string; containers and records become compact JSON."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return to_string(value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, datetime):
        return _format_time(value)
    if isinstance(value, Mapping):
        return _dumps(to_payload(value), sort_keys=True)
    if is_dataclass(value) and not isinstance(value, type):
        return _dumps(to_payload(value))
    if isinstance(value, (list, tuple)):
        return _dumps(to_payload(value))
    if type(value).__str__ is not object.__str__:
        return str(value)
    try:
        return _dumps(to_payload(value))
    except (TypeError, ValueError):
        return str(value)