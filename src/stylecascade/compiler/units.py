"""Value normalisers shared by every category compiler.

These are the only places where raw setting values become CSS text, so the
editor preview and the published page always agree on spelling.
"""

from __future__ import annotations

import math
import re
from typing import Any

__all__ = [
    "is_zero_value",
    "ensure_unit",
    "format_value",
    "to_number",
    "px_number",
    "is_unset",
    "differs_from",
]

_ZERO_RE = re.compile(r"^0(px|%|em|rem|vh|vw|pt|cm|mm|in)?$", re.IGNORECASE)
_BARE_NUMBER_RE = re.compile(r"^[+-]?\d+(\.\d+)?$")


def is_unset(value: Any) -> bool:
    """True for values that mean "field not filled in"."""
    return value is None or value == ""


def to_number(value: Any) -> float | None:
    """Interpret *value* as a number, or return None if it is not one.

    Booleans are never numbers here.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def px_number(value: Any) -> float | None:
    """Like :func:`to_number`, but also accepts a trailing ``px``."""
    if isinstance(value, str) and value.strip().lower().endswith("px"):
        value = value.strip()[:-2]
    return to_number(value)


def format_value(value: Any) -> str:
    """Render a setting value the way a browser script prints it.

    Integral floats lose their fractional part (``2.0`` -> ``"2"``), booleans
    render lowercase, strings pass through untouched.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if value is None:
        return ""
    return str(value)


def differs_from(value: Any, neutral: float) -> bool:
    """True if *value* is set and not numerically equal to *neutral*.

    Non-numeric values count as different so they are passed through verbatim.
    """
    if is_unset(value):
        return False
    number = to_number(value)
    if number is None:
        return True
    return number != neutral


def is_zero_value(value: Any) -> bool:
    """True for empty values, ``"0"``, or zero with a length/percent unit."""
    if is_unset(value):
        return True
    trimmed = format_value(value).strip()
    if trimmed == "" or trimmed == "0":
        return True
    return _ZERO_RE.match(trimmed) is not None


def ensure_unit(value: Any) -> Any:
    """Append ``px`` to a bare number; return anything else trimmed but unchanged."""
    if is_unset(value):
        return value
    trimmed = format_value(value).strip()
    if _BARE_NUMBER_RE.match(trimmed):
        return f"{trimmed}px"
    return trimmed
