"""Rendering property maps as CSS text or browser style objects."""

from __future__ import annotations

import re
from collections.abc import Mapping

_DASH_LETTER_RE = re.compile(r"-([a-z])")


def declaration_block(properties: Mapping[str, str], indent: str = "  ") -> str:
    """Render ``prop: value;`` lines, one per property."""
    return "\n".join(f"{indent}{prop}: {value};" for prop, value in properties.items())


def inline_style(properties: Mapping[str, str]) -> str:
    """Render properties for an HTML ``style`` attribute."""
    return "; ".join(f"{prop}: {value}" for prop, value in properties.items())


def to_style_object(properties: Mapping[str, str]) -> dict[str, str]:
    """Convert kebab-case property names to the camelCase keys of a DOM style object.

    Vendor prefixes keep a leading capital: ``-webkit-backdrop-filter`` becomes
    ``WebkitBackdropFilter``.
    """
    result: dict[str, str] = {}
    for prop, value in properties.items():
        key = _DASH_LETTER_RE.sub(lambda m: m.group(1).upper(), prop)
        result[key] = value
    return result
