"""Element metadata: id, display name, custom CSS and custom attributes."""

from __future__ import annotations

import random
import re
import string
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

_BASE36 = string.digits + string.ascii_lowercase
_NODE_ID_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9_-]")


@dataclass(frozen=True)
class CustomAttribute:
    """A user-defined HTML attribute (name/value pair)."""

    id: str
    name: str
    value: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CustomAttribute:
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name") or ""),
            value=str(data.get("value") or ""),
        )

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "value": self.value}


@dataclass(frozen=True)
class ElementMetadata:
    """Per-element settings that sit beside the style tree.

    Attributes:
        element_id: Stable id used as the ``#<id>`` CSS selector.
        custom_name: Display name shown in the editor's layer tree.
        custom_css: Raw CSS; every ``%root%`` is replaced by ``#<element_id>``.
        custom_attributes: Extra HTML attributes rendered on the element.
        applied_classes: Global class names applied to the element.
    """

    element_id: str
    custom_name: str | None = None
    custom_css: str = ""
    custom_attributes: tuple[CustomAttribute, ...] = ()
    applied_classes: tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None, fallback_id: str = "") -> ElementMetadata:
        data = data or {}
        return cls(
            element_id=str(data.get("elementId") or fallback_id),
            custom_name=data.get("customName") or None,
            custom_css=data.get("customCSS") or "",
            custom_attributes=tuple(
                CustomAttribute.from_dict(a) for a in data.get("customAttributes") or ()
            ),
            applied_classes=tuple(data.get("appliedClasses") or ()),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "elementId": self.element_id,
            "appliedClasses": list(self.applied_classes),
            "customAttributes": [a.to_dict() for a in self.custom_attributes],
            "customCSS": self.custom_css,
        }
        if self.custom_name:
            data["customName"] = self.custom_name
        return data

    def attribute_map(self) -> dict[str, str]:
        """Return custom attributes as a name -> value mapping, skipping blank names."""
        return {a.name: a.value for a in self.custom_attributes if a.name}


def _base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_element_id() -> str:
    """Generate a fresh element id of the form ``el-<time36>-<random6>``."""
    timestamp = _base36(int(time.time() * 1000))
    suffix = "".join(random.choices(_BASE36, k=6))
    return f"el-{timestamp}-{suffix}"


def element_id_for(metadata: ElementMetadata | None, node_id: str, prefix: str = "pp-") -> str:
    """Return the CSS id for an element, falling back to a sanitised node id."""
    if metadata is not None and metadata.element_id:
        return metadata.element_id
    return f"{prefix}{_NODE_ID_UNSAFE_RE.sub('', node_id)}"
