"""Provenance tracker: where a property's value at the current view comes from."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from stylecascade.model.tree import StyleTree
from stylecascade.model.view import View

__all__ = ["PropertySource", "StyleSource", "has_value", "style_source"]


class PropertySource(StrEnum):
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True)
class StyleSource:
    """Editor affordance data for one property.

    Attributes:
        source: USER if the property is stored at exactly the current view.
        is_overridden_elsewhere: True if any other view stores the property.
    """

    source: PropertySource = PropertySource.DEFAULT
    is_overridden_elsewhere: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"source": self.source.value, "isOverriddenElsewhere": self.is_overridden_elsewhere}


def has_value(layer: Mapping[str, Any] | None, path: str) -> bool:
    """True if the dotted *path* resolves to a non-None value inside *layer*.

    Any missing, None or non-mapping segment along the way yields False.
    """
    current: Any = layer
    for part in path.split("."):
        if not isinstance(current, Mapping):
            return False
        current = current.get(part)
        if current is None:
            return False
    return True


def style_source(tree: StyleTree, path: str, view: View) -> StyleSource:
    """Report whether *path* is set at *view* and whether it is set anywhere else."""
    source = PropertySource.USER if has_value(tree.layer_at(view), path) else PropertySource.DEFAULT
    elsewhere = any(
        has_value(layer, path) for other, layer in tree.iter_layers() if other != view
    )
    return StyleSource(source=source, is_overridden_elsewhere=elsewhere)
