"""Mutation router: decide where an edit made at a view is stored.

Routing is a pure function returning a patch that names exactly one storage
location; :func:`apply_patch` turns the patch into a new tree. Missing
breakpoint entries and pseudo-state maps are created only as far as the single
write needs.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any, Union

from stylecascade.model.enums import Breakpoint, PseudoClass, StyleCategory
from stylecascade.model.tree import PSEUDO_STATES_KEY, StyleTree
from stylecascade.model.view import View

logger = logging.getLogger(__name__)

__all__ = [
    "BaseWrite",
    "PseudoWrite",
    "BreakpointWrite",
    "BreakpointPseudoWrite",
    "ResetLayer",
    "StylePatch",
    "route_mutation",
    "route_reset",
    "apply_patch",
    "update_category",
    "patch_to_dict",
]


@dataclass(frozen=True)
class BaseWrite:
    """``tree.base[category] = value``"""

    category: StyleCategory
    value: Any

    kind = "base"

    @property
    def view(self) -> View:
        return View()

    @property
    def path(self) -> tuple[str, ...]:
        return ("base", self.category.value)


@dataclass(frozen=True)
class PseudoWrite:
    """``tree.pseudoStates[state][category] = value``"""

    state: PseudoClass
    category: StyleCategory
    value: Any

    kind = "pseudo"

    @property
    def view(self) -> View:
        return View(Breakpoint.DESKTOP, self.state)

    @property
    def path(self) -> tuple[str, ...]:
        return (PSEUDO_STATES_KEY, self.state.value, self.category.value)


@dataclass(frozen=True)
class BreakpointWrite:
    """``tree.breakpoints[breakpoint][category] = value``"""

    breakpoint: Breakpoint
    category: StyleCategory
    value: Any

    kind = "breakpoint"

    @property
    def view(self) -> View:
        return View(self.breakpoint)

    @property
    def path(self) -> tuple[str, ...]:
        return ("breakpoints", self.breakpoint.value, self.category.value)


@dataclass(frozen=True)
class BreakpointPseudoWrite:
    """``tree.breakpoints[breakpoint].pseudoStates[state][category] = value``"""

    breakpoint: Breakpoint
    state: PseudoClass
    category: StyleCategory
    value: Any

    kind = "breakpoint-pseudo"

    @property
    def view(self) -> View:
        return View(self.breakpoint, self.state)

    @property
    def path(self) -> tuple[str, ...]:
        return (
            "breakpoints",
            self.breakpoint.value,
            PSEUDO_STATES_KEY,
            self.state.value,
            self.category.value,
        )


@dataclass(frozen=True)
class ResetLayer:
    """Remove one category (or every category when None) stored at *target*."""

    target: View
    category: StyleCategory | None = None

    kind = "reset"

    @property
    def view(self) -> View:
        return self.target


StylePatch = Union[BaseWrite, PseudoWrite, BreakpointWrite, BreakpointPseudoWrite, ResetLayer]


def _category(category: StyleCategory | str) -> StyleCategory:
    if isinstance(category, StyleCategory):
        return category
    return StyleCategory.parse(category)


def route_mutation(view: View, category: StyleCategory | str, value: Any) -> StylePatch:
    """Return the single write that stores *value* for *category* at *view*."""
    category = _category(category)
    if view.breakpoint.is_root:
        if view.pseudo_state.is_default:
            return BaseWrite(category, value)
        return PseudoWrite(view.pseudo_state, category, value)
    if view.pseudo_state.is_default:
        return BreakpointWrite(view.breakpoint, category, value)
    return BreakpointPseudoWrite(view.breakpoint, view.pseudo_state, category, value)


def route_reset(view: View, category: StyleCategory | str | None = None) -> ResetLayer:
    """Return a patch clearing *category* (or the whole layer) at *view*."""
    return ResetLayer(view, None if category is None else _category(category))


def apply_patch(tree: StyleTree, patch: StylePatch) -> StyleTree:
    """Apply *patch* to *tree*, returning a new tree. *tree* is left untouched."""
    view = patch.view
    current = tree.layer_at(view) or {}

    if isinstance(patch, ResetLayer):
        if patch.category is None:
            logger.debug("Reset layer at %s", view)
            return tree.replace_layer(view, None)
        remaining = {k: v for k, v in current.items() if k != patch.category.value}
        logger.debug("Reset %s at %s", patch.category.value, view)
        return tree.replace_layer(view, remaining or None)

    logger.debug("Write %s at %s (%s)", patch.category.value, view, patch.kind)
    updated = dict(current)
    updated[patch.category.value] = copy.deepcopy(patch.value)
    return tree.replace_layer(view, updated)


def update_category(
    tree: StyleTree, view: View, category: StyleCategory | str, value: Any
) -> StyleTree:
    """Route and apply an edit in one step."""
    return apply_patch(tree, route_mutation(view, category, value))


def patch_to_dict(patch: StylePatch) -> dict[str, Any]:
    """Describe *patch* as JSON for API responses."""
    view = patch.view
    data: dict[str, Any] = {
        "kind": patch.kind,
        "breakpoint": view.breakpoint.value,
        "state": view.pseudo_state.value,
    }
    if isinstance(patch, ResetLayer):
        data["category"] = patch.category.value if patch.category else None
        return data
    data["category"] = patch.category.value
    data["path"] = list(patch.path)
    data["value"] = patch.value
    return data
