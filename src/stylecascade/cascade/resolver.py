"""Cascade resolver: the effective styling the editor shows for one view."""

from __future__ import annotations

from stylecascade.model.enums import Breakpoint
from stylecascade.model.tree import AdvancedStyling, StyleTree
from stylecascade.model.view import View


def resolve_styling(tree: StyleTree, view: View) -> AdvancedStyling:
    """Merge the layers of *tree* that apply to *view*.

    Order:
        1. desktop base
        2. each breakpoint from tablet down to the active one, when present
        3. the pseudo-state layer of the active breakpoint, unless default

    Merging is shallow per category: a category present in a later layer
    replaces the whole category from earlier layers. Pseudo-states of other
    breakpoints (including desktop when a narrower breakpoint is active) are
    never merged.
    """
    effective: AdvancedStyling = dict(tree.base)

    for bp in Breakpoint.responsive():
        if bp.rank > view.breakpoint.rank:
            break
        layer = tree.breakpoints.get(bp)
        if layer is not None:
            effective.update(layer.styling)

    if not view.pseudo_state.is_default:
        pseudo = tree.layer_at(view)
        if pseudo:
            effective.update(pseudo)

    return effective
