"""Cascade: resolving, routing edits, and tracking provenance across views."""

from stylecascade.cascade.provenance import PropertySource, StyleSource, has_value, style_source
from stylecascade.cascade.resolver import resolve_styling
from stylecascade.cascade.router import (
    BaseWrite,
    BreakpointPseudoWrite,
    BreakpointWrite,
    PseudoWrite,
    ResetLayer,
    StylePatch,
    apply_patch,
    patch_to_dict,
    route_mutation,
    route_reset,
    update_category,
)

__all__ = [
    "resolve_styling",
    # router
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
    # provenance
    "PropertySource",
    "StyleSource",
    "has_value",
    "style_source",
]
