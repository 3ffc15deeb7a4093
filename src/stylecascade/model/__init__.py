"""stylecascade model layer -- public type re-exports."""

from stylecascade.model.defaults import DEFAULT_ADVANCED_STYLING, default_styling, has_styling_values
from stylecascade.model.enums import Breakpoint, BreakpointInfo, PseudoClass, StyleCategory
from stylecascade.model.metadata import (
    CustomAttribute,
    ElementMetadata,
    element_id_for,
    generate_element_id,
)
from stylecascade.model.output import GeneratedCSSOutput
from stylecascade.model.tree import AdvancedStyling, BreakpointLayer, StyleTree
from stylecascade.model.view import View

__all__ = [
    # enums
    "StyleCategory",
    "Breakpoint",
    "BreakpointInfo",
    "PseudoClass",
    # tree
    "AdvancedStyling",
    "BreakpointLayer",
    "StyleTree",
    "View",
    # metadata
    "CustomAttribute",
    "ElementMetadata",
    "element_id_for",
    "generate_element_id",
    # output
    "GeneratedCSSOutput",
    # defaults
    "DEFAULT_ADVANCED_STYLING",
    "default_styling",
    "has_styling_values",
]
