"""stylecascade: breakpoint and pseudo-state style cascade with CSS generation."""
from __future__ import annotations

__version__ = "0.1.0"

from stylecascade.cascade import resolve_styling, route_mutation, apply_patch, style_source
from stylecascade.compiler import compile_styling, styling_to_css
from stylecascade.config import CascadeConfig
from stylecascade.model import (
    Breakpoint,
    ElementMetadata,
    GeneratedCSSOutput,
    PseudoClass,
    StyleCategory,
    StyleTree,
    View,
)
from stylecascade.stylesheet import assemble_rules, generate_output, render_element_css, render_page_css

__all__ = [
    "__version__",
    "CascadeConfig",
    # model
    "Breakpoint",
    "PseudoClass",
    "StyleCategory",
    "StyleTree",
    "View",
    "ElementMetadata",
    "GeneratedCSSOutput",
    # compiler
    "compile_styling",
    "styling_to_css",
    # cascade
    "resolve_styling",
    "route_mutation",
    "apply_patch",
    "style_source",
    # stylesheet
    "assemble_rules",
    "render_element_css",
    "generate_output",
    "render_page_css",
]
