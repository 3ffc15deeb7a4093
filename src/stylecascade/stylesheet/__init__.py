"""Stylesheet generation: rule assembly, editor output, page CSS, and style tags."""

from stylecascade.stylesheet.assembler import (
    ROOT_PLACEHOLDER,
    assemble_rules,
    build_rule,
    render_element_css,
    scope_custom_css,
)
from stylecascade.stylesheet.legacy import legacy_props_to_declarations
from stylecascade.stylesheet.output import generate_output
from stylecascade.stylesheet.page import join_element_css, render_page_css
from stylecascade.stylesheet.style_tag import InMemoryStyleHost, ScopedStyleTag

__all__ = [
    "ROOT_PLACEHOLDER",
    "assemble_rules",
    "build_rule",
    "render_element_css",
    "scope_custom_css",
    "legacy_props_to_declarations",
    "generate_output",
    "join_element_css",
    "render_page_css",
    "InMemoryStyleHost",
    "ScopedStyleTag",
]
