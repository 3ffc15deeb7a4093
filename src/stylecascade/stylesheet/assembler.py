"""Rule assembler: every populated cell of a style tree -> ordered CSS rules.

Published pages have no active view, so every (breakpoint, pseudo-state) cell
with data becomes a rule. Source order is fixed (base, desktop pseudo-states,
tablet, mobile, mobilePortrait, custom CSS); all selectors share one id's
specificity, so later rules win and narrower breakpoints override wider ones.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from stylecascade.compiler.declarations import declaration_block
from stylecascade.compiler.styling import compile_styling
from stylecascade.model.enums import Breakpoint
from stylecascade.model.tree import StyleTree
from stylecascade.model.view import View

logger = logging.getLogger(__name__)

__all__ = [
    "ROOT_PLACEHOLDER",
    "build_rule",
    "scope_custom_css",
    "assemble_rules",
    "render_element_css",
]

ROOT_PLACEHOLDER = "%root%"


def scope_custom_css(css: str, element_id: str) -> str:
    """Replace every ``%root%`` in *css* with ``#<element_id>``, once, verbatim."""
    return css.replace(ROOT_PLACEHOLDER, f"#{element_id}")


def build_rule(
    selector: str, properties: Mapping[str, str], breakpoint: Breakpoint = Breakpoint.DESKTOP
) -> str | None:
    """Render one rule, wrapped in the breakpoint's media query if it has one.

    Returns None for an empty property map; an empty ``{}`` block is never emitted.
    """
    if not properties:
        return None
    if breakpoint.is_root:
        return f"{selector} {{\n{declaration_block(properties)}\n}}"
    return (
        f"{breakpoint.media_query} {{\n"
        f"  {selector} {{\n{declaration_block(properties)}\n  }}\n"
        f"}}"
    )


def _selector(element_id: str, view: View) -> str:
    return f"#{element_id}{view.pseudo_state.selector}"


def assemble_rules(
    tree: StyleTree,
    element_id: str,
    custom_css: str | None = None,
    *,
    include_base: bool = True,
) -> list[str]:
    """Return the element's CSS rules in cascade source order.

    With ``include_base=False`` the desktop/default rule is skipped; the live
    editor applies that layer as an inline style instead.
    """
    rules: list[str] = []
    for view, layer in tree.iter_layers():
        if view.is_base and not include_base:
            continue
        rule = build_rule(_selector(element_id, view), compile_styling(layer).properties, view.breakpoint)
        if rule is not None:
            rules.append(rule)

    if custom_css:
        rules.append(scope_custom_css(custom_css, element_id))

    logger.debug("Assembled %d rule(s) for #%s", len(rules), element_id)
    return rules


def render_element_css(tree: StyleTree, element_id: str, custom_css: str | None = None) -> str:
    """Return the element's full CSS text, rules separated by a blank line."""
    return "\n\n".join(assemble_rules(tree, element_id, custom_css))
