"""Page-level CSS for the publish pipeline."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from stylecascade.model.metadata import ElementMetadata, element_id_for
from stylecascade.model.tree import StyleTree
from stylecascade.stylesheet.assembler import build_rule, render_element_css
from stylecascade.stylesheet.legacy import legacy_props_to_declarations

logger = logging.getLogger(__name__)

__all__ = ["join_element_css", "render_page_css"]

ROOT_NODE_ID = "ROOT"


def join_element_css(elements: Iterable[tuple[StyleTree, ElementMetadata]]) -> str:
    """Concatenate the CSS of several elements in the order given."""
    blobs = (
        render_element_css(tree, metadata.element_id, metadata.custom_css)
        for tree, metadata in elements
    )
    return "\n\n".join(blob for blob in blobs if blob)


def render_page_css(
    nodes: Mapping[str, Any], root_id: str = ROOT_NODE_ID, id_prefix: str = "pp-"
) -> str:
    """Walk a serialised editor node map and return the page's CSS.

    Nodes are visited depth first in document order (children, then linked
    slots). Hidden nodes and their subtrees are skipped. An element with no
    advanced base styling gets a base rule from its legacy props, placed
    ahead of its pseudo-state and breakpoint rules.
    """
    blocks: list[str] = []
    seen: set[str] = set()
    _collect(nodes, root_id, blocks, seen, id_prefix)
    logger.info("Rendered page CSS: %d node(s), %d block(s)", len(seen), len(blocks))
    return "\n\n".join(blocks)


def _collect(
    nodes: Mapping[str, Any], node_id: str, blocks: list[str], seen: set[str], id_prefix: str
) -> None:
    if node_id in seen:
        return
    node = nodes.get(node_id)
    if not isinstance(node, Mapping):
        return
    node_type = node.get("type")
    component_type = node_type.get("resolvedName") if isinstance(node_type, Mapping) else None
    if not component_type or node.get("hidden"):
        return
    seen.add(node_id)

    props = node.get("props") or {}
    raw_metadata = props.get("metadata")
    metadata = ElementMetadata.from_dict(raw_metadata) if raw_metadata else None
    element_id = element_id_for(metadata, node_id, id_prefix)
    custom_css = metadata.custom_css if metadata else ""

    tree = StyleTree.from_props(props)
    if not tree.base:
        legacy = build_rule(f"#{element_id}", legacy_props_to_declarations(props, component_type))
        if legacy:
            blocks.append(legacy)

    if not tree.is_empty or custom_css:
        css = render_element_css(tree, element_id, custom_css)
        if css:
            blocks.append(css)

    for child_id in node.get("nodes") or ():
        _collect(nodes, child_id, blocks, seen, id_prefix)
    for linked_id in (node.get("linkedNodes") or {}).values():
        _collect(nodes, linked_id, blocks, seen, id_prefix)
