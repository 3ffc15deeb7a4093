"""Loading element documents from JSON (files, request bodies)."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from stylecascade.errors import StyleTreeError
from stylecascade.model.metadata import ElementMetadata
from stylecascade.model.tree import StyleTree

logger = logging.getLogger(__name__)

TREE_KEYS = ("styleTree", "tree")


def load_element(data: Any, fallback_id: str = "element") -> tuple[StyleTree, ElementMetadata]:
    """Split an element document into its style tree and metadata.

    Accepts either a bare tree (``{"base": ..., "breakpoints": ...}``) or an
    element document wrapping one: ``{"styleTree": ..., "metadata": ...}``
    (``"tree"`` is accepted as an alias for ``"styleTree"``).
    """
    if not isinstance(data, Mapping):
        raise StyleTreeError("expected a JSON object", "document")
    for key in TREE_KEYS:
        if key in data:
            tree = StyleTree.from_dict(data[key])
            metadata = ElementMetadata.from_dict(data.get("metadata"), fallback_id)
            return tree, metadata
    return StyleTree.from_dict(data), ElementMetadata(element_id=fallback_id)


def read_json(path: str | Path) -> Any:
    """Read a JSON document, reporting malformed input as a StyleTreeError."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise StyleTreeError(f"invalid JSON: {exc.msg} (line {exc.lineno})", path.name) from exc
    logger.debug("Loaded %s", path)
    return data


def read_element(path: str | Path, fallback_id: str = "element") -> tuple[StyleTree, ElementMetadata]:
    return load_element(read_json(path), fallback_id)
