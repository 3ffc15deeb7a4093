"""Default settings the editor shows for a freshly created element."""

from __future__ import annotations

import copy
from typing import Any

from stylecascade.compiler.units import px_number, to_number
from stylecascade.model.tree import AdvancedStyling

_ZERO_SPACING = {"top": "0", "right": "0", "bottom": "0", "left": "0", "linked": True}
_NO_BORDER = {"width": 0, "style": "none", "color": "#000000"}

DEFAULT_ADVANCED_STYLING: AdvancedStyling = {
    "layout": {
        "display": "block",
        "position": {"position": "static"},
        "dimensions": {
            "width": "auto",
            "height": "auto",
            "minWidth": "",
            "maxWidth": "",
            "minHeight": "",
            "maxHeight": "",
        },
        "margin": dict(_ZERO_SPACING),
        "padding": dict(_ZERO_SPACING),
        "overflow": "visible",
    },
    "background": {"type": "none"},
    "border": {
        "top": dict(_NO_BORDER),
        "right": dict(_NO_BORDER),
        "bottom": dict(_NO_BORDER),
        "left": dict(_NO_BORDER),
        "linked": True,
        "radius": {"topLeft": "0", "topRight": "0", "bottomRight": "0", "bottomLeft": "0", "linked": True},
    },
    "transform": {
        "translateX": "0",
        "translateY": "0",
        "translateZ": "0",
        "rotateX": 0,
        "rotateY": 0,
        "rotateZ": 0,
        "scaleX": 1,
        "scaleY": 1,
        "skewX": 0,
        "skewY": 0,
        "perspective": "none",
        "originX": "center",
        "originY": "center",
    },
    "transition": {
        "enabled": False,
        "property": "all",
        "duration": 300,
        "timingFunction": "ease",
        "delay": 0,
    },
    "filter": {
        "blur": 0,
        "brightness": 100,
        "contrast": 100,
        "grayscale": 0,
        "saturate": 100,
        "hueRotate": 0,
        "invert": 0,
        "sepia": 0,
        "opacity": 100,
    },
    "backdropFilter": {
        "enabled": False,
        "blur": 0,
        "brightness": 100,
        "contrast": 100,
        "grayscale": 0,
        "saturate": 100,
    },
    "boxShadow": [],
}


def default_styling() -> AdvancedStyling:
    """Return a fresh copy of the defaults, safe to modify."""
    return copy.deepcopy(DEFAULT_ADVANCED_STYLING)


def _sides_nonzero(spacing: dict[str, Any] | None) -> bool:
    if not spacing:
        return False
    return any(spacing.get(side, "0") != "0" for side in ("top", "right", "bottom", "left"))


def has_styling_values(styling: AdvancedStyling | None) -> bool:
    """Return True if *styling* holds anything beyond the editor defaults.

    This is a quick check on the values users change most often, not a full
    comparison against DEFAULT_ADVANCED_STYLING.
    """
    if not styling:
        return False

    layout = styling.get("layout") or {}
    if layout:
        if layout.get("display") and layout["display"] != "block":
            return True
        if (layout.get("position") or {}).get("position", "static") != "static":
            return True
        dimensions = layout.get("dimensions") or {}
        if dimensions.get("width", "auto") not in ("", "auto"):
            return True
        if dimensions.get("height", "auto") not in ("", "auto"):
            return True
        if _sides_nonzero(layout.get("margin")) or _sides_nonzero(layout.get("padding")):
            return True

    if (styling.get("background") or {}).get("type", "none") != "none":
        return True
    if (px_number(((styling.get("border") or {}).get("top") or {}).get("width")) or 0) > 0:
        return True
    if (styling.get("typography") or {}).get("color"):
        return True

    transform = styling.get("transform") or {}
    if transform:
        if transform.get("translateX", "0") != "0" or transform.get("translateY", "0") != "0":
            return True
        if transform.get("rotateZ", 0) != 0:
            return True
        if transform.get("scaleX", 1) != 1 or transform.get("scaleY", 1) != 1:
            return True

    if styling.get("boxShadow"):
        return True
    if (to_number((styling.get("filter") or {}).get("blur")) or 0) > 0:
        return True
    return False
