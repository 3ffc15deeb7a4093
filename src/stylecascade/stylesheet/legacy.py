"""Declarations for elements saved before advanced styling existed.

Older pages stored a handful of flat props per component (numbers in pixels,
enum-like keywords). The page renderer falls back to these when an element
has no advanced styling.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from stylecascade.compiler.categories import PropertyMap
from stylecascade.compiler.units import format_value, to_number

_CONTAINER_TYPES = ("Container", "Div", "Section")
_TEXT_TYPES = ("Text", "Heading")

_FLEX_DIRECTIONS = {
    "row": "row",
    "column": "column",
    "row-reverse": "row-reverse",
    "column-reverse": "column-reverse",
}
_JUSTIFY = {
    "start": "flex-start",
    "center": "center",
    "end": "flex-end",
    "between": "space-between",
    "around": "space-around",
    "evenly": "space-evenly",
}
_ROW_JUSTIFY = {k: v for k, v in _JUSTIFY.items() if k != "evenly"}
_ALIGN = {
    "start": "flex-start",
    "center": "center",
    "end": "flex-end",
    "stretch": "stretch",
    "baseline": "baseline",
}
_FONT_WEIGHTS = {"normal": "400", "medium": "500", "semibold": "600", "bold": "700"}
_BUTTON_PADDING = {"sm": "8px 16px", "md": "10px 20px", "lg": "14px 28px"}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _px(value: Any) -> str:
    return f"{format_value(value)}px"


def _first_set(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def legacy_props_to_declarations(props: Mapping[str, Any], component_type: str) -> PropertyMap:
    """Translate flat legacy component props into CSS properties."""
    css: PropertyMap = {}

    for box in ("padding", "margin"):
        for side in ("Top", "Right", "Bottom", "Left"):
            value = _first_set(props.get(f"{box}{side}"), props.get(box))
            if value:
                css[f"{box}-{side.lower()}"] = _px(value)

    background = props.get("backgroundColor")
    if background and background != "transparent":
        css["background-color"] = format_value(background)
    if props.get("borderRadius"):
        css["border-radius"] = _px(props["borderRadius"])
    if (to_number(props.get("borderWidth")) or 0) > 0:
        css["border"] = f"{_px(props['borderWidth'])} solid {props.get('borderColor') or '#e5e7eb'}"
    if props.get("minHeight"):
        css["min-height"] = _px(props["minHeight"])

    if component_type in _CONTAINER_TYPES:
        if props.get("gap"):
            css["gap"] = _px(props["gap"])
        display = props.get("display") or "flex"
        css["display"] = format_value(display)
        if display == "flex":
            if props.get("flexDirection"):
                css["flex-direction"] = _FLEX_DIRECTIONS.get(str(props["flexDirection"]), "column")
            if props.get("justifyContent"):
                css["justify-content"] = _JUSTIFY.get(str(props["justifyContent"]), "flex-start")
            if props.get("alignItems"):
                css["align-items"] = _ALIGN.get(str(props["alignItems"]), "stretch")
        if props.get("width") == "full":
            css["width"] = "100%"
        elif props.get("width") == "fit":
            css["width"] = "fit-content"

    if component_type == "Section":
        if props.get("contentWidth") == "full":
            css["width"] = "100%"
        elif props.get("contentWidth") == "boxed":
            css["max-width"] = f"{format_value(props.get('maxWidth') or '1280')}px"

    if component_type == "Row":
        css["display"] = "flex"
        if props.get("gap"):
            css["gap"] = _px(props["gap"])
        if props.get("justifyContent"):
            css["justify-content"] = _ROW_JUSTIFY.get(str(props["justifyContent"]), "flex-start")
        if props.get("alignItems"):
            css["align-items"] = format_value(props["alignItems"])
        if props.get("wrap") is not False:
            css["flex-wrap"] = "wrap"

    if component_type == "Column":
        css["display"] = "flex"
        css["flex-direction"] = "column"
        if props.get("width"):
            css["width"] = format_value(props["width"])
        if props.get("flexGrow"):
            css["flex-grow"] = format_value(props["flexGrow"])
        if props.get("flexBasis"):
            css["flex-basis"] = format_value(props["flexBasis"])

    if component_type in _TEXT_TYPES:
        if props.get("fontSize"):
            css["font-size"] = _px(props["fontSize"])
        if props.get("color"):
            css["color"] = format_value(props["color"])
        if props.get("lineHeight"):
            css["line-height"] = format_value(props["lineHeight"])
        if props.get("letterSpacing"):
            css["letter-spacing"] = _px(props["letterSpacing"])
        if props.get("fontWeight"):
            css["font-weight"] = _FONT_WEIGHTS.get(str(props["fontWeight"]), "400")
        if props.get("textAlign"):
            css["text-align"] = format_value(props["textAlign"])

    if component_type == "Image":
        if props.get("objectFit"):
            css["object-fit"] = format_value(props["objectFit"])
        if props.get("width") == "full":
            css["width"] = "100%"
        elif _is_number(props.get("width")):
            css["width"] = _px(props["width"])
        if _is_number(props.get("height")):
            css["height"] = _px(props["height"])

    if component_type == "Button":
        css["display"] = "inline-flex"
        css["align-items"] = "center"
        css["justify-content"] = "center"
        css["cursor"] = "pointer"
        css["text-decoration"] = "none"
        if props.get("fullWidth"):
            css["width"] = "100%"
        if props.get("textColor"):
            css["color"] = format_value(props["textColor"])
        if props.get("backgroundColor"):
            css["background-color"] = format_value(props["backgroundColor"])
        css["padding"] = _BUTTON_PADDING.get(str(props.get("size") or "md"), "10px 20px")

    if component_type == "Divider":
        css["border"] = "none"
        style = props.get("style") or "solid"
        color = props.get("color") or "#e5e7eb"
        css["width"] = f"{format_value(props.get('width') or 100)}%"
        css["border-top"] = f"{format_value(props.get('thickness') or 1)}px {style} {color}"

    if component_type == "Spacer":
        css["height"] = f"{format_value(props.get('height') or 40)}px"

    return css
