"""Category compilers: one pure function per style category.

Each compiler takes the (partial) settings mapping of its category and returns
an ordered ``PropertyMap`` of kebab-case CSS properties. Missing or unusable
fields produce no output; nothing here raises on odd input.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from stylecascade.compiler.units import (
    differs_from,
    ensure_unit,
    format_value,
    is_unset,
    is_zero_value,
    px_number,
)

PropertyMap = dict[str, str]

__all__ = [
    "PropertyMap",
    "compile_layout",
    "compile_background",
    "compile_gradient",
    "compile_border",
    "compile_typography",
    "compile_transform",
    "compile_transform_origin",
    "compile_transition",
    "compile_filter",
    "compile_backdrop_filter",
    "compile_box_shadow",
]

_SIDES = ("top", "right", "bottom", "left")
_CORNERS = ("topLeft", "topRight", "bottomRight", "bottomLeft")


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _items(value: Any) -> list[Mapping[str, Any]]:
    if isinstance(value, Sequence) and not isinstance(value, str):
        return [v for v in value if isinstance(v, Mapping)]
    return []


def _join(*parts: Any) -> str:
    """Space-join the parts that are actually set."""
    return " ".join(format_value(p) for p in parts if not is_unset(p))


def _px(value: Any, default: int = 0) -> str:
    return f"{format_value(default if is_unset(value) else value)}px"


def _put(css: PropertyMap, prop: str, value: Any) -> None:
    if not is_unset(value):
        css[prop] = format_value(value)


def _is_blank_number(value: Any) -> bool:
    """True for unset values and a numeric zero."""
    if isinstance(value, bool):
        return False
    return is_unset(value) or (isinstance(value, (int, float)) and value == 0)


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def compile_layout(layout: Mapping[str, Any]) -> PropertyMap:
    css: PropertyMap = {}

    _put(css, "display", layout.get("display"))

    pos = _mapping(layout.get("position"))
    position = pos.get("position")
    if not is_unset(position) and position != "static":
        css["position"] = format_value(position)
        for side in _SIDES:
            if not is_unset(pos.get(side)):
                css[side] = ensure_unit(pos[side])
        _put(css, "z-index", pos.get("zIndex"))

    dims = _mapping(layout.get("dimensions"))
    for key, prop in (("width", "width"), ("height", "height")):
        value = dims.get(key)
        if not is_unset(value) and value != "auto":
            css[prop] = ensure_unit(value)
    for key, prop in (
        ("minWidth", "min-width"),
        ("maxWidth", "max-width"),
        ("minHeight", "min-height"),
        ("maxHeight", "max-height"),
    ):
        if not is_unset(dims.get(key)):
            css[prop] = ensure_unit(dims[key])

    for box in ("margin", "padding"):
        spacing = _mapping(layout.get(box))
        for side in _SIDES:
            value = spacing.get(side)
            if not is_zero_value(value):
                css[f"{box}-{side}"] = ensure_unit(value)

    overflow = layout.get("overflow")
    if not is_unset(overflow) and overflow != "visible":
        css["overflow"] = format_value(overflow)
    _put(css, "overflow-x", layout.get("overflowX"))
    _put(css, "overflow-y", layout.get("overflowY"))

    if layout.get("display") == "flex":
        flex = _mapping(layout.get("flex"))
        _put(css, "flex-direction", flex.get("direction"))
        _put(css, "flex-wrap", flex.get("wrap"))
        _put(css, "justify-content", flex.get("justifyContent"))
        _put(css, "align-items", flex.get("alignItems"))
        _put(css, "align-content", flex.get("alignContent"))
        for key, prop in (("gap", "gap"), ("rowGap", "row-gap"), ("columnGap", "column-gap")):
            if not is_unset(flex.get(key)):
                css[prop] = ensure_unit(flex[key])

    item = _mapping(layout.get("flexItem"))
    if differs_from(item.get("order"), 0):
        css["order"] = format_value(item["order"])
    if differs_from(item.get("flexGrow"), 0):
        css["flex-grow"] = format_value(item["flexGrow"])
    if differs_from(item.get("flexShrink"), 1):
        css["flex-shrink"] = format_value(item["flexShrink"])
    basis = item.get("flexBasis")
    if not is_unset(basis) and basis != "auto":
        css["flex-basis"] = ensure_unit(basis)
    align_self = item.get("alignSelf")
    if not is_unset(align_self) and align_self != "auto":
        css["align-self"] = format_value(align_self)

    return css


# ---------------------------------------------------------------------------
# Background
# ---------------------------------------------------------------------------


def compile_gradient(gradient: Mapping[str, Any]) -> str:
    """Render a linear or radial gradient with ``"<color> <pos>%"`` stops."""
    stops = ", ".join(
        f"{format_value(stop.get('color'))} {format_value(stop.get('position', 0))}%"
        for stop in _items(gradient.get("stops"))
    )
    if gradient.get("type", "linear") == "linear":
        angle = gradient.get("angle")
        return f"linear-gradient({format_value(180 if is_unset(angle) else angle)}deg, {stops})"
    shape = gradient.get("shape") or "circle"
    return f"radial-gradient({format_value(shape)}, {stops})"


def compile_background(background: Mapping[str, Any]) -> PropertyMap:
    css: PropertyMap = {}
    kind = background.get("type")

    if kind == "color":
        _put(css, "background-color", background.get("color"))

    elif kind == "gradient":
        gradient = background.get("gradient")
        if isinstance(gradient, Mapping):
            css["background"] = compile_gradient(gradient)

    elif kind == "image":
        image = background.get("image")
        if not isinstance(image, Mapping):
            return css
        if not is_unset(image.get("url")):
            css["background-image"] = f"url({format_value(image['url'])})"

        size = image.get("size")
        if size == "custom":
            css["background-size"] = (
                f"{format_value(image.get('customWidth') or 'auto')} "
                f"{format_value(image.get('customHeight') or 'auto')}"
            )
        else:
            _put(css, "background-size", size)

        position = image.get("position")
        if position == "custom":
            css["background-position"] = (
                f"{format_value(image.get('customX') or '50%')} "
                f"{format_value(image.get('customY') or '50%')}"
            )
        elif not is_unset(position):
            css["background-position"] = format_value(position).replace("-", " ")

        _put(css, "background-repeat", image.get("repeat"))
        _put(css, "background-attachment", image.get("attachment"))

    return css


# ---------------------------------------------------------------------------
# Border
# ---------------------------------------------------------------------------


def compile_border(border: Mapping[str, Any]) -> PropertyMap:
    css: PropertyMap = {}

    for side in _SIDES:
        edge = _mapping(border.get(side))
        width = px_number(edge.get("width"))
        style = edge.get("style")
        if width is None or width <= 0 or is_unset(style) or style == "none":
            continue
        css[f"border-{side}"] = _join(_px(width), style, edge.get("color"))

    radius = border.get("radius")
    if isinstance(radius, Mapping):
        corners = [radius.get(corner) or "0" for corner in _CORNERS]
        if not all(is_zero_value(c) for c in corners):
            css["border-radius"] = " ".join(ensure_unit(c) for c in corners)

    return css


# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------


def compile_typography(typography: Mapping[str, Any]) -> PropertyMap:
    css: PropertyMap = {}

    _put(css, "font-family", typography.get("fontFamily"))
    _put(css, "font-size", typography.get("fontSize"))
    if not _is_blank_number(typography.get("fontWeight")):
        css["font-weight"] = format_value(typography["fontWeight"])
    if typography.get("fontStyle") not in (None, "", "normal"):
        css["font-style"] = format_value(typography["fontStyle"])
    if not _is_blank_number(typography.get("lineHeight")):
        css["line-height"] = format_value(typography["lineHeight"])
    for key, prop in (("letterSpacing", "letter-spacing"), ("wordSpacing", "word-spacing")):
        if not _is_blank_number(typography.get(key)) and typography[key] != "0":
            css[prop] = format_value(typography[key])
    _put(css, "text-align", typography.get("textAlign"))
    if typography.get("textTransform") not in (None, "", "none"):
        css["text-transform"] = format_value(typography["textTransform"])
    if typography.get("textDecoration") not in (None, "", "none"):
        css["text-decoration"] = _join(
            typography["textDecoration"],
            typography.get("textDecorationStyle"),
            typography.get("textDecorationColor"),
        )
    _put(css, "color", typography.get("color"))

    shadows = _items(typography.get("textShadow"))
    if shadows:
        css["text-shadow"] = ", ".join(
            _join(_px(s.get("x")), _px(s.get("y")), _px(s.get("blur")), s.get("color"))
            for s in shadows
        )

    return css


# ---------------------------------------------------------------------------
# Transform
# ---------------------------------------------------------------------------


def compile_transform(transform: Mapping[str, Any]) -> str | None:
    """Return the ``transform`` function list, or None when nothing applies."""
    functions: list[str] = []

    for axis in "XYZ":
        value = transform.get(f"translate{axis}")
        if not is_zero_value(value):
            functions.append(f"translate{axis}({format_value(value)})")
    for axis in "XYZ":
        value = transform.get(f"rotate{axis}")
        if differs_from(value, 0):
            functions.append(f"rotate{axis}({format_value(value)}deg)")
    for axis in "XY":
        value = transform.get(f"scale{axis}")
        if differs_from(value, 1):
            functions.append(f"scale{axis}({format_value(value)})")
    for axis in "XY":
        value = transform.get(f"skew{axis}")
        if differs_from(value, 0):
            functions.append(f"skew{axis}({format_value(value)}deg)")
    perspective = transform.get("perspective")
    if not is_unset(perspective) and perspective != "none":
        functions.append(f"perspective({format_value(perspective)})")

    return " ".join(functions) if functions else None


def compile_transform_origin(transform: Mapping[str, Any]) -> str:
    def axis(name: str) -> str:
        value = transform.get(f"origin{name}")
        if value == "custom":
            return format_value(transform.get(f"origin{name}Custom") or "center")
        return format_value(value or "center")

    return f"{axis('X')} {axis('Y')}"


# ---------------------------------------------------------------------------
# Transition
# ---------------------------------------------------------------------------


def compile_transition(transition: Mapping[str, Any]) -> str:
    """Return the ``transition`` shorthand, or ``""`` when transitions are off."""
    if not transition.get("enabled"):
        return ""

    if transition.get("property") == "custom":
        prop = transition.get("customProperty") or "all"
    else:
        prop = transition.get("property") or "all"

    duration = transition.get("duration")
    delay = transition.get("delay")
    timing = transition.get("timingFunction") or "ease"
    points = transition.get("cubicBezier")
    if timing == "cubic-bezier":
        if isinstance(points, Sequence) and not isinstance(points, str) and len(points) == 4:
            timing = f"cubic-bezier({', '.join(format_value(p) for p in points)})"
        else:
            timing = "ease"

    return (
        f"{format_value(prop)} "
        f"{format_value(300 if is_unset(duration) else duration)}ms "
        f"{format_value(timing)} "
        f"{format_value(0 if is_unset(delay) else delay)}ms"
    )


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------

# (setting key, css function, neutral value, unit), in output order.
_FILTER_FUNCTIONS: tuple[tuple[str, str, float, str], ...] = (
    ("blur", "blur", 0, "px"),
    ("brightness", "brightness", 100, "%"),
    ("contrast", "contrast", 100, "%"),
    ("grayscale", "grayscale", 0, "%"),
    ("saturate", "saturate", 100, "%"),
    ("hueRotate", "hue-rotate", 0, "deg"),
    ("invert", "invert", 0, "%"),
    ("sepia", "sepia", 0, "%"),
    ("opacity", "opacity", 100, "%"),
)
_BACKDROP_FUNCTIONS = _FILTER_FUNCTIONS[:5]


def _filter_list(settings: Mapping[str, Any], functions) -> str | None:
    parts = [
        f"{name}({format_value(settings[key])}{unit})"
        for key, name, neutral, unit in functions
        if differs_from(settings.get(key), neutral)
    ]
    return " ".join(parts) if parts else None


def compile_filter(settings: Mapping[str, Any]) -> str | None:
    return _filter_list(settings, _FILTER_FUNCTIONS)


def compile_backdrop_filter(settings: Mapping[str, Any]) -> str | None:
    if settings.get("enabled") is not True:
        return None
    return _filter_list(settings, _BACKDROP_FUNCTIONS)


# ---------------------------------------------------------------------------
# Box shadow
# ---------------------------------------------------------------------------


def compile_box_shadow(shadows: Any) -> str | None:
    entries = _items(shadows)
    if not entries:
        return None
    return ", ".join(
        ("inset " if s.get("inset") else "")
        + _join(_px(s.get("x")), _px(s.get("y")), _px(s.get("blur")), _px(s.get("spread")), s.get("color"))
        for s in entries
    )
