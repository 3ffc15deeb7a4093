"""Style-object compiler: one AdvancedStyling layer -> one property map."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from stylecascade.compiler.categories import (
    PropertyMap,
    compile_backdrop_filter,
    compile_background,
    compile_border,
    compile_box_shadow,
    compile_filter,
    compile_layout,
    compile_transform,
    compile_transform_origin,
    compile_transition,
    compile_typography,
)
from stylecascade.model.enums import StyleCategory


@dataclass(frozen=True)
class CompiledStyle:
    """Result of compiling one style layer.

    ``transform_origin`` is reported separately because it is only meaningful
    together with a non-empty ``transform``; it is also present in
    ``properties`` whenever it is set.
    """

    properties: PropertyMap = field(default_factory=dict)
    transform_origin: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.properties


def _section(styling: Mapping[str, Any], category: StyleCategory) -> Mapping[str, Any] | None:
    value = styling.get(category.value)
    return value if isinstance(value, Mapping) else None


def compile_styling(styling: Mapping[str, Any] | None) -> CompiledStyle:
    """Compile every category of *styling* in the fixed category order.

    No two categories emit the same CSS property, so the merge order only fixes
    the key order of the result.
    """
    if not styling:
        return CompiledStyle()

    css: PropertyMap = {}
    origin: str | None = None

    for category, compiler in (
        (StyleCategory.LAYOUT, compile_layout),
        (StyleCategory.BACKGROUND, compile_background),
        (StyleCategory.BORDER, compile_border),
        (StyleCategory.TYPOGRAPHY, compile_typography),
    ):
        section = _section(styling, category)
        if section is not None:
            css.update(compiler(section))

    transform = _section(styling, StyleCategory.TRANSFORM)
    if transform is not None:
        functions = compile_transform(transform)
        if functions:
            origin = compile_transform_origin(transform)
            css["transform"] = functions
            css["transform-origin"] = origin

    transition = _section(styling, StyleCategory.TRANSITION)
    if transition is not None:
        shorthand = compile_transition(transition)
        if shorthand:
            css["transition"] = shorthand

    filters = _section(styling, StyleCategory.FILTER)
    if filters is not None:
        value = compile_filter(filters)
        if value:
            css["filter"] = value

    backdrop = _section(styling, StyleCategory.BACKDROP_FILTER)
    if backdrop is not None:
        value = compile_backdrop_filter(backdrop)
        if value:
            css["backdrop-filter"] = value
            css["-webkit-backdrop-filter"] = value

    shadow = compile_box_shadow(styling.get(StyleCategory.BOX_SHADOW.value))
    if shadow:
        css["box-shadow"] = shadow

    return CompiledStyle(properties=css, transform_origin=origin)


def styling_to_css(styling: Mapping[str, Any] | None) -> PropertyMap:
    """Shortcut for ``compile_styling(styling).properties``."""
    return compile_styling(styling).properties
