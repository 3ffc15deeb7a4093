"""CSS compiler: normalisers, category compilers, and the style-object compiler."""

from stylecascade.compiler.categories import (
    PropertyMap,
    compile_backdrop_filter,
    compile_background,
    compile_border,
    compile_box_shadow,
    compile_filter,
    compile_gradient,
    compile_layout,
    compile_transform,
    compile_transform_origin,
    compile_transition,
    compile_typography,
)
from stylecascade.compiler.declarations import declaration_block, inline_style, to_style_object
from stylecascade.compiler.styling import CompiledStyle, compile_styling, styling_to_css
from stylecascade.compiler.units import ensure_unit, is_zero_value

__all__ = [
    "PropertyMap",
    "is_zero_value",
    "ensure_unit",
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
    "CompiledStyle",
    "compile_styling",
    "styling_to_css",
    "declaration_block",
    "inline_style",
    "to_style_object",
]
