"""Editor output: inline styles, injected rules, and attributes for one element."""

from __future__ import annotations

from stylecascade.compiler.styling import compile_styling
from stylecascade.model.metadata import ElementMetadata
from stylecascade.model.output import GeneratedCSSOutput
from stylecascade.model.tree import StyleTree
from stylecascade.stylesheet.assembler import assemble_rules


def generate_output(tree: StyleTree, metadata: ElementMetadata) -> GeneratedCSSOutput:
    """Build the live editor's view of an element.

    The desktop base layer becomes the inline style. Pseudo-state and
    breakpoint rules plus scoped custom CSS become rule blocks for the
    element's style tag. The rule text comes from the same assembler the
    publish path uses. Without an element id there is no selector to scope
    rules to, so only the inline style and attributes are produced.
    """
    rule_blocks: tuple[str, ...] = ()
    if metadata.element_id:
        rule_blocks = tuple(
            assemble_rules(tree, metadata.element_id, metadata.custom_css, include_base=False)
        )
    return GeneratedCSSOutput(
        inline_style=compile_styling(tree.base).properties,
        class_name=" ".join(c for c in metadata.applied_classes if c),
        rule_blocks=rule_blocks,
        attributes=metadata.attribute_map(),
    )
