"""GeneratedCSSOutput: what the editor applies to a rendered element."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class GeneratedCSSOutput:
    """Styles for one element in the live editor.

    Attributes:
        inline_style: Compiled base properties for the element's ``style``.
        class_name: Extra class names for the element.
        rule_blocks: Ordered CSS rules that cannot be inlined (pseudo-states,
            breakpoints, scoped custom CSS), injected through a style tag.
        attributes: Custom HTML attributes.
    """

    inline_style: dict[str, str] = field(default_factory=dict)
    class_name: str = ""
    rule_blocks: tuple[str, ...] = ()
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def css(self) -> str:
        """Rule blocks joined into the text of a single style tag."""
        return "\n\n".join(self.rule_blocks)

    def to_dict(self) -> dict[str, Any]:
        return {
            "inlineStyle": dict(self.inline_style),
            "className": self.class_name,
            "ruleBlocks": list(self.rule_blocks),
            "attributes": dict(self.attributes),
        }
