"""Closed enumerations: style categories, breakpoints, and pseudo-states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from stylecascade.errors import UnknownViewError


class StyleCategory(StrEnum):
    """Top-level keys of an AdvancedStyling mapping, in merge order."""

    LAYOUT = "layout"
    BACKGROUND = "background"
    BORDER = "border"
    TYPOGRAPHY = "typography"
    TRANSFORM = "transform"
    TRANSITION = "transition"
    FILTER = "filter"
    BACKDROP_FILTER = "backdropFilter"
    BOX_SHADOW = "boxShadow"

    @classmethod
    def parse(cls, name: str) -> StyleCategory:
        try:
            return cls(name)
        except ValueError:
            raise UnknownViewError(f"Unknown style category: {name!r}") from None


@dataclass(frozen=True)
class BreakpointInfo:
    """Static description of a breakpoint tier."""

    label: str
    max_width: int | None  # None for desktop, the cascade root
    min_width: int
    canvas_width: int
    canvas_height: int


class Breakpoint(StrEnum):
    """Viewport tiers ordered from widest to narrowest."""

    DESKTOP = "desktop"
    TABLET = "tablet"
    MOBILE = "mobile"
    MOBILE_PORTRAIT = "mobilePortrait"

    @classmethod
    def parse(cls, name: str) -> Breakpoint:
        try:
            return cls(name)
        except ValueError:
            raise UnknownViewError(f"Unknown breakpoint: {name!r}") from None

    @property
    def info(self) -> BreakpointInfo:
        return _BREAKPOINT_INFO[self]

    @property
    def rank(self) -> int:
        """Position in the widest-to-narrowest order (desktop is 0)."""
        return _BREAKPOINT_ORDER.index(self)

    @property
    def max_width(self) -> int | None:
        return self.info.max_width

    @property
    def label(self) -> str:
        return self.info.label

    @property
    def is_root(self) -> bool:
        return self is Breakpoint.DESKTOP

    @property
    def media_query(self) -> str:
        """The ``@media`` prelude that scopes rules to this breakpoint.

        Desktop rules are emitted unwrapped by the assembler; the min-width form
        returned here is only used by callers that want an explicit desktop query.
        """
        if self.is_root:
            return f"@media (min-width: {self.info.min_width}px)"
        return f"@media (max-width: {self.info.max_width}px)"

    @classmethod
    def responsive(cls) -> tuple[Breakpoint, ...]:
        """Every breakpoint except desktop, widest first."""
        return _BREAKPOINT_ORDER[1:]


_BREAKPOINT_ORDER: tuple[Breakpoint, ...] = (
    Breakpoint.DESKTOP,
    Breakpoint.TABLET,
    Breakpoint.MOBILE,
    Breakpoint.MOBILE_PORTRAIT,
)

_BREAKPOINT_INFO: dict[Breakpoint, BreakpointInfo] = {
    Breakpoint.DESKTOP: BreakpointInfo("Desktop", None, 993, 1280, 900),
    Breakpoint.TABLET: BreakpointInfo("Tablet", 992, 769, 768, 1024),
    Breakpoint.MOBILE: BreakpointInfo("Mobile", 768, 480, 375, 667),
    Breakpoint.MOBILE_PORTRAIT: BreakpointInfo("Mobile Portrait", 479, 0, 320, 568),
}


class PseudoClass(StrEnum):
    """Pseudo-classes and pseudo-elements an element can be styled for.

    ``DEFAULT`` means no pseudo selector and never appears as a key in a
    pseudo-state map.
    """

    DEFAULT = "default"
    HOVER = "hover"
    ACTIVE = "active"
    FOCUS = "focus"
    FOCUS_WITHIN = "focus-within"
    FOCUS_VISIBLE = "focus-visible"
    VISITED = "visited"
    DISABLED = "disabled"
    FIRST_CHILD = "first-child"
    LAST_CHILD = "last-child"
    BEFORE = "before"
    AFTER = "after"

    @classmethod
    def parse(cls, name: str) -> PseudoClass:
        try:
            return cls(name)
        except ValueError:
            raise UnknownViewError(f"Unknown pseudo-state: {name!r}") from None

    @property
    def is_default(self) -> bool:
        return self is PseudoClass.DEFAULT

    @property
    def selector(self) -> str:
        """Selector suffix appended to ``#<elementId>``."""
        if self.is_default:
            return ""
        if self in (PseudoClass.BEFORE, PseudoClass.AFTER):
            return f"::{self.value}"
        return f":{self.value}"

    @property
    def label(self) -> str:
        return "Default" if self.is_default else self.selector

    @classmethod
    def states(cls) -> tuple[PseudoClass, ...]:
        """Every pseudo-state that can key a pseudo-state map."""
        return tuple(p for p in cls if not p.is_default)
