"""The editor's current view: one breakpoint crossed with one pseudo-state."""

from __future__ import annotations

from dataclasses import dataclass

from stylecascade.model.enums import Breakpoint, PseudoClass


@dataclass(frozen=True)
class View:
    """A (breakpoint, pseudo-state) cell of the style tree."""

    breakpoint: Breakpoint = Breakpoint.DESKTOP
    pseudo_state: PseudoClass = PseudoClass.DEFAULT

    @classmethod
    def parse(cls, breakpoint: str | None = None, pseudo_state: str | None = None) -> View:
        """Build a view from raw names, defaulting to desktop/default.

        Raises UnknownViewError for names outside the enumerations.
        """
        return cls(
            breakpoint=Breakpoint.parse(breakpoint) if breakpoint else Breakpoint.DESKTOP,
            pseudo_state=PseudoClass.parse(pseudo_state) if pseudo_state else PseudoClass.DEFAULT,
        )

    @property
    def is_base(self) -> bool:
        """True for desktop + default, the only cell stored directly on ``base``."""
        return self.breakpoint.is_root and self.pseudo_state.is_default

    def __str__(self) -> str:
        return f"{self.breakpoint.value}/{self.pseudo_state.value}"
