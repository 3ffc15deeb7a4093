"""Error types raised at the engine's boundaries."""

from __future__ import annotations


class StyleCascadeError(Exception):
    """Base class for all stylecascade errors."""


class StyleTreeError(StyleCascadeError):
    """Raised when a persisted style tree does not have the expected shape."""

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        if path:
            message = f"{message} (at {path})"
        super().__init__(message)


class UnknownViewError(StyleCascadeError, ValueError):
    """Raised when a breakpoint or pseudo-state name is not recognised."""
