"""Scoped style tag: one injected ``<style>`` element per styled element.

The tag is acquired on the first non-empty CSS, its text is replaced (never
appended) on every update, and it is released when the CSS becomes empty or
the owner goes away. Use :class:`ScopedStyleTag` as a context manager so the
release also happens when rendering fails.
"""

from __future__ import annotations

import html
import logging
from typing import Protocol

logger = logging.getLogger(__name__)

__all__ = ["StyleElement", "StyleHost", "InMemoryStyleHost", "ScopedStyleTag"]

ELEMENT_ATTRIBUTE = "data-pp-element"


class StyleElement(Protocol):
    """A mounted ``<style>`` element."""

    text: str

    def remove(self) -> None: ...


class StyleHost(Protocol):
    """The document head that style elements are mounted into."""

    def append_style(self, element_id: str) -> StyleElement: ...


class _HeadStyle:
    def __init__(self, host: InMemoryStyleHost, element_id: str) -> None:
        self._host = host
        self.element_id = element_id
        self.text = ""

    def remove(self) -> None:
        self._host._styles.remove(self)


class InMemoryStyleHost:
    """A document head kept in memory, for server-side previews and tests."""

    def __init__(self) -> None:
        self._styles: list[_HeadStyle] = []

    def append_style(self, element_id: str) -> StyleElement:
        style = _HeadStyle(self, element_id)
        self._styles.append(style)
        return style

    def styles_for(self, element_id: str) -> list[str]:
        """Text of every mounted style element owned by *element_id*."""
        return [s.text for s in self._styles if s.element_id == element_id]

    def __len__(self) -> int:
        return len(self._styles)

    def render(self) -> str:
        """Serialise the mounted styles as HTML."""
        return "\n".join(
            f'<style {ELEMENT_ATTRIBUTE}="{html.escape(s.element_id, quote=True)}">{s.text}</style>'
            for s in self._styles
        )


class ScopedStyleTag:
    """Owns the style element of one element id on one host."""

    def __init__(self, host: StyleHost, element_id: str) -> None:
        self._host = host
        self.element_id = element_id
        self._element: StyleElement | None = None

    @property
    def is_mounted(self) -> bool:
        return self._element is not None

    def sync(self, css: str) -> None:
        """Make the mounted CSS equal *css*, mounting or releasing as needed."""
        if not css:
            self.release()
            return
        if self._element is None:
            self._element = self._host.append_style(self.element_id)
            logger.debug("Mounted style tag for #%s", self.element_id)
        self._element.text = css

    def release(self) -> None:
        """Remove the style element if mounted. Safe to call repeatedly."""
        element, self._element = self._element, None
        if element is not None:
            element.remove()
            logger.debug("Released style tag for #%s", self.element_id)

    def __enter__(self) -> ScopedStyleTag:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
