"""
Richtext component port definitions.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class RulesPort(Protocol):
    """Port for accessing rich text rules configuration."""

    def get_formatting_defaults(self) -> dict[str, Any]:
        """Get default formatting options (snake_case keys)."""
        ...


class SegmentRendererPort(Protocol[T_co]):
    """
    Port for turning segments into output nodes.

    Implementations decide the node type: HTML strings, UI widgets, etc.
    """

    def render_text(self, value: str) -> T_co:
        """Render a literal text run."""
        ...

    def render_separator(self, char: str) -> T_co:
        """Render a break character flanked by zero-width spaces."""
        ...

    def render_long_word(self, value: str, class_name: str | None) -> T_co:
        """Render a long word inside a classed container."""
        ...

    def render_link(self, href: str, text: str, class_name: str | None) -> T_co:
        """Render an anchor opening in a new context without referrer/opener."""
        ...
