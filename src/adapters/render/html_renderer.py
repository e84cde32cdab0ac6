import html
from collections.abc import Iterable

from src.components.richtext._impl import render_segments
from src.components.richtext.models import ZWSP, Segment

# Anchors always open in a new browsing context without opener or referrer
LINK_TARGET = "_blank"
LINK_REL = ("noopener", "noreferrer")


def build_link_rel(ugc: bool = False) -> str:
    """Build rel attribute value for links."""
    parts = list(LINK_REL)
    if ugc:
        parts.append("ugc")
    return " ".join(parts)


def _class_attr(class_name: str | None) -> str:
    if class_name is None:
        return ""
    return f' class="{html.escape(class_name)}"'


class HtmlSegmentRenderer:
    """Renders segments as HTML fragments."""

    def __init__(self, ugc: bool = False):
        self.rel = build_link_rel(ugc)

    def render_text(self, value: str) -> str:
        return html.escape(value, quote=False)

    def render_separator(self, char: str) -> str:
        return f"{ZWSP}{html.escape(char, quote=False)}{ZWSP}"

    def render_long_word(self, value: str, class_name: str | None) -> str:
        return f"<span{_class_attr(class_name)}>{html.escape(value, quote=False)}</span>"

    def render_link(self, href: str, text: str, class_name: str | None) -> str:
        # Attribute order: href, class, target, rel
        return (
            f'<a href="{html.escape(href)}"{_class_attr(class_name)} '
            f'target="{LINK_TARGET}" rel="{self.rel}">{html.escape(text, quote=False)}</a>'
        )

    def render(self, segments: Iterable[Segment]) -> str:
        """Render a whole segment sequence to one HTML string."""
        return "".join(render_segments(segments, self))
