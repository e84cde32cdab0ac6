"""
Richtext component data model and input/output models.

Segments are a closed union of frozen dataclasses. Renderers dispatch on the
concrete type; no variant shares a base class with another.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ZWSP = "\u200b"

DEFAULT_BREAK_CHARS = ",/"
DEFAULT_LONG_WORD_MIN_LENGTH = 20


# --- Segments ---


@dataclass(frozen=True)
class Text:
    """Literal text, rendered as-is."""

    value: str


@dataclass(frozen=True)
class ZwspSeparator:
    """Single break character, rendered flanked by zero-width spaces."""

    char: str


@dataclass(frozen=True)
class LongWord:
    """Word at or above the long-word threshold."""

    value: str
    class_name: str | None = None


@dataclass(frozen=True)
class Link:
    """Detected URL. The displayed text is always the href itself."""

    href: str
    class_name: str | None = None

    @property
    def text(self) -> str:
        return self.href


Segment: TypeAlias = Text | ZwspSeparator | LongWord | Link


@dataclass(frozen=True)
class LinkMatch:
    """Token split around an embedded URL."""

    prefix: str
    link: str
    suffix: str


def visible_text(segment: Segment) -> str:
    """Text a reader sees for a segment, zero-width spaces excluded."""
    if isinstance(segment, Text | LongWord):
        return segment.value
    if isinstance(segment, ZwspSeparator):
        return segment.char
    return segment.text


def segment_to_dict(segment: Segment) -> dict[str, Any]:
    """Serialize a segment with a ``kind`` discriminator."""
    if isinstance(segment, Text):
        return {"kind": "text", "value": segment.value}
    if isinstance(segment, ZwspSeparator):
        return {"kind": "separator", "char": segment.char}
    if isinstance(segment, LongWord):
        return {"kind": "long_word", "value": segment.value, "class_name": segment.class_name}
    return {
        "kind": "link",
        "href": segment.href,
        "text": segment.text,
        "class_name": segment.class_name,
    }


# --- Options ---


class FormattingOptions(BaseModel):
    """
    Formatting options for a render call.

    Accepts both snake_case field names and the camelCase keys used by
    front-end option bags (``longWordMinLength``, ``linkClass`` ...).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    break_chars: str = DEFAULT_BREAK_CHARS
    long_word_min_length: int = Field(default=DEFAULT_LONG_WORD_MIN_LENGTH, ge=1, strict=True)
    long_word_class: str | None = None
    linkify: bool = False
    link_class: str | None = None

    @property
    def effective_link_class(self) -> str | None:
        """Anchor class; shares the long-word class when none is given."""
        if self.link_class is not None:
            return self.link_class
        return self.long_word_class


# --- Errors ---


class InvalidFormattingOptionsError(ValueError):
    """Raised when an options value cannot be validated."""


@dataclass(frozen=True)
class RichTextValidationError:
    """Rich text validation error."""

    code: str
    message: str
    path: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class RenderRichTextInput:
    """Input for segmenting plain text."""

    text: str
    options: FormattingOptions | dict[str, Any] | None = None


@dataclass(frozen=True)
class RenderHtmlInput:
    """Input for segmenting plain text and rendering it to HTML."""

    text: str
    options: FormattingOptions | dict[str, Any] | None = None


# --- Output Models ---


@dataclass(frozen=True)
class RenderRichTextOutput:
    """Output for a segmentation."""

    segments: list[Segment] = field(default_factory=list)
    errors: list[RichTextValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class RenderHtmlOutput:
    """Output for an HTML rendering."""

    segments: list[Segment] = field(default_factory=list)
    html: str = ""
    errors: list[RichTextValidationError] = field(default_factory=list)
    success: bool = True
