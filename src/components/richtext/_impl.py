"""
Rich text segmentation - Functional Core.

Turns plain text into an ordered list of segments: literal text runs,
zero-width-space separators, long-word wrappers and links.

Key behaviors:
- Whitespace runs are preserved verbatim
- Break characters (default "," and "/") become ZWSP-flanked separators
- Words at or above the length threshold are wrapped
- http(s) URLs are detected once per token, with trailing punctuation,
  unbalanced closing parens/brackets, quotes and tag-like suffixes trimmed
- Concatenated visible text of the output always equals the input

Pure functions only; no I/O.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

import grapheme
from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from .models import (
    DEFAULT_BREAK_CHARS,
    FormattingOptions,
    InvalidFormattingOptionsError,
    Link,
    LinkMatch,
    LongWord,
    Segment,
    Text,
    ZwspSeparator,
    visible_text,
)
from .ports import SegmentRendererPort

T = TypeVar("T")

# Default options
DEFAULT_OPTIONS = FormattingOptions()

# Captured whitespace runs land on odd indices of the split result
WHITESPACE_SPLIT_PATTERN = re.compile(r"(\s+)")

SCHEME_PATTERN = re.compile(r"https?://")

# Quotes and "<" are not in the class, so either one ends the match
URL_PATTERN = re.compile(r"https?://[A-Za-z0-9\-._~:/?#\[\]@!$&()*+,;=%]*")

TRAILING_PUNCTUATION = ".,;:!)]"

CLOSING_PAIRS = {")": "(", "]": "["}


# --- Options ---


def coerce_options(
    options: FormattingOptions | Mapping[str, Any] | None,
) -> FormattingOptions:
    """
    Validate caller-supplied options.

    Missing fields take their defaults. Raises InvalidFormattingOptionsError
    for structurally invalid values.
    """
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, FormattingOptions):
        return options
    if not isinstance(options, Mapping):
        raise InvalidFormattingOptionsError(
            f"Formatting options must be a mapping, got {type(options).__name__}"
        )

    try:
        return FormattingOptions.model_validate(dict(options))
    except ValidationError as e:
        raise InvalidFormattingOptionsError(f"Invalid formatting options:\n{e}") from e


# --- Separator Splitter ---


def split_on_break_chars(word: str, break_chars: str = DEFAULT_BREAK_CHARS) -> list[Segment]:
    """
    Split a string on break characters.

    Every break character becomes a ZwspSeparator; the runs between them
    become Text. Break characters are matched literally.
    """
    if not word:
        return []
    if not break_chars:
        return [Text(word)]

    pattern = re.compile(f"([{re.escape(break_chars)}])")
    segments: list[Segment] = []
    for i, part in enumerate(pattern.split(word)):
        if not part:
            continue
        # Odd indices are the captured separators
        if i % 2:
            segments.append(ZwspSeparator(part))
        else:
            segments.append(Text(part))
    return segments


# --- Long-Word Wrapper ---


def wrap_long_word(
    segment: Text,
    min_length: int,
    class_name: str | None = None,
) -> Text | LongWord:
    """Wrap text whose grapheme length is at least min_length."""
    if grapheme.length(segment.value) >= min_length:
        return LongWord(segment.value, class_name)
    return segment


def split_and_wrap(word: str, options: FormattingOptions = DEFAULT_OPTIONS) -> list[Segment]:
    """Separator splitting followed by long-word wrapping of each text run."""
    return [
        wrap_long_word(segment, options.long_word_min_length, options.long_word_class)
        if isinstance(segment, Text)
        else segment
        for segment in split_on_break_chars(word, options.break_chars)
    ]


# --- Link Extractor ---


def _is_balanced_close(url: str) -> bool:
    """
    True when the URL's final closer matches an opener earlier in the URL.

    Scans left to right keeping the open depth; a closer with nothing open
    is ignored, so the depth never drops below zero.
    """
    closing = url[-1]
    opening = CLOSING_PAIRS[closing]
    depth = 0
    for ch in url[:-1]:
        if ch == opening:
            depth += 1
        elif ch == closing and depth:
            depth -= 1
    return depth > 0


def trim_url(url: str) -> str:
    """
    Trim trailing punctuation from a greedily matched URL.

    A closing paren or bracket stays only while the URL itself holds an
    unmatched opener before it.
    """
    while url and url[-1] in TRAILING_PUNCTUATION:
        last = url[-1]
        if last in CLOSING_PAIRS and _is_balanced_close(url):
            break
        url = url[:-1]
    return url


def extract_link(token: str) -> LinkMatch | None:
    """
    Locate the first http(s) URL in a token.

    Returns the token split into prefix, link and suffix, or None when the
    token holds no usable URL.
    """
    match = URL_PATTERN.search(token)
    if match is None:
        return None

    start = match.start()
    url = trim_url(match.group(0))

    scheme = SCHEME_PATTERN.match(url)
    if scheme is None or scheme.end() == len(url):
        return None

    end = start + len(url)
    return LinkMatch(prefix=token[:start], link=url, suffix=token[end:])


def linkify_token(token: str, options: FormattingOptions = DEFAULT_OPTIONS) -> list[Segment]:
    """
    Render a token with link detection.

    Prefix and suffix go through splitting and wrapping only, so a token
    yields at most one link.
    """
    found = extract_link(token)
    if found is None:
        return split_and_wrap(token, options)

    return [
        *split_and_wrap(found.prefix, options),
        Link(found.link, options.effective_link_class),
        *split_and_wrap(found.suffix, options),
    ]


# --- Tokenizer / Composer ---


def merge_text(segments: Iterable[Segment]) -> list[Segment]:
    """Coalesce adjacent Text segments."""
    merged: list[Segment] = []
    for segment in segments:
        if isinstance(segment, Text) and merged and isinstance(merged[-1], Text):
            merged[-1] = Text(merged[-1].value + segment.value)
        else:
            merged.append(segment)
    return merged


def render_rich_text(
    text: str,
    options: FormattingOptions | Mapping[str, Any] | None = None,
) -> list[Segment]:
    """
    Segment text for rich rendering.

    Whitespace runs pass through untouched; every other token goes through
    link detection (when enabled) or straight to splitting and wrapping.
    """
    opts = coerce_options(options)

    segments: list[Segment] = []
    for i, part in enumerate(WHITESPACE_SPLIT_PATTERN.split(text)):
        if not part:
            continue
        if i % 2:
            segments.append(Text(part))
        elif opts.linkify:
            segments.extend(linkify_token(part, opts))
        else:
            segments.extend(split_and_wrap(part, opts))

    return merge_text(segments)


def segments_text(segments: Iterable[Segment]) -> str:
    """Concatenated visible text of a segment sequence."""
    return "".join(visible_text(segment) for segment in segments)


def render_segments(
    segments: Iterable[Segment],
    renderer: SegmentRendererPort[T],
) -> list[T]:
    """Hand each segment to the matching renderer method, in order."""
    nodes: list[T] = []
    for segment in segments:
        if isinstance(segment, Text):
            nodes.append(renderer.render_text(segment.value))
        elif isinstance(segment, ZwspSeparator):
            nodes.append(renderer.render_separator(segment.char))
        elif isinstance(segment, LongWord):
            nodes.append(renderer.render_long_word(segment.value, segment.class_name))
        else:
            nodes.append(renderer.render_link(segment.href, segment.text, segment.class_name))
    return nodes


# --- Service Class ---


class RichTextService:
    """
    Rich text segmentation service.

    Holds a validated FormattingOptions instance for repeated renders.
    """

    def __init__(self, options: FormattingOptions | Mapping[str, Any] | None = None) -> None:
        """Initialize with optional options."""
        self._options = coerce_options(options)

    @property
    def options(self) -> FormattingOptions:
        """Get options."""
        return self._options

    def render(self, text: str) -> list[Segment]:
        """Segment text with the service options."""
        return render_rich_text(text, self._options)

    def with_overrides(self, overrides: Mapping[str, Any]) -> RichTextService:
        """
        Return a service whose options are these options updated field by field.

        Keys may use either snake_case or camelCase names.
        """
        field_names = {to_camel(name): name for name in FormattingOptions.model_fields}
        merged = self._options.model_dump()
        for key, value in overrides.items():
            merged[field_names.get(key, key)] = value
        return RichTextService(merged)


# --- Factory ---


def create_rich_text_service(
    options: FormattingOptions | Mapping[str, Any] | None = None,
) -> RichTextService:
    """Create a RichTextService with optional options."""
    return RichTextService(options=options)
