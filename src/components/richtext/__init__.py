"""
Richtext component - Plain text segmentation for rich rendering.
"""

from ._impl import (
    DEFAULT_OPTIONS,
    RichTextService,
    coerce_options,
    create_rich_text_service,
    extract_link,
    linkify_token,
    merge_text,
    render_rich_text,
    render_segments,
    segments_text,
    split_and_wrap,
    split_on_break_chars,
    trim_url,
    wrap_long_word,
)
from .component import (
    run,
    run_render,
    run_render_html,
)
from .models import (
    ZWSP,
    FormattingOptions,
    InvalidFormattingOptionsError,
    Link,
    LinkMatch,
    LongWord,
    RenderHtmlInput,
    RenderHtmlOutput,
    RenderRichTextInput,
    RenderRichTextOutput,
    RichTextValidationError,
    Segment,
    Text,
    ZwspSeparator,
    segment_to_dict,
    visible_text,
)
from .ports import RulesPort, SegmentRendererPort

__all__ = [
    # Entry points
    "run",
    "run_render",
    "run_render_html",
    # Input models
    "RenderRichTextInput",
    "RenderHtmlInput",
    # Output models
    "RenderRichTextOutput",
    "RenderHtmlOutput",
    "RichTextValidationError",
    # Segments
    "Segment",
    "Text",
    "ZwspSeparator",
    "LongWord",
    "Link",
    "LinkMatch",
    "ZWSP",
    "segment_to_dict",
    "visible_text",
    # Options
    "FormattingOptions",
    "InvalidFormattingOptionsError",
    "DEFAULT_OPTIONS",
    "coerce_options",
    # Ports
    "RulesPort",
    "SegmentRendererPort",
    # Functional core
    "RichTextService",
    "create_rich_text_service",
    "extract_link",
    "linkify_token",
    "merge_text",
    "render_rich_text",
    "render_segments",
    "segments_text",
    "split_and_wrap",
    "split_on_break_chars",
    "trim_url",
    "wrap_long_word",
]
