"""
Richtext component - Plain text segmentation for rich rendering.

Turns text into text runs, ZWSP separators, long-word wrappers and links.

Invariants:
- I1: Visible text of the output equals the input
- I2: Whitespace runs are never transformed
- I3: At most one link per whitespace-delimited token
- I4: Options are validated once, at this boundary
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ._impl import (
    RichTextService,
    coerce_options,
    render_segments,
)
from .models import (
    FormattingOptions,
    InvalidFormattingOptionsError,
    RenderHtmlInput,
    RenderHtmlOutput,
    RenderRichTextInput,
    RenderRichTextOutput,
    RichTextValidationError,
)
from .ports import RulesPort, SegmentRendererPort

logger = logging.getLogger(__name__)


def _build_options(
    options: FormattingOptions | Mapping[str, Any] | None,
    rules: RulesPort | None,
) -> FormattingOptions:
    """
    Build formatting options from rules defaults and caller options.

    A complete FormattingOptions wins outright; a mapping overrides the rules
    defaults field by field.
    """
    if isinstance(options, FormattingOptions):
        return options

    service = RichTextService(rules.get_formatting_defaults() if rules else None)
    if options is None:
        return service.options
    if not isinstance(options, Mapping):
        return coerce_options(options)
    return service.with_overrides(options).options


def _invalid_options_error(e: InvalidFormattingOptionsError) -> RichTextValidationError:
    return RichTextValidationError(
        code="invalid_options",
        message=str(e),
        path="options",
    )


# --- Component Entry Points ---


def run_render(
    inp: RenderRichTextInput,
    *,
    rules: RulesPort | None = None,
) -> RenderRichTextOutput:
    """
    Segment plain text.

    Args:
        inp: Input containing the text and optional formatting options.
        rules: Optional rules port supplying default options.

    Returns:
        RenderRichTextOutput with the segments, or errors for invalid options.
    """
    try:
        options = _build_options(inp.options, rules)
    except InvalidFormattingOptionsError as e:
        logger.warning("Rejected formatting options: %s", e)
        return RenderRichTextOutput(errors=[_invalid_options_error(e)], success=False)

    segments = RichTextService(options).render(inp.text)
    logger.debug("Rendered %d chars into %d segments", len(inp.text), len(segments))

    return RenderRichTextOutput(segments=segments, success=True)


def run_render_html(
    inp: RenderHtmlInput,
    *,
    renderer: SegmentRendererPort[str],
    rules: RulesPort | None = None,
) -> RenderHtmlOutput:
    """
    Segment plain text and render it to an HTML fragment.

    Args:
        inp: Input containing the text and optional formatting options.
        renderer: Renderer port producing one HTML string per segment.
        rules: Optional rules port supplying default options.

    Returns:
        RenderHtmlOutput with the segments and the HTML fragment.
    """
    result = run_render(RenderRichTextInput(text=inp.text, options=inp.options), rules=rules)
    if not result.success:
        return RenderHtmlOutput(errors=result.errors, success=False)

    html = "".join(render_segments(result.segments, renderer))

    return RenderHtmlOutput(segments=result.segments, html=html, success=True)


def run(
    inp: RenderRichTextInput | RenderHtmlInput,
    *,
    rules: RulesPort | None = None,
    renderer: SegmentRendererPort[str] | None = None,
) -> RenderRichTextOutput | RenderHtmlOutput:
    """
    Main entry point for the richtext component.

    Dispatches to appropriate handler based on input type.

    Args:
        inp: Input object determining the operation.
        rules: Optional rules port supplying default options.
        renderer: Renderer port (required for HTML rendering).

    Returns:
        Appropriate output object based on input type.
    """
    if isinstance(inp, RenderRichTextInput):
        return run_render(inp, rules=rules)
    elif isinstance(inp, RenderHtmlInput):
        if renderer is None:
            raise ValueError("SegmentRendererPort is required for HTML rendering")
        return run_render_html(inp, renderer=renderer, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
