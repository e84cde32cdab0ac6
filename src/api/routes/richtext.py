"""Rich text rendering endpoint: plain text in, segments and HTML out."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from src.adapters.render.html_renderer import HtmlSegmentRenderer
from src.api.deps import RichTextRulesAdapter, get_html_renderer, get_richtext_rules
from src.components.richtext import RenderHtmlInput, run_render_html, segment_to_dict

router = APIRouter()


class RenderRequest(BaseModel):
    text: str
    options: dict[str, Any] | None = None


class RenderResponse(BaseModel):
    segments: list[dict[str, Any]]
    html: str


@router.post("/render", response_model=RenderResponse)
def render_text(
    request: RenderRequest,
    rules: RichTextRulesAdapter = Depends(get_richtext_rules),
    renderer: HtmlSegmentRenderer = Depends(get_html_renderer),
) -> RenderResponse:
    """
    Segment text and render it to HTML.

    Options in the body override the configured defaults field by field.
    Invalid options are rejected with 422.
    """
    result = run_render_html(
        RenderHtmlInput(text=request.text, options=request.options),
        renderer=renderer,
        rules=rules,
    )
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=[{"code": e.code, "message": e.message} for e in result.errors],
        )

    return RenderResponse(
        segments=[segment_to_dict(segment) for segment in result.segments],
        html=result.html,
    )
