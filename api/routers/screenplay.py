"""Screenplay formatting endpoints.

``/format`` turns a pasted document into an ordered element / page-break
sequence; ``/classify-line`` serves the editor, which classifies one line at
a time and carries the context itself.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, status
from prometheus_client import Counter

from api.config import Settings
from api.dependencies import get_formatter, get_hint_provider_dependency, get_settings_dependency
from core.exceptions import LLMException, ValidationException
from core.models import (
    ClassificationHint,
    ClassifyLineRequest,
    ClassifyLineResponse,
    ElementType,
    FormatRequest,
    FormatResponse,
)
from llm.base import BaseHintProvider
from parsers.script_processor import process_line, split_lines
from services.screenplay_formatter import ScreenplayFormatter

logger = logging.getLogger(__name__)

router = APIRouter()

ELEMENTS_CLASSIFIED = Counter(
    "screenplay_elements_classified_total",
    "Classified screenplay elements",
    ["element_type"],
)
DOCUMENTS_FORMATTED = Counter(
    "screenplay_documents_formatted_total",
    "Formatted documents",
    ["paginated"],
)


@router.post(
    "/format",
    response_model=FormatResponse,
    status_code=status.HTTP_200_OK,
    summary="Format pasted screenplay text",
)
async def format_screenplay(
    request: FormatRequest,
    settings: Settings = Depends(get_settings_dependency),
    formatter: ScreenplayFormatter = Depends(get_formatter),
    hint_provider: BaseHintProvider | None = Depends(get_hint_provider_dependency),
) -> FormatResponse:
    """Classify every line of *text* and lay the elements out onto pages."""
    if len(request.text) > settings.max_input_chars:
        raise ValidationException(
            f"Text exceeds {settings.max_input_chars} characters",
            details={"length": len(request.text), "max_length": settings.max_input_chars},
        )

    warnings: list[str] = []
    hints: list[ClassificationHint | None] | None = None

    if request.use_ai_hints:
        if hint_provider is None:
            warnings.append("AI hints requested but no hint provider is configured")
        else:
            try:
                hints = await hint_provider.classify_lines(split_lines(request.text))
            except LLMException as exc:
                logger.warning(f"Hint provider {hint_provider.provider_name} failed: {exc.message}")
                warnings.append("AI hints unavailable; used rule-based classification")

    result = formatter.format(request.text, hints=hints, paginate=request.paginate)

    for element in result.elements:
        ELEMENTS_CLASSIFIED.labels(element_type=element.type.value).inc()
    DOCUMENTS_FORMATTED.labels(paginated=str(result.layout is not None).lower()).inc()

    items = list(result.layout.items()) if result.layout else list(result.elements)
    return FormatResponse(
        items=items,
        page_count=result.page_count,
        word_count=result.word_count,
        scenes=result.scenes,
        hints_applied=hints is not None,
        warnings=warnings + result.warnings,
    )


@router.post(
    "/classify-line",
    response_model=ClassifyLineResponse,
    status_code=status.HTTP_200_OK,
    summary="Classify one typed line",
)
async def classify_single_line(request: ClassifyLineRequest) -> ClassifyLineResponse:
    """Classify *line* given the context the editor kept from the previous line."""
    element, context = process_line(request.line, request.context)
    if element is not None:
        ELEMENTS_CLASSIFIED.labels(element_type=element.type.value).inc()
    return ClassifyLineResponse(element=element, context=context)


@router.get(
    "/styles",
    status_code=status.HTTP_200_OK,
    summary="Style table per element type",
)
async def list_styles(
    formatter: ScreenplayFormatter = Depends(get_formatter),
) -> dict[str, dict[str, Any]]:
    """CSS class and properties the renderer applies to each element type."""
    return {
        element_type.value: {
            "class": element_type.css_class,
            "css": formatter.style_of(element_type).as_css(),
        }
        for element_type in ElementType
    }
