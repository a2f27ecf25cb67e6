"""Drive the line classifier over a whole document or a single typed line.

Blank lines separate blocks; they produce no element and leave the
classification context untouched.  Optional hints from an external
AI/OCR classifier are blended in here, never inside the classifier.
"""

import logging
import re
from collections.abc import Sequence

from core.exceptions import ValidationException
from core.models import (
    ClassificationContext,
    ClassificationHint,
    ElementType,
    ScreenplayElement,
)
from parsers.line_classifier import classify_line
from parsers.patterns import strip_decorative_bullets

logger = logging.getLogger(__name__)

TAB_WIDTH = 4
DEFAULT_MIN_HINT_CONFIDENCE = 0.8

_LINE_BREAK_RE = re.compile(r"\r\n|[\r\n\u2028\u2029]")


def split_lines(text: str) -> list[str]:
    """Split pasted text into physical lines."""
    return _LINE_BREAK_RE.split(text)


def sanitize_line(line: str) -> str:
    """Expand tabs and drop decorative bullets, keeping leading whitespace."""
    return strip_decorative_bullets(line.replace("\t", " " * TAB_WIDTH))


def blend_hint(
    element_type: ElementType,
    hint: ClassificationHint | None,
    min_confidence: float = DEFAULT_MIN_HINT_CONFIDENCE,
) -> ElementType:
    """Prefer a confident, recognizable hint over the rule-based type."""
    if hint is None or hint.confidence < min_confidence:
        return element_type
    hinted = ElementType.from_label(hint.label)
    if hinted is None:
        logger.debug("Ignoring hint with unknown label %r", hint.label)
        return element_type
    return hinted


def process_line(
    line: str,
    context: ClassificationContext,
    hint: ClassificationHint | None = None,
    min_hint_confidence: float = DEFAULT_MIN_HINT_CONFIDENCE,
) -> tuple[ScreenplayElement | None, ClassificationContext]:
    """Classify one raw line given the context before it.

    Returns ``(None, context)`` for blank lines.
    """
    sanitized = sanitize_line(line)
    if not sanitized.strip():
        return None, context

    element, next_context = classify_line(sanitized, context)
    if hint is not None:
        chosen = blend_hint(element.type, hint, min_hint_confidence)
        if chosen != element.type:
            element = ScreenplayElement(type=chosen, content=element.content)
            next_context = context.advance(chosen)
    return element, next_context


def process_script(
    lines: Sequence[str],
    hints: Sequence[ClassificationHint | None] | None = None,
    min_hint_confidence: float = DEFAULT_MIN_HINT_CONFIDENCE,
) -> list[ScreenplayElement]:
    """Classify every line of a document in order.

    *hints*, when given, must align one-to-one with *lines*.
    """
    if hints is not None and len(hints) != len(lines):
        raise ValidationException(
            "Hints must align with input lines",
            details={"lines": len(lines), "hints": len(hints)},
        )

    context = ClassificationContext()
    elements: list[ScreenplayElement] = []

    for i, line in enumerate(lines):
        hint = hints[i] if hints is not None else None
        element, context = process_line(line, context, hint, min_hint_confidence)
        if element is not None:
            elements.append(element)

    logger.debug("Classified %d elements from %d lines", len(elements), len(lines))
    return elements
