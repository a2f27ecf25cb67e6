"""Height measurement of styled elements.

Real editors read rendered heights from the document; ``HeightMeasurer``
is the seam for that.  ``CharacterGridMeasurer`` is a deterministic
stand-in that word-wraps the content on a monospace grid.
"""

import logging
import math
import textwrap
from abc import ABC, abstractmethod
from collections.abc import Sequence

from core.exceptions import MeasurementUnavailableError
from core.models import ScreenplayElement
from layout.styles import StyleDescriptor

logger = logging.getLogger(__name__)

# Average advance of a monospace glyph relative to the font size
_CHAR_WIDTH_RATIO = 0.6


class HeightMeasurer(ABC):
    """Interface for anything that can report an element's rendered height."""

    @abstractmethod
    def height_of(self, element: ScreenplayElement, style: StyleDescriptor) -> float | None:
        """Height including vertical margins, or ``None`` if unavailable."""


class CharacterGridMeasurer(HeightMeasurer):
    """Estimate heights by wrapping text into fixed-width character cells."""

    def __init__(self, content_width: float) -> None:
        if content_width <= 0:
            raise ValueError(f"content_width must be positive, got {content_width}")
        self.content_width = content_width

    def chars_per_line(self, style: StyleDescriptor) -> int:
        width = min(style.width, self.content_width) if style.width else self.content_width
        return max(1, int(width // (style.font_size * _CHAR_WIDTH_RATIO)))

    def line_count(self, element: ScreenplayElement, style: StyleDescriptor) -> int:
        wrapped = textwrap.wrap(element.content, width=self.chars_per_line(style))
        return max(1, len(wrapped))

    def height_of(self, element: ScreenplayElement, style: StyleDescriptor) -> float:
        lines = self.line_count(element, style)
        return lines * style.font_size * style.line_height + style.margin_top + style.margin_bottom


def measure_elements(
    elements: Sequence[ScreenplayElement],
    styles: Sequence[StyleDescriptor],
    measurer: HeightMeasurer,
) -> list[float]:
    """Second layout phase: measure every element against its resolved style.

    Raises ``MeasurementUnavailableError`` for the first element without a
    usable height.
    """
    if len(styles) != len(elements):
        raise MeasurementUnavailableError(
            "Every element needs a resolved style before measurement",
            details={"elements": len(elements), "styles": len(styles)},
        )

    heights: list[float] = []
    for index, (element, style) in enumerate(zip(elements, styles)):
        height = measurer.height_of(element, style)
        if height is None or not math.isfinite(height) or height < 0:
            logger.warning("No usable height for element %d (%s): %r", index, element.type.value, height)
            raise MeasurementUnavailableError(
                f"Measurement unavailable for element {index}",
                details={"index": index, "type": element.type.value, "height": height},
            )
        heights.append(float(height))
    return heights
