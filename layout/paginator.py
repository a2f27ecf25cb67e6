"""Pack measured elements onto fixed-height pages.

Pagination works at element granularity: an element that does not fit in
the space left on the current page starts the next page, and is never
split.  An element that exactly fills the remaining space stays.  An
element taller than a whole page sits alone on a fresh page and overflows
it.  The pass is always run in full; nothing is cached between runs.
"""

import logging
import math
from collections.abc import Sequence

from core.exceptions import ElementInvariantError, MeasurementUnavailableError, ValidationException
from core.models import ElementType, Page, PaginatedLayout, ScreenplayElement

logger = logging.getLogger(__name__)


class Paginator:
    """Lay elements out onto pages of a fixed usable height."""

    def __init__(self, available_height: float) -> None:
        if not math.isfinite(available_height) or available_height <= 0:
            raise ValidationException(
                f"Available page height must be positive, got {available_height}",
                details={"available_height": available_height},
            )
        self.available_height = available_height

    def paginate(
        self,
        elements: Sequence[ScreenplayElement],
        heights: Sequence[float | None],
    ) -> PaginatedLayout:
        """Return the pages for *elements* given their measured *heights*.

        Raises ``MeasurementUnavailableError`` if a height is missing or
        invalid, and ``ElementInvariantError`` if something other than a
        classified element is passed in.
        """
        if len(heights) != len(elements):
            raise MeasurementUnavailableError(
                "Missing measurements for some elements",
                details={"elements": len(elements), "heights": len(heights)},
            )

        pages: list[Page] = []
        page_elements: list[ScreenplayElement] = []
        current_height = 0.0
        page_number = 1

        for index, (element, height) in enumerate(zip(elements, heights)):
            self._check_element(element, index)
            element_height = self._check_height(height, index)

            if page_elements and current_height + element_height > self.available_height:
                pages.append(Page(number=page_number, elements=page_elements, height=current_height))
                page_number += 1
                page_elements = [element]
                current_height = element_height
            else:
                page_elements.append(element)
                current_height += element_height

            if element_height > self.available_height:
                logger.info(
                    "Element %d (%.1f) is taller than a page (%.1f) and overflows page %d",
                    index, element_height, self.available_height, page_number,
                )

        pages.append(Page(number=page_number, elements=page_elements, height=current_height))

        logger.debug("Paginated %d elements onto %d pages", len(elements), len(pages))
        return PaginatedLayout(pages=pages, available_height=self.available_height)

    @staticmethod
    def _check_element(element: object, index: int) -> None:
        if not isinstance(element, ScreenplayElement) or not isinstance(element.type, ElementType):
            raise ElementInvariantError(
                f"Element {index} is not a classified screenplay element: {element!r}",
                index=index,
            )

    @staticmethod
    def _check_height(height: float | None, index: int) -> float:
        if height is None or not math.isfinite(height) or height < 0:
            raise MeasurementUnavailableError(
                f"Measurement unavailable for element {index}",
                details={"index": index, "height": height},
            )
        return float(height)


def paginate(
    elements: Sequence[ScreenplayElement],
    heights: Sequence[float | None],
    available_height: float,
) -> PaginatedLayout:
    """Shortcut for ``Paginator(available_height).paginate(elements, heights)``."""
    return Paginator(available_height).paginate(elements, heights)
