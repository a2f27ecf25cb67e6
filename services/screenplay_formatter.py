"""End-to-end formatting of pasted text into a paginated screenplay.

Layout runs in three explicit phases so every renderer paginates the same
way: resolve a style per element, measure each element against that
style, then paginate the measured heights.
"""

import logging
from collections.abc import Sequence

from api.config import Settings, get_settings
from core.exceptions import MeasurementUnavailableError
from core.models import (
    ClassificationHint,
    ElementType,
    FormattedScreenplay,
    PaginatedLayout,
    SceneSummary,
    ScreenplayElement,
)
from layout.measurement import CharacterGridMeasurer, HeightMeasurer, measure_elements
from layout.paginator import Paginator
from layout.styles import StyleDescriptor, get_format_style, resolve_styles
from parsers.scene_heading import parse_scene_heading
from parsers.script_processor import process_script, split_lines

logger = logging.getLogger(__name__)


def count_words(elements: Sequence[ScreenplayElement]) -> int:
    """Whitespace-separated words across all element contents."""
    return sum(len(element.content.split()) for element in elements)


def build_scene_index(
    elements: Sequence[ScreenplayElement], page_numbers: Sequence[int] | None = None
) -> list[SceneSummary]:
    """Summarize every scene heading, with its page when layout is known."""
    scenes: list[SceneSummary] = []
    for index, element in enumerate(elements):
        if element.type != ElementType.SCENE_HEADING:
            continue
        hc = parse_scene_heading(element.content)
        scenes.append(
            SceneSummary(
                element_index=index,
                heading=element.content,
                number=hc.number,
                location=hc.location,
                location_type=hc.location_type,
                time_of_day=hc.time_of_day,
                page_number=page_numbers[index] if page_numbers else None,
            )
        )
    return scenes


class ScreenplayFormatter:
    """Classify raw text and lay the result out onto pages."""

    def __init__(
        self,
        settings: Settings | None = None,
        measurer: HeightMeasurer | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        geometry = self.settings.page_geometry
        self.paginator = Paginator(geometry.available_height)
        self.measurer = measurer or CharacterGridMeasurer(geometry.content_width)

    def style_of(self, element_type: ElementType) -> StyleDescriptor:
        return get_format_style(
            element_type,
            font_family=self.settings.font_family,
            font_size=self.settings.font_size_pt,
        )

    def classify(
        self, text: str, hints: Sequence[ClassificationHint | None] | None = None
    ) -> list[ScreenplayElement]:
        """Split *text* into lines and classify them.

        *hints* align with the lines produced by ``split_lines``.
        """
        return process_script(
            split_lines(text),
            hints=hints,
            min_hint_confidence=self.settings.hint_min_confidence,
        )

    def layout(self, elements: Sequence[ScreenplayElement]) -> PaginatedLayout:
        """Style, measure and paginate *elements*.

        Raises ``MeasurementUnavailableError`` when an element cannot be
        measured.
        """
        styles = resolve_styles(elements, self.style_of)
        heights = measure_elements(elements, styles, self.measurer)
        return self.paginator.paginate(elements, heights)

    def format(
        self,
        text: str,
        hints: Sequence[ClassificationHint | None] | None = None,
        paginate: bool = True,
    ) -> FormattedScreenplay:
        """Classify and paginate *text*.

        If measurement fails the document is returned as one continuous
        flow with a warning instead of pages.
        """
        elements = self.classify(text, hints)
        warnings: list[str] = []
        layout: PaginatedLayout | None = None

        if paginate:
            try:
                layout = self.layout(elements)
            except MeasurementUnavailableError as exc:
                logger.warning("Pagination skipped: %s", exc.message)
                warnings.append(f"Pagination skipped: {exc.message}")

        page_numbers = layout.page_numbers() if layout else None
        result = FormattedScreenplay(
            elements=elements,
            layout=layout,
            page_count=layout.page_count if layout else 1,
            word_count=count_words(elements),
            scenes=build_scene_index(elements, page_numbers),
            warnings=warnings,
        )

        logger.info(
            "Formatted %d elements: %d pages, %d words, %d scenes",
            len(elements), result.page_count, result.word_count, len(result.scenes),
        )
        return result
