"""Tests for the end-to-end screenplay formatter service."""

import pytest

from core.exceptions import MeasurementUnavailableError
from core.models import ClassificationHint, ElementType, PageBreakMarker
from layout.measurement import HeightMeasurer
from services.screenplay_formatter import ScreenplayFormatter, count_words

ENGLISH_TEXT = "INT. HOUSE - DAY\nJohn enters the room.\nJOHN\nHello, is anyone home?"


class _BrokenMeasurer(HeightMeasurer):
    def height_of(self, element, style):
        return None


def _long_action_text(lines: int = 200) -> str:
    return "\n".join(f"The wind howls through the valley {i}." for i in range(lines))


class TestFormat:
    """Tests for ScreenplayFormatter.format."""

    def test_short_scene_fits_one_page(self, formatter):
        result = formatter.format(ENGLISH_TEXT)
        assert [e.type for e in result.elements] == [
            ElementType.SCENE_HEADING,
            ElementType.ACTION,
            ElementType.CHARACTER,
            ElementType.DIALOGUE,
        ]
        assert result.page_count == 1
        assert result.word_count == 13
        assert result.warnings == []

    def test_scene_index_carries_pages(self, formatter):
        result = formatter.format(ENGLISH_TEXT)
        assert len(result.scenes) == 1
        assert result.scenes[0].location == "HOUSE"
        assert result.scenes[0].page_number == 1

    def test_long_document_spans_pages(self, formatter):
        result = formatter.format(_long_action_text())
        # 18pt per action line, 40 lines per A4 page
        assert result.page_count == 5
        markers = [item for item in result.layout.items() if isinstance(item, PageBreakMarker)]
        assert [m.page_number for m in markers] == [2, 3, 4, 5]

    def test_reformatting_is_stable(self, formatter):
        text = _long_action_text(90)
        assert formatter.format(text) == formatter.format(text)

    def test_empty_text(self, formatter):
        result = formatter.format("")
        assert result.elements == []
        assert result.page_count == 1
        assert result.layout.page_count == 1

    def test_without_pagination(self, formatter):
        result = formatter.format(_long_action_text(), paginate=False)
        assert result.layout is None
        assert result.page_count == 1
        assert result.warnings == []
        assert result.scenes == []

    def test_hints_are_passed_through(self, formatter):
        hints = [ClassificationHint(label="Transition", confidence=0.99), None]
        result = formatter.format("The door opens.\nShe waits.", hints=hints)
        assert result.elements[0].type == ElementType.TRANSITION


class TestMeasurementFallback:
    """Without measurements the document is one continuous flow."""

    def test_format_falls_back_with_warning(self, settings):
        formatter = ScreenplayFormatter(settings, measurer=_BrokenMeasurer())
        result = formatter.format(ENGLISH_TEXT)
        assert result.layout is None
        assert result.page_count == 1
        assert len(result.elements) == 4
        assert len(result.warnings) == 1
        assert "Pagination skipped" in result.warnings[0]
        assert result.scenes[0].page_number is None

    def test_layout_raises(self, settings):
        formatter = ScreenplayFormatter(settings, measurer=_BrokenMeasurer())
        elements = formatter.classify(ENGLISH_TEXT)
        with pytest.raises(MeasurementUnavailableError):
            formatter.layout(elements)


class TestConfiguredGeometry:
    def test_smaller_page_holds_fewer_lines(self, settings):
        small = settings.model_copy(update={"page_height_cm": 15.0})
        result = ScreenplayFormatter(small).format(_long_action_text())
        assert result.page_count > 5

    def test_style_follows_font_settings(self, settings):
        custom = settings.model_copy(update={"font_family": "Noto Naskh Arabic", "font_size_pt": 14.0})
        style = ScreenplayFormatter(custom).style_of(ElementType.ACTION)
        assert style.font_family == "Noto Naskh Arabic"
        assert style.font_size == 14.0


def test_count_words(formatter):
    assert count_words(formatter.classify("مرحباً بكم\n\nJOHN\n  hello   there  ")) == 5
