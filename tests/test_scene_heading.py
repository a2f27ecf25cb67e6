"""Tests for scene heading parsing and the scene index."""

from core.models import ElementType, LocationType, ScreenplayElement, TimeOfDay
from parsers.scene_heading import HeadingComponents, parse_scene_heading
from services.screenplay_formatter import build_scene_index


class TestSceneHeadingParser:
    """Tests for parsers.scene_heading.parse_scene_heading."""

    def test_english_int_day(self):
        result = parse_scene_heading("INT. HOUSE - DAY")
        assert result == HeadingComponents(
            number=None,
            location_type=LocationType.INT,
            location="HOUSE",
            time_of_day=TimeOfDay.DAY,
        )

    def test_english_int_ext_continuous(self):
        result = parse_scene_heading("INT./EXT. CAR - CONTINUOUS")
        assert result.location_type == LocationType.INT_EXT
        assert result.location == "CAR"
        assert result.time_of_day == TimeOfDay.CONTINUOUS

    def test_ext_int_without_period(self):
        result = parse_scene_heading("EXT/INT HOUSE - DAY")
        assert result.location_type == LocationType.INT_EXT
        assert result.location == "HOUSE"
        assert result.time_of_day == TimeOfDay.DAY

    def test_i_e_without_period(self):
        result = parse_scene_heading("I/E CAR - NIGHT")
        assert result.location_type == LocationType.INT_EXT
        assert result.location == "CAR"
        assert result.time_of_day == TimeOfDay.NIGHT

    def test_int_ext_missing_final_period(self):
        result = parse_scene_heading("INT./EXT CAR - DUSK")
        assert result.location_type == LocationType.INT_EXT
        assert result.location == "CAR"

    def test_arabic_numbered_heading(self):
        result = parse_scene_heading("مشهد 1 - داخلي - بيت أحمد - ليل")
        assert result.number == "1"
        assert result.location_type == LocationType.INT
        assert result.location == "بيت أحمد"
        assert result.time_of_day == TimeOfDay.NIGHT

    def test_arabic_colon_and_en_dash(self):
        result = parse_scene_heading("مشهد 12: خارجي. الشارع – نهار")
        assert result.number == "12"
        assert result.location_type == LocationType.EXT
        assert result.location == "الشارع"
        assert result.time_of_day == TimeOfDay.DAY

    def test_arabic_location_type_after_place(self):
        result = parse_scene_heading("بيت أحمد - داخلي - صباحاً")
        assert result.number is None
        assert result.location_type == LocationType.INT
        assert result.location == "بيت أحمد"
        assert result.time_of_day == TimeOfDay.MORNING

    def test_bidi_mark_ignored(self):
        result = parse_scene_heading("\u200fمشهد 4 - ليل")
        assert result.number == "4"
        assert result.location_type == LocationType.UNKNOWN
        assert result.time_of_day == TimeOfDay.NIGHT

    def test_no_separator(self):
        result = parse_scene_heading("INT. ROOM")
        assert result.location_type == LocationType.INT
        assert result.location == "ROOM"
        assert result.time_of_day == TimeOfDay.UNKNOWN

    def test_unknown_time(self):
        result = parse_scene_heading("INT. ROOM - SOMETIMEWEIRD")
        assert result.time_of_day == TimeOfDay.UNKNOWN
        assert result.location == "ROOM - SOMETIMEWEIRD"


class TestSceneIndex:
    """Tests for services.screenplay_formatter.build_scene_index."""

    def test_only_scene_headings_are_indexed(self):
        elements = [
            ScreenplayElement(type=ElementType.BASMALA, content="بسم الله الرحمن الرحيم"),
            ScreenplayElement(type=ElementType.SCENE_HEADING, content="INT. HOUSE - DAY"),
            ScreenplayElement(type=ElementType.ACTION, content="John enters."),
            ScreenplayElement(type=ElementType.SCENE_HEADING, content="مشهد 2 - خارجي - الحديقة - ليل"),
        ]
        scenes = build_scene_index(elements, page_numbers=[1, 1, 1, 2])
        assert [s.element_index for s in scenes] == [1, 3]
        assert [s.page_number for s in scenes] == [1, 2]
        assert scenes[1].number == "2"
        assert scenes[1].location == "الحديقة"

    def test_without_layout_pages_are_unknown(self):
        elements = [ScreenplayElement(type=ElementType.SCENE_HEADING, content="EXT. BEACH - DAWN")]
        scenes = build_scene_index(elements)
        assert scenes[0].page_number is None
        assert scenes[0].time_of_day == TimeOfDay.DAWN
