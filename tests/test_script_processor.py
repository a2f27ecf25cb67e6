"""Tests for document-level processing, sanitizing and hint blending."""

import pytest

from core.exceptions import ValidationException
from core.models import ClassificationContext, ClassificationHint, ElementType
from parsers.script_processor import (
    blend_hint,
    process_line,
    process_script,
    sanitize_line,
    split_lines,
)


def element_types(elements):
    return [element.type for element in elements]


SH = ElementType.SCENE_HEADING
CH = ElementType.CHARACTER
DI = ElementType.DIALOGUE
PA = ElementType.PARENTHETICAL
AC = ElementType.ACTION
TR = ElementType.TRANSITION
BA = ElementType.BASMALA

ENGLISH_SCENE = [
    "INT. HOUSE - DAY",
    "John enters the room.",
    "JOHN",
    "Hello, is anyone home?",
]

ARABIC_SCENE = [
    "بسم الله الرحمن الرحيم",
    "مشهد 1 - داخلي - بيت أحمد - ليل",
    "يدخل أحمد إلى الغرفة ببطء.",
    "أحمد:",
    "مرحباً، هل من أحد هنا؟",
    "(بهدوء)",
    "لا أحد يجيب.",
    "قطع إلى:",
]


# ===================================================================
# Whole documents
# ===================================================================


class TestProcessScript:
    """Tests for parsers.script_processor.process_script."""

    def test_english_scene(self):
        assert element_types(process_script(ENGLISH_SCENE)) == [SH, AC, CH, DI]

    def test_stray_parenthetical_before_cue(self):
        lines = ["(quietly)", "JANE", "(whispering)", "I heard something."]
        assert element_types(process_script(lines)) == [PA, CH, PA, DI]

    def test_arabic_scene(self):
        assert element_types(process_script(ARABIC_SCENE)) == [BA, SH, AC, CH, DI, PA, DI, TR]

    def test_contents_are_trimmed_and_not_reordered(self):
        elements = process_script(["   مرحباً بكم   ", "\tINT. ROOM - DAY  "])
        assert [e.content for e in elements] == ["مرحباً بكم", "INT. ROOM - DAY"]

    def test_deterministic(self):
        assert process_script(ARABIC_SCENE) == process_script(ARABIC_SCENE)

    def test_blank_lines_do_not_change_classification(self):
        padded = ["", ENGLISH_SCENE[0], "   ", ENGLISH_SCENE[1], "", "\t", ENGLISH_SCENE[2], "", ENGLISH_SCENE[3], ""]
        assert process_script(padded) == process_script(ENGLISH_SCENE)

    def test_blank_between_cue_and_dialogue_keeps_dialogue(self):
        assert element_types(process_script(["JOHN", "", "", "   hello"])) == [CH, DI]

    def test_bulleted_lines(self):
        elements = process_script(["• JOHN", "- Hello there."])
        assert element_types(elements) == [CH, DI]
        assert [e.content for e in elements] == ["JOHN", "Hello there."]

    def test_tab_indentation_counts(self):
        # five tabs = 20 spaces = 33% of the line
        assert element_types(process_script(["\t\t\t\t\tsomebody"])) == [CH]

    def test_empty_input(self):
        assert process_script([]) == []
        assert process_script(["", "  ", "\t"]) == []

    def test_each_call_starts_with_fresh_context(self):
        process_script(["JOHN"])
        assert element_types(process_script(["a plain line"])) == [AC]


# ===================================================================
# Single lines
# ===================================================================


class TestProcessLine:
    """Tests for parsers.script_processor.process_line."""

    def test_blank_line_keeps_context(self):
        context = ClassificationContext().advance(CH)
        element, next_context = process_line("   ", context)
        assert element is None
        assert next_context is context

    def test_context_is_threaded_by_caller(self):
        element, context = process_line("JOHN", ClassificationContext())
        assert element.type == CH
        element, context = process_line("Where is everyone?", context)
        assert element.type == DI
        assert context.last_element_type == DI

    def test_sanitize_keeps_leading_whitespace(self):
        assert sanitize_line("\t• JOHN") == "    JOHN"

    def test_split_lines(self):
        assert split_lines("a\r\nb\rc\nd\u2028e") == ["a", "b", "c", "d", "e"]


# ===================================================================
# Hint blending
# ===================================================================


class TestHints:
    """Hints from the external classifier only win when confident."""

    def test_confident_hint_overrides(self):
        hints = [ClassificationHint(label="action", confidence=0.95), None]
        assert element_types(process_script(["JOHN", "Hello"], hints=hints)) == [AC, AC]

    def test_low_confidence_hint_ignored(self):
        hints = [ClassificationHint(label="action", confidence=0.4), None]
        assert element_types(process_script(["JOHN", "Hello"], hints=hints)) == [CH, DI]

    def test_threshold_is_configurable(self):
        hints = [ClassificationHint(label="action", confidence=0.4), None]
        result = process_script(["JOHN", "Hello"], hints=hints, min_hint_confidence=0.3)
        assert element_types(result) == [AC, AC]

    def test_unknown_label_ignored(self):
        assert blend_hint(CH, ClassificationHint(label="shot", confidence=1.0)) == CH

    def test_editor_labels_accepted(self):
        assert blend_hint(AC, ClassificationHint(label="scene-header-2", confidence=0.9)) == SH
        assert blend_hint(AC, ClassificationHint(label="director-note", confidence=0.9)) == PA

    def test_hints_on_blank_lines_ignored(self):
        hints = [ClassificationHint(label="character", confidence=1.0), None]
        assert element_types(process_script(["", "text"], hints=hints)) == [AC]

    def test_misaligned_hints_rejected(self):
        with pytest.raises(ValidationException):
            process_script(["a", "b"], hints=[None])
