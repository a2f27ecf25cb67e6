"""Context-aware, rule-based classification of a single screenplay line.

``classify_line`` is a pure function of the sanitized line and the
``ClassificationContext`` left by the previous element.  Rules are tried
in a fixed order and the first match wins:

0. basmala invocation                               -> Basmala
1. scene keyword (INT., EXT., مشهد ...)             -> SceneHeading
2. transition keyword (CUT TO, قطع إلى ...)          -> Transition
3. parenthesised / director note                    -> Parenthetical
4. follows a character cue or its parenthetical     -> Dialogue
5. indentation > 30% or character-name shape        -> Character
6. 15% < indentation <= 30%                         -> Dialogue
7. anything else                                    -> Action
"""

from core.exceptions import ValidationException
from core.models import ClassificationContext, ElementType, ScreenplayElement
from parsers.indentation import (
    CHARACTER_INDENT_THRESHOLD,
    DIALOGUE_INDENT_THRESHOLD,
    indentation_percentage,
)
from parsers.patterns import (
    looks_like_character_name,
    matches_basmala,
    matches_director_note,
    matches_scene_keyword,
    matches_transition,
)

_CUE_TYPES = frozenset({ElementType.CHARACTER, ElementType.PARENTHETICAL})


def detect_element_type(line: str, context: ClassificationContext) -> ElementType:
    """Return the element type for a sanitized, non-blank *line*."""
    content = line.strip()

    if matches_basmala(content):
        return ElementType.BASMALA
    if matches_scene_keyword(content):
        return ElementType.SCENE_HEADING
    if matches_transition(content):
        return ElementType.TRANSITION
    if matches_director_note(content):
        return ElementType.PARENTHETICAL

    # A parenthetical only opens dialogue inside a speaker block;
    # a stray note before any cue does not.
    if context.last_element_type in _CUE_TYPES and context.speaker_active:
        return ElementType.DIALOGUE

    indent = indentation_percentage(line)
    if indent > CHARACTER_INDENT_THRESHOLD or looks_like_character_name(content):
        return ElementType.CHARACTER
    if DIALOGUE_INDENT_THRESHOLD < indent <= CHARACTER_INDENT_THRESHOLD:
        return ElementType.DIALOGUE
    return ElementType.ACTION


def classify_line(
    line: str, context: ClassificationContext
) -> tuple[ScreenplayElement, ClassificationContext]:
    """Classify one sanitized line and return it with the advanced context.

    Raises ``ValidationException`` for blank input; blank lines are
    separators and must be filtered by the caller.
    """
    content = line.strip()
    if not content:
        raise ValidationException("Cannot classify a blank line")

    element_type = detect_element_type(line, context)
    return ScreenplayElement(type=element_type, content=content), context.advance(element_type)
