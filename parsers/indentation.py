"""Indentation as a classification signal.

Screenplays are typeset on a monospaced grid of about 60 characters per
line (Courier 12pt), so the amount of leading whitespace says roughly where
a line sits: far-indented lines are character cues, medium-indented lines
are dialogue.
"""

from core.exceptions import ValidationException
from parsers.patterns import BIDI_MARKS

ASSUMED_LINE_WIDTH = 60

# Percentage thresholds used by the line classifier
CHARACTER_INDENT_THRESHOLD = 30.0
DIALOGUE_INDENT_THRESHOLD = 15.0


def leading_whitespace(line: str) -> int:
    """Number of leading whitespace characters in *line*.

    Bidirectional control marks in the leading run are skipped, not counted.
    """
    count = 0
    for char in line:
        if char in BIDI_MARKS:
            continue
        if not char.isspace():
            break
        count += 1
    return count


def indentation_percentage(line: str, line_width: int = ASSUMED_LINE_WIDTH) -> float:
    """Leading whitespace as a percentage of *line_width*.

    Not capped: indentation wider than the assumed line yields more than 100.
    Tabs must already be expanded.
    """
    if line_width <= 0:
        raise ValidationException(
            f"Line width must be positive, got {line_width}",
            details={"line_width": line_width},
        )
    return leading_whitespace(line) / line_width * 100
