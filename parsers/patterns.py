"""Line recognizers for Arabic and English screenplay text.

Every matcher looks at a single line, never raises, and ignores leading
bidirectional control marks that editors insert around right-to-left text.
"""

import re

# LRM, RLM, ALM, embeddings/overrides, isolates, BOM
BIDI_MARKS = "\u200e\u200f\u061c\u202a\u202b\u202c\u202d\u202e\u2066\u2067\u2068\u2069\ufeff"

# A keyword ends at whitespace, a digit, punctuation or end of line
_KEYWORD_END = r"(?=$|[\s\d:\uff1a.,\u060c/\-\u2013\u2014])"

BASMALA_RE = re.compile(r"^بسم\s+الله\s+الرحمن\s+الرحيم$")

SCENE_KEYWORD_RE = re.compile(
    r"^(?:"
    r"INT\.\s*/\s*EXT\.?|"
    r"EXT\.\s*/\s*INT\.?|"
    r"INT/EXT\b|"
    r"EXT/INT\b|"
    r"I/E\b|"
    r"INT\.|"
    r"EXT\.|"
    r"(?:مشهد|لقطة|منظر|مكان|زمن|وقت|داخلي|خارجي|SCENE|LOCATION|TIME)" + _KEYWORD_END +
    r")",
    re.IGNORECASE,
)

TRANSITION_RE = re.compile(
    r"^(?:"
    r"SMASH\s+CUT\s+TO|CUT\s+TO|"
    r"FADE\s+TO\s+BLACK|FADE\s+IN|FADE\s+OUT|"
    r"DISSOLVE\s+TO|"
    r"قطع\s+إلى|قطع|"
    r"انتقال\s+إلى|"
    r"تلاشي\s+أسود|تلاشي|"
    r"مزج\s+إلى"
    r")(?=$|[\s:\uff1a.!,\u060c\-\u2013\u2014])",
    re.IGNORECASE,
)

_WRAPPED_NOTE_RE = re.compile(r"^[(\uff08].*[)\uff09]$", re.DOTALL)
_NOTE_PREFIX_RE = re.compile(r"^(?:NOTE\s*:|ملاحظة\s*[:\uff1a]|ملاحظة\s+المخرج)", re.IGNORECASE)

_LATIN_CUE_RE = re.compile(
    r"^[A-Z](?:[A-Z0-9#'\-. ]{0,48}[A-Z0-9])?"
    r"(?:\s*\((?:V\.O\.|O\.S\.|O\.C\.|CONT'D)\))?$"
)
_ARABIC_CUE_RE = re.compile(r"^[\u0600-\u06ff][\u0600-\u06ff\s]{0,29}[:\uff1a]$")

# Geometric shapes, ballot boxes, bullets, list dashes and asterisks
_BULLET_RE = re.compile(
    r"^(\s*)[\u25a0-\u25ff\u2610-\u2612\u2022\u25e6\u25aa\u25ab\u25b8\u25c2\u2023*\-\u2013\u2014]+\s*"
)


def strip_bidi_marks(text: str) -> str:
    """Remove surrounding whitespace and bidirectional control marks."""
    return text.strip().strip(BIDI_MARKS).strip()


def matches_basmala(text: str) -> bool:
    return BASMALA_RE.match(strip_bidi_marks(text)) is not None


def matches_scene_keyword(text: str) -> bool:
    """True if *text* opens with a scene keyword (``INT.``, ``مشهد`` ...)."""
    return SCENE_KEYWORD_RE.match(strip_bidi_marks(text)) is not None


def matches_transition(text: str) -> bool:
    """True if *text* is, or begins with, a transition (``CUT TO:``, ``قطع إلى`` ...)."""
    return TRANSITION_RE.match(strip_bidi_marks(text)) is not None


def matches_director_note(text: str) -> bool:
    """True for parenthesised lines and explicit director/production notes."""
    stripped = strip_bidi_marks(text)
    return bool(_WRAPPED_NOTE_RE.match(stripped) or _NOTE_PREFIX_RE.match(stripped))


def looks_like_character_name(text: str) -> bool:
    """Shape test for a character cue.

    Latin scripts mark cues by upper case (``JOHN``, ``COP #1``,
    ``MARY (V.O.)``).  Arabic has no letter case, so an Arabic cue is a
    short name followed by a colon (``أحمد:``).
    """
    stripped = strip_bidi_marks(text)
    if len(stripped) > 50:
        return False
    return bool(_LATIN_CUE_RE.match(stripped) or _ARABIC_CUE_RE.match(stripped))


def strip_decorative_bullets(text: str) -> str:
    """Drop leading bullet glyphs but keep the indentation in front of them."""
    return _BULLET_RE.sub(r"\1", text, count=1)
