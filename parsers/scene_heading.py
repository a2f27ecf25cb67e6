"""Scene heading parser with Arabic and English support.

Parses strings like:
    INT. HOUSE - DAY                   -> (None, INT, "HOUSE", DAY)
    EXT. FOREST - NIGHT                -> (None, EXT, "FOREST", NIGHT)
    مشهد 3 - داخلي - بيت أحمد - ليل     -> ("3", INT, "بيت أحمد", NIGHT)
    مشهد 7: خارجي. الشارع – نهار       -> ("7", EXT, "الشارع", DAY)
"""

import re
from dataclasses import dataclass

from core.models import LocationType, TimeOfDay
from parsers.patterns import strip_bidi_marks

# ---------------------------------------------------------------------------
# Time-of-day mapping (English + Arabic)
# ---------------------------------------------------------------------------

_TIME_MAP: dict[str, TimeOfDay] = {
    # English
    "DAY": TimeOfDay.DAY,
    "NIGHT": TimeOfDay.NIGHT,
    "DAWN": TimeOfDay.DAWN,
    "DUSK": TimeOfDay.DUSK,
    "MORNING": TimeOfDay.MORNING,
    "EVENING": TimeOfDay.EVENING,
    "CONTINUOUS": TimeOfDay.CONTINUOUS,
    "CONT": TimeOfDay.CONTINUOUS,
    "LATER": TimeOfDay.CONTINUOUS,
    "SAME": TimeOfDay.CONTINUOUS,
    "MOMENTS LATER": TimeOfDay.CONTINUOUS,
    # Arabic
    "نهار": TimeOfDay.DAY,
    "نهارا": TimeOfDay.DAY,
    "نهاراً": TimeOfDay.DAY,
    "ظهر": TimeOfDay.DAY,
    "الظهر": TimeOfDay.DAY,
    "عصر": TimeOfDay.DAY,
    "العصر": TimeOfDay.DAY,
    "ليل": TimeOfDay.NIGHT,
    "ليلا": TimeOfDay.NIGHT,
    "ليلاً": TimeOfDay.NIGHT,
    "عشاء": TimeOfDay.NIGHT,
    "صباح": TimeOfDay.MORNING,
    "صباحا": TimeOfDay.MORNING,
    "صباحاً": TimeOfDay.MORNING,
    "مساء": TimeOfDay.EVENING,
    "مساءً": TimeOfDay.EVENING,
    "فجر": TimeOfDay.DAWN,
    "الفجر": TimeOfDay.DAWN,
    "مغرب": TimeOfDay.DUSK,
    "المغرب": TimeOfDay.DUSK,
    "متصل": TimeOfDay.CONTINUOUS,
}

# ---------------------------------------------------------------------------
# Location-type prefixes (order matters -- longer matches first)
# ---------------------------------------------------------------------------

_LOC_PREFIXES: list[tuple[str, LocationType]] = [
    ("INT./EXT.", LocationType.INT_EXT),
    ("INT./EXT", LocationType.INT_EXT),
    ("INT/EXT.", LocationType.INT_EXT),
    ("INT/EXT", LocationType.INT_EXT),
    ("EXT./INT.", LocationType.INT_EXT),
    ("EXT./INT", LocationType.INT_EXT),
    ("EXT/INT.", LocationType.INT_EXT),
    ("EXT/INT", LocationType.INT_EXT),
    ("I/E.", LocationType.INT_EXT),
    ("I/E", LocationType.INT_EXT),
    ("داخلي/خارجي", LocationType.INT_EXT),
    ("خارجي/داخلي", LocationType.INT_EXT),
    ("INT.", LocationType.INT),
    ("داخلي", LocationType.INT),
    ("EXT.", LocationType.EXT),
    ("خارجي", LocationType.EXT),
]

_ARABIC_LOC_WORDS: dict[str, LocationType] = {
    "داخلي": LocationType.INT,
    "خارجي": LocationType.EXT,
    "داخلي/خارجي": LocationType.INT_EXT,
    "خارجي/داخلي": LocationType.INT_EXT,
}

# "مشهد 3", "لقطة ٤:", "SCENE 12 -"
_NUMBERED_RE = re.compile(
    r"^(?:مشهد|لقطة|SCENE)\s*(\d+)\s*[:：.\-–—]?\s*(.*)$",
    re.IGNORECASE | re.DOTALL,
)

# Separator between heading parts (dash variants)
_SEP_RE = re.compile(r"\s*[-–—]\s*")

_PART_STRIP = " .:：،,"


@dataclass(frozen=True, slots=True)
class HeadingComponents:
    """Parsed components of a scene heading."""

    number: str | None
    location_type: LocationType
    location: str
    time_of_day: TimeOfDay


def parse_scene_heading(heading: str) -> HeadingComponents:
    """Parse a scene heading string into its constituent parts.

    Returns ``HeadingComponents`` with best-effort extraction.  Unknown
    location types or times default to ``UNKNOWN``.
    """
    text = strip_bidi_marks(heading)

    # 1. Optional scene number
    number: str | None = None
    remainder = text
    numbered = _NUMBERED_RE.match(text)
    if numbered:
        number = numbered.group(1)
        remainder = numbered.group(2).strip()

    # 2. Determine location type by prefix
    loc_type = LocationType.UNKNOWN
    upper = remainder.upper()
    for prefix, lt in _LOC_PREFIXES:
        if upper.startswith(prefix):
            loc_type = lt
            remainder = remainder[len(prefix) :].strip()
            break

    parts = [p.strip(_PART_STRIP) for p in _SEP_RE.split(remainder)]
    parts = [p for p in parts if p]

    # Arabic headings may put داخلي/خارجي after the location
    if loc_type == LocationType.UNKNOWN:
        for i, part in enumerate(parts):
            if part in _ARABIC_LOC_WORDS:
                loc_type = _ARABIC_LOC_WORDS[part]
                del parts[i]
                break

    # 3. Time of day is the last part when it is a known time word
    tod = TimeOfDay.UNKNOWN
    if parts:
        tod = _TIME_MAP.get(parts[-1].upper(), TimeOfDay.UNKNOWN)
        if tod != TimeOfDay.UNKNOWN:
            parts = parts[:-1]

    location = " - ".join(parts)

    return HeadingComponents(
        number=number,
        location_type=loc_type,
        location=location if location else text,
        time_of_day=tod,
    )
