"""Pydantic models for screenplay elements, layout and API schemas."""

from collections.abc import Iterator
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

_POINTS_PER_CM = 72 / 2.54


class ElementType(str, Enum):
    """Closed set of screenplay element types."""

    SCENE_HEADING = "SceneHeading"
    CHARACTER = "Character"
    DIALOGUE = "Dialogue"
    PARENTHETICAL = "Parenthetical"
    ACTION = "Action"
    TRANSITION = "Transition"
    BASMALA = "Basmala"

    @property
    def css_class(self) -> str:
        """Class name the renderer uses for this element type."""
        return self.value.lower()

    @classmethod
    def from_label(cls, label: str) -> "ElementType | None":
        """Map an external classification label to an element type.

        Accepts the enum values and the editor's kebab-case format names
        (``scene-header-1``, ``director-note`` ...), case-insensitive.
        Returns ``None`` for anything else.
        """
        return _LABELS.get(label.strip().lower())


_LABELS: dict[str, ElementType] = {
    **{member.value.lower(): member for member in ElementType},
    "scene-header-1": ElementType.SCENE_HEADING,
    "scene-header-2": ElementType.SCENE_HEADING,
    "scene-header-3": ElementType.SCENE_HEADING,
    "scene-heading": ElementType.SCENE_HEADING,
    "director-note": ElementType.PARENTHETICAL,
}


class ScreenplayElement(BaseModel):
    """One classified line of a screenplay."""

    model_config = ConfigDict(frozen=True)

    type: ElementType = Field(..., description="Element type")
    content: str = Field(..., description="Trimmed line content")


class ClassificationContext(BaseModel):
    """Running state threaded through the classification of one document."""

    model_config = ConfigDict(frozen=True)

    last_element_type: ElementType | None = Field(
        None, description="Type of the previously classified element"
    )
    speaker_active: bool = Field(
        default=False,
        description="True from a character cue through its parentheticals and dialogue",
    )

    def advance(self, element_type: ElementType) -> "ClassificationContext":
        """Return the context that follows an element of *element_type*."""
        if element_type == ElementType.CHARACTER:
            speaker_active = True
        elif element_type in (ElementType.PARENTHETICAL, ElementType.DIALOGUE):
            speaker_active = self.speaker_active
        else:
            speaker_active = False
        return ClassificationContext(
            last_element_type=element_type, speaker_active=speaker_active
        )


class ClassificationHint(BaseModel):
    """Label suggested by an external AI/OCR classifier."""

    label: str = Field(..., description="Suggested element label")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Classifier confidence")


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


class PageBreakMarker(BaseModel):
    """Marker between the last element of one page and the first of the next."""

    model_config = ConfigDict(frozen=True)

    page_number: int = Field(..., ge=2, description="Number of the page that starts here")


class Page(BaseModel):
    """A laid-out page referencing the shared element objects."""

    number: int = Field(..., ge=1, description="1-based page number")
    elements: list[ScreenplayElement] = Field(default_factory=list)
    height: float = Field(default=0.0, description="Sum of measured element heights")


class PaginatedLayout(BaseModel):
    """Result of one pagination pass."""

    pages: list[Page] = Field(..., min_length=1)
    available_height: float = Field(..., gt=0.0, description="Usable content height per page")

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def items(self) -> Iterator[ScreenplayElement | PageBreakMarker]:
        """Yield elements in order with a marker before every page after the first."""
        for page in self.pages:
            if page.number > 1:
                yield PageBreakMarker(page_number=page.number)
            yield from page.elements

    def page_numbers(self) -> list[int]:
        """Page number of each element, in element order."""
        return [page.number for page in self.pages for _ in page.elements]


class PageGeometry(BaseModel):
    """Physical page size and margins in centimetres (A4 by default)."""

    page_height_cm: float = Field(default=29.7, gt=0.0)
    page_width_cm: float = Field(default=21.0, gt=0.0)
    margin_top_cm: float = Field(default=1.9, ge=0.0)
    margin_bottom_cm: float = Field(default=1.9, ge=0.0)
    margin_left_cm: float = Field(default=2.5, ge=0.0)
    margin_right_cm: float = Field(default=2.5, ge=0.0)

    @property
    def available_height(self) -> float:
        """Usable content height in points."""
        cm = self.page_height_cm - self.margin_top_cm - self.margin_bottom_cm
        return cm * _POINTS_PER_CM

    @property
    def content_width(self) -> float:
        """Usable content width in points."""
        cm = self.page_width_cm - self.margin_left_cm - self.margin_right_cm
        return cm * _POINTS_PER_CM


# ---------------------------------------------------------------------------
# Scene headings
# ---------------------------------------------------------------------------


class TimeOfDay(str, Enum):
    """Time-of-day designation extracted from scene headings."""

    DAY = "DAY"
    NIGHT = "NIGHT"
    DAWN = "DAWN"
    DUSK = "DUSK"
    MORNING = "MORNING"
    EVENING = "EVENING"
    CONTINUOUS = "CONTINUOUS"
    UNKNOWN = "UNKNOWN"


class LocationType(str, Enum):
    """Interior/exterior designation from scene headings."""

    INT = "INT"
    EXT = "EXT"
    INT_EXT = "INT/EXT"
    UNKNOWN = "UNKNOWN"


class SceneSummary(BaseModel):
    """Scene index entry built from a scene heading element."""

    element_index: int = Field(..., ge=0, description="Position in the element sequence")
    heading: str = Field(..., description="Original scene heading text")
    number: str | None = Field(None, description="Scene number if the heading carries one")
    location: str = Field(..., description="Extracted location name")
    location_type: LocationType = Field(..., description="INT/EXT designation")
    time_of_day: TimeOfDay = Field(..., description="Time of day")
    page_number: int | None = Field(None, description="Page the scene starts on")


class FormattedScreenplay(BaseModel):
    """Classified and paginated screenplay."""

    elements: list[ScreenplayElement] = Field(default_factory=list)
    layout: PaginatedLayout | None = Field(
        None, description="Pagination result, None when layout was not possible"
    )
    page_count: int = Field(default=1, ge=1)
    word_count: int = Field(default=0, ge=0)
    scenes: list[SceneSummary] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class FormatRequest(BaseModel):
    """Request model for formatting pasted screenplay text."""

    text: str = Field(..., description="Raw pasted or typed text")
    use_ai_hints: bool = Field(
        default=False, description="Blend classification hints from the configured AI provider"
    )
    paginate: bool = Field(default=True, description="Lay the elements out onto pages")


class FormatResponse(BaseModel):
    """Formatted screenplay as an ordered element / page-break sequence."""

    items: list[ScreenplayElement | PageBreakMarker] = Field(default_factory=list)
    page_count: int = Field(..., ge=1)
    word_count: int = Field(..., ge=0)
    scenes: list[SceneSummary] = Field(default_factory=list)
    hints_applied: bool = Field(default=False)
    warnings: list[str] = Field(default_factory=list)


class ClassifyLineRequest(BaseModel):
    """Single line typed in the editor plus the context before it."""

    line: str = Field(..., description="Raw line")
    context: ClassificationContext = Field(default_factory=ClassificationContext)


class ClassifyLineResponse(BaseModel):
    """Classification of a single line and the context after it."""

    element: ScreenplayElement | None = Field(None, description="None for blank lines")
    context: ClassificationContext


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy", description="Service health status")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")
    version: str = Field(default="0.1.0", description="API version")


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(None, description="Field that caused the error")
    message: str = Field(..., description="Error message")
    error_code: str | None = Field(None, description="Error code for programmatic handling")


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(default_factory=list, description="Detailed error info")
    request_id: str | None = Field(None, description="Request tracking ID")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")
