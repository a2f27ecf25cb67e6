"""Visual style lookup per element type.

The classifier never emits styling; the renderer and the height measurer
resolve a ``StyleDescriptor`` from the element type through this table.
All lengths are in points.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from typing import Any

from core.models import ElementType, ScreenplayElement

DEFAULT_FONT_FAMILY = "Amiri"
DEFAULT_FONT_SIZE = 12.0

_REM = 12.0  # 1rem = 16px = 12pt
_INCH = 72.0


@dataclass(frozen=True, slots=True)
class StyleDescriptor:
    """Resolved style of one element type."""

    font_family: str = DEFAULT_FONT_FAMILY
    font_size: float = DEFAULT_FONT_SIZE
    font_weight: str = "normal"
    font_style: str = "normal"
    text_align: str = "right"
    text_transform: str = "none"
    direction: str = "rtl"
    line_height: float = 1.5
    width: float | None = None  # None = full content width
    margin_top: float = 0.0
    margin_bottom: float = 0.0

    def as_css(self) -> dict[str, str]:
        """Render as CSS properties for the editing surface."""
        css = {
            "font-family": f"'{self.font_family}', monospace",
            "font-size": f"{self.font_size:g}pt",
            "font-weight": self.font_weight,
            "font-style": self.font_style,
            "text-align": self.text_align,
            "text-transform": self.text_transform,
            "direction": self.direction,
            "line-height": f"{self.line_height:g}",
            "margin-top": f"{self.margin_top:g}pt",
            "margin-bottom": f"{self.margin_bottom:g}pt",
        }
        if self.width is not None:
            css["width"] = f"{self.width:g}pt"
            css["margin-left"] = "auto"
            css["margin-right"] = "auto"
        return css


_FORMAT_STYLES: dict[ElementType, dict[str, Any]] = {
    ElementType.BASMALA: {"text_align": "left", "font_weight": "bold", "margin_bottom": 2 * _REM},
    ElementType.SCENE_HEADING: {"font_weight": "bold", "text_transform": "uppercase"},
    ElementType.ACTION: {"text_align": "right"},
    ElementType.CHARACTER: {
        "text_align": "center",
        "font_weight": "bold",
        "text_transform": "uppercase",
        "width": 2.5 * _INCH,
    },
    ElementType.PARENTHETICAL: {"text_align": "center", "font_style": "italic", "width": 2.0 * _INCH},
    ElementType.DIALOGUE: {
        "text_align": "center",
        "width": 2.5 * _INCH,
        "line_height": 1.2,
        "margin_bottom": 0.3 * _REM,
    },
    ElementType.TRANSITION: {
        "text_align": "center",
        "font_weight": "bold",
        "text_transform": "uppercase",
    },
}

StyleLookup = Callable[[ElementType], StyleDescriptor]


def get_format_style(
    element_type: ElementType,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size: float = DEFAULT_FONT_SIZE,
) -> StyleDescriptor:
    """Return the style for *element_type* in the given font."""
    base = StyleDescriptor(font_family=font_family, font_size=font_size)
    return replace(base, **_FORMAT_STYLES.get(element_type, {}))


def resolve_styles(
    elements: Sequence[ScreenplayElement], style_lookup: StyleLookup = get_format_style
) -> list[StyleDescriptor]:
    """First layout phase: one resolved style per element."""
    return [style_lookup(element.type) for element in elements]
