"""Style resolution, height measurement and pagination."""

from layout.measurement import CharacterGridMeasurer, HeightMeasurer, measure_elements
from layout.paginator import Paginator, paginate
from layout.styles import StyleDescriptor, get_format_style, resolve_styles

__all__ = [
    "CharacterGridMeasurer",
    "HeightMeasurer",
    "Paginator",
    "StyleDescriptor",
    "get_format_style",
    "measure_elements",
    "paginate",
    "resolve_styles",
]
