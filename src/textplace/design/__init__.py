"""Layout abstractions and the line positioning engine."""

from textplace.design.base import PlacedLine, TextMetrics, TextRenderer
from textplace.design.layout import compute_line_origins, position_and_draw

__all__ = [
    "PlacedLine",
    "TextMetrics",
    "TextRenderer",
    "compute_line_origins",
    "position_and_draw",
]
