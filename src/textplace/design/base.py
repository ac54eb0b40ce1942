"""Base abstractions for measuring and drawing lines of text."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from textplace.types import Pixel, RGBAColor

if TYPE_CHECKING:
    from textplace.fonts import FontContext


class TextMetrics(Protocol):
    """Anything that can measure strings in device pixels for one font and scale."""

    def measure_width(self, text: str) -> Pixel:
        """Advance width of text, truncated to whole pixels."""
        ...

    def line_height(self) -> Pixel:
        """Distance between consecutive baselines (ascent + descent + line gap)."""
        ...


@dataclass(frozen=True)
class PlacedLine:
    """A physical line together with the origin it is drawn at."""

    text: str
    x: Pixel  # Left edge of the line in pixels
    y: Pixel  # Top of the line box in pixels


class TextRenderer(ABC):
    """Base class for render primitives that put lines onto a canvas."""

    @abstractmethod
    def draw_line(
        self,
        canvas: Any,
        color: RGBAColor,
        x: Pixel,
        y: Pixel,
        font_context: "FontContext",
        text: str,
    ) -> None:
        """
        Draw one line of text with its top-left corner at (x, y).

        Args:
            canvas: Render target, mutated in place.
            color: Fill color for the glyphs.
            x: Left edge of the line in pixels.
            y: Top of the line box in pixels.
            font_context: Font, scale, and color bundle to draw with.
            text: The line to draw.
        """
        pass

    @abstractmethod
    def draw_marker(self, canvas: Any, color: RGBAColor, x: Pixel, y: Pixel) -> None:
        """
        Mark a single point on the canvas (used by debug placement).

        Args:
            canvas: Render target, mutated in place.
            color: Marker color.
            x: Marker x-coordinate in pixels.
            y: Marker y-coordinate in pixels.
        """
        pass
