"""Font loading and measurement."""

import io
import logging
from dataclasses import dataclass
from pathlib import Path

import freetype
from PIL import ImageFont

from textplace.types import Pixel, RGBAColor

logger = logging.getLogger(__name__)

DEFAULT_COLOR: RGBAColor = (0, 0, 0, 255)


@dataclass(frozen=True)
class Scale:
    """
    Font scale in pixels.

    ``y`` is the pixel distance from the font's descent line to its ascent line.
    ``x`` is the same measure applied horizontally, so ``x < y`` condenses the
    glyphs and ``x > y`` widens them.
    """

    x: float
    y: float

    @classmethod
    def uniform(cls, size: float) -> "Scale":
        return cls(x=size, y=size)


def _validate_scale(scale: Scale) -> None:
    if scale.x <= 0 or scale.y <= 0:
        raise ValueError(f"FontContext scale.x or scale.y cannot be <= 0.0 (got x={scale.x}, y={scale.y})")


def _open_face(font: ImageFont.FreeTypeFont) -> freetype.Face:
    """Open the font Pillow loaded with FreeType to read metrics Pillow does not expose."""
    font_bytes = getattr(font, "font_bytes", None)
    if font_bytes is not None:
        return freetype.Face(io.BytesIO(font_bytes))
    return freetype.Face(str(font.path))


class FontContext:
    """
    A bundle of font related values: the font, its scale, and the draw color.

    Implements the TextMetrics protocol so the same object measures and draws.
    The context is only read while text is placed, so one context can be shared
    between placements on different canvases.
    """

    def __init__(
        self,
        font: ImageFont.FreeTypeFont,
        scale: Scale,
        color: RGBAColor = DEFAULT_COLOR,
    ) -> None:
        """
        Initialize the font context.

        Args:
            font: Loaded FreeType font (any size; it is re-sized to the scale).
            scale: Pixel scale, both components must be positive.
            color: RGBA draw color (default: opaque black).

        Raises:
            ValueError: If scale.x or scale.y is not positive.
        """
        _validate_scale(scale)

        face = _open_face(font)
        units_height = face.ascender - face.descender
        if units_height <= 0:
            raise ValueError(f"Font {font.getname()} has no usable ascent/descent metrics")

        # Ratios in font units, independent of the pixel size
        self._em_ratio = face.units_per_EM / units_height
        self._line_gap_ratio = max(face.height - units_height, 0) / units_height

        self._base_font = font
        self.color = color
        self._scale = scale
        self.font = self._sized_font(scale)

    @classmethod
    def from_file(cls, path: Path, scale: Scale, color: RGBAColor = DEFAULT_COLOR) -> "FontContext":
        """
        Load a TrueType/OpenType font file into a context.

        Args:
            path: Path to the font file.
            scale: Pixel scale, both components must be positive.
            color: RGBA draw color.

        Returns:
            FontContext ready for measuring and drawing.

        Raises:
            ValueError: If the scale is not positive.
            FileNotFoundError: If the font file doesn't exist.
        """
        _validate_scale(scale)
        if not path.exists():
            raise FileNotFoundError(f"Font file not found: {path}")

        font = ImageFont.truetype(str(path), size=scale.y, layout_engine=ImageFont.Layout.BASIC)
        logger.info(f"Loaded font {font.getname()} from {path.name}")
        return cls(font, scale, color)

    @classmethod
    def default(cls, scale: Scale, color: RGBAColor = DEFAULT_COLOR) -> "FontContext":
        """
        Context using the font bundled with Pillow.

        Args:
            scale: Pixel scale, both components must be positive.
            color: RGBA draw color.

        Returns:
            FontContext backed by Pillow's default FreeType font.
        """
        _validate_scale(scale)
        font = ImageFont.load_default(size=scale.y)
        if not isinstance(font, ImageFont.FreeTypeFont):
            raise ValueError("Pillow was built without FreeType support; pass a font file instead")
        return cls(font, scale, color)

    def _sized_font(self, scale: Scale) -> ImageFont.FreeTypeFont:
        return self._base_font.font_variant(size=scale.y * self._em_ratio, layout_engine=ImageFont.Layout.BASIC)

    @property
    def scale(self) -> Scale:
        """Current pixel scale; change it with set_scale."""
        return self._scale

    @property
    def horizontal_scale(self) -> float:
        """Stretch factor applied to widths and drawing (1.0 for a uniform scale)."""
        return self._scale.x / self._scale.y

    def set_scale(self, scale: Scale) -> None:
        """
        Change the scale of this context.

        Raises:
            ValueError: If scale.x or scale.y is not positive.
        """
        _validate_scale(scale)
        self.font = self._sized_font(scale)
        self._scale = scale

    def set_color(self, color: RGBAColor) -> None:
        self.color = color

    def measure_width(self, text: str) -> Pixel:
        """
        Advance width of text at the current scale.

        Args:
            text: Text to measure.

        Returns:
            Width in whole pixels (truncated).
        """
        if not text:
            return 0
        return int(self.font.getlength(text) * self.horizontal_scale)

    def line_height(self) -> Pixel:
        """
        Baseline-to-baseline distance at the current scale.

        Returns:
            Ascent - descent + line gap, in whole pixels (truncated).
        """
        return int(self._scale.y + self._scale.y * self._line_gap_ratio)

    def __str__(self) -> str:
        family, style = self.font.getname()
        return f"FontContext{{font: {family} {style}, scale: {self._scale}, color: {self.color}}}"
