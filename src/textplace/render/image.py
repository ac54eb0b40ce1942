"""Image canvas utilities and the Pillow render primitive."""

import logging
from pathlib import Path

from PIL import Image, ImageDraw

from textplace.design.base import TextRenderer
from textplace.fonts import FontContext
from textplace.types import Pixel, RGBAColor

logger = logging.getLogger(__name__)

MARKER_COLOR: RGBAColor = (255, 0, 0, 255)

# Arm length of the debug cross, in pixels from the center
MARKER_ARM = 2


def load_image(path: Path) -> Image.Image:
    """
    Load an image file as an RGBA canvas.

    Args:
        path: Image file (PNG, JPEG, etc.).

    Returns:
        PIL Image in RGBA mode.

    Raises:
        FileNotFoundError: If the image doesn't exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"Image not found: {path}")

    with Image.open(path) as img:
        # Text colors are RGBA
        return img.convert("RGBA")


def blank_canvas(size: tuple[int, int], color: RGBAColor = (255, 255, 255, 255)) -> Image.Image:
    """
    Create an empty RGBA canvas.

    Args:
        size: Canvas size as (width, height) in pixels.
        color: Background color.

    Returns:
        New PIL Image.
    """
    return Image.new("RGBA", size, color)


def save_image(img: Image.Image, path: Path) -> None:
    """
    Save a canvas, creating the parent directory if needed.

    JPEG has no alpha channel, so RGBA canvases are flattened to RGB for it.

    Args:
        img: PIL Image object.
        path: Output path; the format follows the file extension.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() in (".jpg", ".jpeg") and img.mode != "RGB":
        img = img.convert("RGB")
    img.save(path)
    logger.info(f"Saved image to {path}")


class PillowRenderer(TextRenderer):
    """Draws lines of text onto a PIL Image."""

    def draw_line(
        self,
        canvas: Image.Image,
        color: RGBAColor,
        x: Pixel,
        y: Pixel,
        font_context: FontContext,
        text: str,
    ) -> None:
        if not text:
            return

        if font_context.scale.x == font_context.scale.y:
            # "la" anchor: y is the ascender line, the top of the line box
            ImageDraw.Draw(canvas).text((x, y), text, font=font_context.font, fill=color, anchor="la")
            return

        # Non-uniform scale: draw at the vertical scale, then stretch horizontally.
        # The layer covers the ink box too, which can extend past the advance width.
        left, top, right, bottom = (int(v) for v in font_context.font.getbbox(text, anchor="la"))
        pad_left = max(-left, 0)
        pad_top = max(-top, 0)
        base_width = max(right + pad_left, int(font_context.font.getlength(text)) + pad_left, 1)
        height = max(bottom + pad_top, font_context.line_height() + pad_top, 1)
        layer = Image.new("RGBA", (base_width, height), (0, 0, 0, 0))
        ImageDraw.Draw(layer).text((pad_left, pad_top), text, font=font_context.font, fill=color, anchor="la")

        stretch = font_context.horizontal_scale
        stretched_width = max(int(base_width * stretch), 1)
        layer = layer.resize((stretched_width, height), Image.Resampling.LANCZOS)
        canvas.paste(layer, (x - int(pad_left * stretch), y - pad_top), layer)

    def draw_marker(self, canvas: Image.Image, color: RGBAColor, x: Pixel, y: Pixel) -> None:
        """Draw a small cross centered on (x, y); points outside the canvas are skipped."""
        width, height = canvas.size
        points = [(x + offset, y) for offset in range(-MARKER_ARM, MARKER_ARM + 1)]
        points += [(x, y + offset) for offset in range(-MARKER_ARM, MARKER_ARM + 1) if offset]
        for px, py in points:
            if 0 <= px < width and 0 <= py < height:
                canvas.putpixel((px, py), color)
