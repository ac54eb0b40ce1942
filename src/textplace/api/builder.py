"""High-level API for placing text on images."""

import logging
from typing import Any, List

from textplace.config import Placement
from textplace.design.base import PlacedLine, TextMetrics, TextRenderer
from textplace.design.layout import compute_line_origins, position_and_draw, validate_alignment
from textplace.fonts import FontContext
from textplace.render.image import MARKER_COLOR, PillowRenderer
from textplace.types import Justification, NoWrap, Pixel, VerticalAnchor, Wrap, WrapPolicy
from textplace.utils.text import split_logical_lines
from textplace.utils.wrap import check_wrap_width, wrap_lines

logger = logging.getLogger(__name__)


def prepare_lines(text: str, metrics: TextMetrics, wrap: WrapPolicy = NoWrap()) -> List[str]:
    """
    Turn raw text into the physical lines that will be drawn.

    Args:
        text: Raw text; explicit line breaks always start a new line.
        metrics: Metrics provider for the active font and scale.
        wrap: NoWrap() or Wrap(max_width).

    Returns:
        Physical lines in top-to-bottom order.

    Raises:
        ValueError: If the wrap width is below two ems of the active font.
    """
    lines = split_logical_lines(text)
    if isinstance(wrap, Wrap):
        check_wrap_width(wrap.max_width, metrics)
        return wrap_lines(lines, wrap.max_width, metrics)
    return lines


def layout_text(
    text: str,
    metrics: TextMetrics,
    x: Pixel,
    y: Pixel,
    justify: Justification = "center",
    vertical_anchor: VerticalAnchor = "center",
    wrap: WrapPolicy = NoWrap(),
) -> List[PlacedLine]:
    """
    Compute where every line of text goes, without drawing anything.

    Args:
        text: Raw text to place.
        metrics: Metrics provider for the active font and scale.
        x: Anchor x-coordinate in pixels.
        y: Anchor y-coordinate in pixels.
        justify: Horizontal justification (default: "center").
        vertical_anchor: Vertical anchor (default: "center").
        wrap: Wrap policy (default: NoWrap()).

    Returns:
        Placed lines in drawing order.
    """
    validate_alignment(justify, vertical_anchor)
    lines = prepare_lines(text, metrics, wrap)
    return compute_line_origins(lines, metrics, x, y, justify, vertical_anchor)


def text_on_image(
    canvas: Any,
    text: str,
    font_context: FontContext,
    x: Pixel,
    y: Pixel,
    justify: Justification = "center",
    vertical_anchor: VerticalAnchor = "center",
    wrap: WrapPolicy = NoWrap(),
    renderer: TextRenderer | None = None,
) -> List[PlacedLine]:
    """
    Draw text on an image with justification, vertical anchoring, and wrapping.

    All settings are validated before the canvas is touched.

    Args:
        canvas: Image to draw on (mutated in place).
        text: Raw text; explicit line breaks start new lines, each line is trimmed.
        font_context: Font, scale, and color to draw with.
        x: Anchor x-coordinate in pixels.
        y: Anchor y-coordinate in pixels.
        justify: How each line extends from x (default: "center").
        vertical_anchor: Where the block sits relative to y (default: "center").
        wrap: NoWrap() or Wrap(max_width) (default: NoWrap()).
        renderer: Render primitive (default: PillowRenderer).

    Returns:
        The placed lines that were drawn.

    Raises:
        ValueError: If an alignment value is unknown or the wrap width is too small.

    Example:
        ```python
        from pathlib import Path
        from PIL import Image
        from textplace import FontContext, Scale, Wrap, text_on_image

        image = Image.open("background.png").convert("RGBA")
        font = FontContext.from_file(Path("font.ttf"), Scale.uniform(40), (0, 255, 0, 255))
        text_on_image(image, "This is Line 1\\nThis is Line 2", font, 400, 800, wrap=Wrap(250))
        ```
    """
    validate_alignment(justify, vertical_anchor)
    lines = prepare_lines(text, font_context, wrap)
    return position_and_draw(
        canvas, lines, font_context, x, y, justify, vertical_anchor, renderer or PillowRenderer()
    )


def text_on_image_draw_debug(
    canvas: Any,
    text: str,
    font_context: FontContext,
    x: Pixel,
    y: Pixel,
    justify: Justification = "center",
    vertical_anchor: VerticalAnchor = "center",
    wrap: WrapPolicy = NoWrap(),
    renderer: TextRenderer | None = None,
) -> List[PlacedLine]:
    """
    Draw text like text_on_image, with a small red cross at the anchor point.

    The cross is drawn before the text, and only once every setting has been
    validated.

    Returns:
        The placed lines that were drawn.
    """
    validate_alignment(justify, vertical_anchor)
    renderer = renderer or PillowRenderer()
    lines = prepare_lines(text, font_context, wrap)

    logger.debug(f"Marking anchor at ({x}, {y})")
    renderer.draw_marker(canvas, MARKER_COLOR, x, y)
    return position_and_draw(canvas, lines, font_context, x, y, justify, vertical_anchor, renderer)


def place_text(
    canvas: Any,
    text: str,
    font_context: FontContext,
    x: Pixel,
    y: Pixel,
    placement: Placement | None = None,
    renderer: TextRenderer | None = None,
) -> List[PlacedLine]:
    """
    Draw text using a Placement configuration.

    Args:
        canvas: Image to draw on (mutated in place).
        text: Raw text to place.
        font_context: Font, scale, and color to draw with.
        x: Anchor x-coordinate in pixels.
        y: Anchor y-coordinate in pixels.
        placement: Justification, anchor, wrap width, and debug flag. If None, uses Placement() defaults.
        renderer: Render primitive (default: PillowRenderer).

    Returns:
        The placed lines that were drawn.
    """
    placement = placement or Placement()
    draw = text_on_image_draw_debug if placement.debug else text_on_image
    return draw(
        canvas,
        text,
        font_context,
        x,
        y,
        justify=placement.justify,
        vertical_anchor=placement.vertical_anchor,
        wrap=placement.wrap_policy,
        renderer=renderer,
    )
