"""Line positioning: turn physical lines into per-line draw origins."""

import logging
from typing import TYPE_CHECKING, Any, List, Sequence

from textplace.design.base import PlacedLine, TextMetrics, TextRenderer
from textplace.types import Justification, Pixel, VerticalAnchor

if TYPE_CHECKING:
    from textplace.fonts import FontContext

logger = logging.getLogger(__name__)

JUSTIFICATIONS: tuple[Justification, ...] = ("left", "center", "right")
VERTICAL_ANCHORS: tuple[VerticalAnchor, ...] = ("top", "center", "bottom")


def validate_alignment(justify: str, vertical_anchor: str) -> None:
    """
    Reject justification or anchor values outside the supported set.

    Raises:
        ValueError: If either value is unknown.
    """
    if justify not in JUSTIFICATIONS:
        raise ValueError(f"Unknown justification '{justify}'. Expected one of: {', '.join(JUSTIFICATIONS)}")
    if vertical_anchor not in VERTICAL_ANCHORS:
        raise ValueError(
            f"Unknown vertical anchor '{vertical_anchor}'. Expected one of: {', '.join(VERTICAL_ANCHORS)}"
        )


def _div_toward_zero(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def vertical_offset(
    vertical_anchor: VerticalAnchor, line_height: Pixel, line_index: int, line_count: int
) -> Pixel:
    """
    Vertical offset of one line relative to the anchor y-coordinate.

    Formulas (H = line_height, i = line_index, N = line_count):
    - top:    H * i
    - center: (H * i - H * (N - i)) / 2, truncated toward zero
    - bottom: -H * (N - i)

    The center formula rounds toward the first line when N is even.

    Args:
        vertical_anchor: "top", "center", or "bottom".
        line_height: Line height in pixels.
        line_index: Zero-based index of the line in the block.
        line_count: Number of lines in the block.

    Returns:
        Offset in pixels to add to the anchor y-coordinate.
    """
    if vertical_anchor == "top":
        return line_height * line_index
    if vertical_anchor == "center":
        return _div_toward_zero(line_height * line_index - line_height * (line_count - line_index), 2)
    # "bottom"
    return -(line_height * (line_count - line_index))


def horizontal_offset(justify: Justification, line_width: Pixel) -> Pixel:
    """
    Horizontal offset of one line, subtracted from the anchor x-coordinate.

    Args:
        justify: "left", "center", or "right".
        line_width: Measured width of the line in pixels.

    Returns:
        Offset in pixels.
    """
    if justify == "left":
        return 0
    if justify == "center":
        return line_width // 2
    # "right"
    return line_width


def compute_line_origins(
    lines: Sequence[str],
    metrics: TextMetrics,
    x: Pixel,
    y: Pixel,
    justify: Justification = "center",
    vertical_anchor: VerticalAnchor = "center",
) -> List[PlacedLine]:
    """
    Compute the draw origin of every physical line in a block.

    Pure arithmetic on the measured widths and the line height; nothing is drawn.

    Args:
        lines: Physical lines in top-to-bottom order.
        metrics: Metrics provider for the active font and scale.
        x: Anchor x-coordinate in pixels.
        y: Anchor y-coordinate in pixels.
        justify: Horizontal justification relative to x (default: "center").
        vertical_anchor: Where the block sits relative to y (default: "center").

    Returns:
        One PlacedLine per input line, in the same order.

    Raises:
        ValueError: If justify or vertical_anchor is unknown.
    """
    validate_alignment(justify, vertical_anchor)

    line_height = metrics.line_height()
    line_count = len(lines)
    placed: List[PlacedLine] = []

    for index, line in enumerate(lines):
        line_width = metrics.measure_width(line)
        origin_x = x - horizontal_offset(justify, line_width)
        origin_y = y + vertical_offset(vertical_anchor, line_height, index, line_count)
        logger.debug("%r width: %d, origin: (%d, %d)", line, line_width, origin_x, origin_y)
        placed.append(PlacedLine(text=line, x=origin_x, y=origin_y))

    return placed


def position_and_draw(
    canvas: Any,
    lines: Sequence[str],
    font_context: "FontContext",
    x: Pixel,
    y: Pixel,
    justify: Justification,
    vertical_anchor: VerticalAnchor,
    renderer: TextRenderer,
) -> List[PlacedLine]:
    """
    Position a block of physical lines and draw them one by one.

    Args:
        canvas: Render target, passed through to the renderer untouched.
        lines: Physical lines in top-to-bottom order.
        font_context: Font bundle used for both measuring and drawing.
        x: Anchor x-coordinate in pixels.
        y: Anchor y-coordinate in pixels.
        justify: Horizontal justification relative to x.
        vertical_anchor: Where the block sits relative to y.
        renderer: Render primitive invoked once per line, in line order.

    Returns:
        The placed lines that were drawn.
    """
    placed = compute_line_origins(lines, font_context, x, y, justify, vertical_anchor)
    for placed_line in placed:
        renderer.draw_line(canvas, font_context.color, placed_line.x, placed_line.y, font_context, placed_line.text)
    return placed
