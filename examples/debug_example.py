#!/usr/bin/env python3
"""
Debug Example: Wrapped Text with the Anchor Marked

Wraps a long word at 250 pixels, centers the block on (400, 300), and marks
the anchor point with a red cross so the placement can be checked by eye.
"""

import logging
from pathlib import Path

from textplace import FontContext, Placement, Scale, place_text
from textplace.render import blank_canvas, save_image

# Show every wrap decision
logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

canvas = blank_canvas((800, 600))
font = FontContext.default(Scale.uniform(40), color=(0, 160, 0, 255))

placement = Placement(justify="center", vertical_anchor="center", wrap_width=250, debug=True)
placed = place_text(
    canvas,
    """This is Line 1
    Thisislinewithextralong 2""",
    font,
    400,
    300,
    placement,
)

for line in placed:
    print(f"{line.text!r} at ({line.x}, {line.y})")

save_image(canvas, Path("output/debug.png"))
print("✓ Image saved to: output/debug.png")
