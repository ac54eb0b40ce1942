#!/usr/bin/env python3
"""
Simple Example: Three Lines on a Background Image

Places a centered block of three lines at the top of an image and saves the result.
"""

from pathlib import Path

from textplace import FontContext, NoWrap, Scale, text_on_image
from textplace.render import blank_canvas, load_image, save_image

background_path = Path("assets/background.png")
font_path = Path("assets/BitstreamVeraSansMonoBold.ttf")  # Replace with your font

canvas = load_image(background_path) if background_path.exists() else blank_canvas((800, 600))

if font_path.exists():
    font = FontContext.from_file(font_path, Scale.uniform(40))
else:
    font = FontContext.default(Scale.uniform(40))

text_on_image(
    canvas,
    """This is Line 1
    This is Line 2
    This is a Line with more content.""",
    font,
    400,
    0,
    justify="center",
    vertical_anchor="top",
    wrap=NoWrap(),
)

save_image(canvas, Path("output/out.png"))

print("✓ Image saved to: output/out.png")
