"""Public entry points for placing text."""

from textplace.api.builder import (
    layout_text,
    place_text,
    prepare_lines,
    text_on_image,
    text_on_image_draw_debug,
)

__all__ = [
    "layout_text",
    "place_text",
    "prepare_lines",
    "text_on_image",
    "text_on_image_draw_debug",
]
