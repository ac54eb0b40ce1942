"""Rendering modules for raster canvases."""

from textplace.render.image import (
    MARKER_COLOR,
    PillowRenderer,
    blank_canvas,
    load_image,
    save_image,
)

__all__ = [
    "MARKER_COLOR",
    "PillowRenderer",
    "blank_canvas",
    "load_image",
    "save_image",
]
