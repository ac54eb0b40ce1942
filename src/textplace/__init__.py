"""Place justified, anchored, and wrapped multi-line text on images."""

__version__ = "0.1.0"

# High-level Python API
from textplace.api import (
    layout_text,
    place_text,
    text_on_image,
    text_on_image_draw_debug,
)
from textplace.config import Config, FontConfig, Placement, load_config
from textplace.design.base import PlacedLine
from textplace.fonts import FontContext, Scale
from textplace.render.image import PillowRenderer
from textplace.types import NoWrap, Wrap

__all__ = [
    "Config",
    "FontConfig",
    "FontContext",
    "NoWrap",
    "PillowRenderer",
    "PlacedLine",
    "Placement",
    "Scale",
    "Wrap",
    "layout_text",
    "load_config",
    "place_text",
    "text_on_image",
    "text_on_image_draw_debug",
]
