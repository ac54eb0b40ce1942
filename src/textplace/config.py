"""Configuration loading and validation."""

import tomllib
from pathlib import Path
from typing import Annotated, Tuple

from pydantic import BaseModel, Field

from textplace.types import (
    DEFAULT_JUSTIFICATION,
    DEFAULT_VERTICAL_ANCHOR,
    Justification,
    NoWrap,
    RGBAColor,
    VerticalAnchor,
    Wrap,
    WrapPolicy,
)

Channel = Annotated[int, Field(ge=0, le=255)]


class FontConfig(BaseModel):
    """Font used for placement."""

    path: Path | None = None
    """TrueType/OpenType font file. None uses the font bundled with Pillow."""

    size: float = Field(default=40.0, gt=0)
    """Vertical scale in pixels (ascent to descent)."""

    scale_x: float | None = Field(default=None, gt=0)
    """Horizontal scale in pixels. None uses size (no stretching)."""

    color: Tuple[Channel, Channel, Channel, Channel] = (0, 0, 0, 255)
    """Text color as RGBA in 0-255 range. Default: opaque black."""


class Placement(BaseModel):
    """
    How a block of text is positioned around its anchor point.

    All fields have defaults; override only what you need:

        placement = Placement(justify="left", wrap_width=250)
    """

    justify: Justification = DEFAULT_JUSTIFICATION
    """Horizontal justification relative to the anchor x-coordinate. Default: center."""

    vertical_anchor: VerticalAnchor = DEFAULT_VERTICAL_ANCHOR
    """Where the block sits relative to the anchor y-coordinate. Default: center."""

    wrap_width: int | None = Field(default=None, gt=0)
    """Maximum line width in pixels. None disables wrapping (the default)."""

    debug: bool = False
    """Mark the anchor point with a small red cross."""

    @property
    def wrap_policy(self) -> WrapPolicy:
        """Wrap policy matching wrap_width."""
        return NoWrap() if self.wrap_width is None else Wrap(self.wrap_width)


class Config(BaseModel):
    """Root configuration."""

    font: FontConfig = Field(default_factory=FontConfig)
    placement: Placement = Field(default_factory=Placement)


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, looks for textplace.toml in current directory.

    Returns:
        Validated Config object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    if config_path is None:
        config_path = Path.cwd() / "textplace.toml"

    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create it with [font] and [placement] tables, or pass options on the command line."
        )

    with open(config_path, "rb") as f:
        config_dict = tomllib.load(f)

    return Config(**config_dict)


def parse_color(value: str) -> RGBAColor:
    """
    Parse a color given as hex or as comma-separated channels.

    Accepted forms: "#rrggbb", "#rrggbbaa", "r,g,b", "r,g,b,a" (channels 0-255).
    Alpha defaults to 255.

    Args:
        value: Color string.

    Returns:
        RGBA tuple.

    Raises:
        ValueError: If the string is not a valid color.
    """
    value = value.strip()

    if value.startswith("#"):
        digits = value[1:]
        if len(digits) not in (6, 8):
            raise ValueError(f"Hex color must have 6 or 8 digits, got '{value}'")
        try:
            channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError as e:
            raise ValueError(f"Invalid hex color '{value}'") from e
    else:
        parts = [part.strip() for part in value.split(",")]
        if len(parts) not in (3, 4):
            raise ValueError(f"Expected 3 or 4 comma-separated channels, got '{value}'")
        try:
            channels = [int(part) for part in parts]
        except ValueError as e:
            raise ValueError(f"Invalid color channels '{value}'") from e

    if any(channel < 0 or channel > 255 for channel in channels):
        raise ValueError(f"Color channels must be in 0-255, got '{value}'")

    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = channels
    return (r, g, b, a)
