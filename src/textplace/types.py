"""Type aliases and small value types used across the textplace package."""

from dataclasses import dataclass
from typing import Literal, Tuple, Union

# Color types
RGBAColor = Tuple[int, int, int, int]  # RGBA color in 0-255 range

# Measurements
Pixel = int

# Horizontal justification: how each line extends from the anchor x-coordinate
Justification = Literal["left", "center", "right"]

# Vertical anchor: where the block sits relative to the anchor y-coordinate
VerticalAnchor = Literal["top", "center", "bottom"]

DEFAULT_JUSTIFICATION: Justification = "center"
DEFAULT_VERTICAL_ANCHOR: VerticalAnchor = "center"


@dataclass(frozen=True)
class NoWrap:
    """Lines are drawn as written; only explicit line breaks start a new line."""


@dataclass(frozen=True)
class Wrap:
    """Wrap lines that would extend beyond max_width pixels."""

    max_width: Pixel

    def __post_init__(self) -> None:
        if self.max_width <= 0:
            raise ValueError(f"Wrap max_width must be a positive number of pixels, got {self.max_width}")


# Wrap policy variant; NoWrap is the default everywhere
WrapPolicy = Union[NoWrap, Wrap]
