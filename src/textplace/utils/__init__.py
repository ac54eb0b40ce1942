"""Utility modules."""

from textplace.utils.text import split_logical_lines
from textplace.utils.wrap import (
    HYPHEN,
    LineWrapper,
    WrapState,
    check_wrap_width,
    min_wrap_width,
    wrap_line,
    wrap_lines,
)

__all__ = [
    "HYPHEN",
    "LineWrapper",
    "WrapState",
    "check_wrap_width",
    "min_wrap_width",
    "split_logical_lines",
    "wrap_line",
    "wrap_lines",
]
