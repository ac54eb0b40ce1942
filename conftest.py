"""Shared fixtures: deterministic metrics and a renderer that records calls."""

from dataclasses import dataclass, field

import pytest

from textplace.design.base import TextRenderer


@dataclass
class MonospaceMetrics:
    """Every character is char_width pixels wide; stands in for a FontContext."""

    char_width: int = 10
    height: int = 20
    color: tuple[int, int, int, int] = (0, 255, 0, 255)
    widths: dict[str, int] = field(default_factory=dict)

    def measure_width(self, text: str) -> int:
        return sum(self.widths.get(char, self.char_width) for char in text)

    def line_height(self) -> int:
        return self.height


class RecordingRenderer(TextRenderer):
    """Keeps every draw call instead of touching pixels."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def draw_line(self, canvas, color, x, y, font_context, text) -> None:
        self.calls.append(("line", text, x, y, color))

    def draw_marker(self, canvas, color, x, y) -> None:
        self.calls.append(("marker", x, y, color))


@pytest.fixture
def metrics() -> MonospaceMetrics:
    return MonospaceMetrics()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()
