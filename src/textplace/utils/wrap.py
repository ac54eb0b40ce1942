"""
Width-constrained line wrapping with hyphenation of oversized words.

Wrapping is word-greedy: words are added to the current line while it still
fits. A word that cannot fit even on an empty line is broken character by
character, each broken piece ending in a hyphen.
"""

import logging
from enum import Enum
from typing import Iterable, List

from textplace.design.base import TextMetrics
from textplace.types import Pixel

logger = logging.getLogger(__name__)

HYPHEN = "-"

# Sample text measured for the minimum wrap width (roughly two ems)
MIN_WIDTH_SAMPLE = "mm"


class WrapState(Enum):
    """State of the line currently under construction."""

    EMPTY = "empty"
    ACCUMULATING = "accumulating"


def min_wrap_width(metrics: TextMetrics) -> Pixel:
    """Smallest max_width wrapping accepts for the given font and scale."""
    return metrics.measure_width(MIN_WIDTH_SAMPLE)


def check_wrap_width(max_width: Pixel, metrics: TextMetrics) -> None:
    """
    Validate a wrap width against the active font before anything is drawn.

    Args:
        max_width: Requested maximum line width in pixels.
        metrics: Metrics provider for the active font and scale.

    Raises:
        ValueError: If max_width is narrower than two ems of the active font.
    """
    minimum = min_wrap_width(metrics)
    if max_width < minimum:
        raise ValueError(
            f"Cannot set max_width for wrapping below 2 ems (got {max_width}). "
            f"Try setting max_width to at least {minimum}."
        )


class LineWrapper:
    """
    Wraps a single logical line.

    The wrapper is either EMPTY or ACCUMULATING a line. Feeding words moves it
    between the two states; whenever the current line overflows it is emitted
    to ``lines`` and the wrapper returns to EMPTY.
    """

    def __init__(self, max_width: Pixel, metrics: TextMetrics, log: logging.Logger | None = None) -> None:
        """
        Initialize the wrapper.

        Args:
            max_width: Maximum line width in pixels.
            metrics: Metrics provider for the active font and scale.
            log: Logger receiving one DEBUG record per wrap decision.
        """
        self.max_width = max_width
        self.metrics = metrics
        self.log = log or logger
        self.lines: List[str] = []
        self._buffer = ""
        self._space_width = metrics.measure_width(" ")

    @property
    def state(self) -> WrapState:
        return WrapState.ACCUMULATING if self._buffer else WrapState.EMPTY

    @property
    def buffer(self) -> str:
        return self._buffer

    def _emit(self, line: str) -> None:
        self.lines.append(line)
        self._buffer = ""

    def feed_word(self, word: str) -> None:
        """
        Add one whitespace-free word to the line under construction.

        Args:
            word: The word to place.
        """
        candidate = f"{self._buffer} {word}"
        width = self.metrics.measure_width(candidate)
        # On an empty line the leading space of the candidate is not counted
        allowance = self._space_width if self.state is WrapState.EMPTY else 0
        self.log.debug("%r has width %d. Compare to max_width %d", candidate, width, self.max_width)

        if width <= self.max_width + allowance:
            self.log.debug("Word %r gets added to line", word)
            self._buffer = word if self.state is WrapState.EMPTY else candidate
            return

        if self.state is WrapState.ACCUMULATING:
            self.log.debug("Word %r goes over max width, starting a new line", word)
            self._emit(self._buffer)
            self.feed_word(word)
            return

        self.log.debug("Word %r does not fit on its own line, hyphenating", word)
        self._feed_characters(word)

    def _feed_characters(self, word: str) -> None:
        for char in word:
            # Characters are atomic: an empty line always takes the next one.
            # The hyphen is measured with the next character, so an emitted
            # piece plus its hyphen never exceeds max_width.
            if self._buffer and self.metrics.measure_width(self._buffer + char + HYPHEN) > self.max_width:
                self._emit(self._buffer + HYPHEN)
            self._buffer += char

    def finish(self) -> List[str]:
        """
        Emit whatever is left and return the physical lines.

        A logical line without words still produces one empty line.
        """
        if self._buffer or not self.lines:
            self._emit(self._buffer)
        return self.lines


def wrap_line(
    line: str, max_width: Pixel, metrics: TextMetrics, log: logging.Logger | None = None
) -> List[str]:
    """
    Wrap one logical line into physical lines no wider than max_width.

    Words are separated by single spaces in the output. Only a single
    character wider than max_width can exceed the limit.

    Args:
        line: Logical line to wrap.
        max_width: Maximum line width in pixels.
        metrics: Metrics provider for the active font and scale.
        log: Optional logger for wrap decisions (defaults to this module's logger).

    Returns:
        Physical lines in reading order.
    """
    wrapper = LineWrapper(max_width, metrics, log)
    for word in line.split():
        wrapper.feed_word(word)
    return wrapper.finish()


def wrap_lines(
    lines: Iterable[str], max_width: Pixel, metrics: TextMetrics, log: logging.Logger | None = None
) -> List[str]:
    """
    Wrap a sequence of logical lines, keeping their order.

    Args:
        lines: Logical lines to wrap.
        max_width: Maximum line width in pixels.
        metrics: Metrics provider for the active font and scale.
        log: Optional logger for wrap decisions (defaults to this module's logger).

    Returns:
        All physical lines, concatenated across logical lines.
    """
    log = log or logger
    wrapped: List[str] = []
    for line in lines:
        wrapped.extend(wrap_line(line, max_width, metrics, log))
    log.debug("Lines altered: %r", wrapped)
    return wrapped
