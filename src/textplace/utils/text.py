"""Text utilities for splitting input into lines."""

from typing import List


def split_logical_lines(text: str) -> List[str]:
    """
    Split raw text on explicit line breaks and trim each line.

    Incidental indentation (e.g. from a triple-quoted string) is removed.
    Blank lines are kept as empty strings so they still take up vertical space.

    Args:
        text: Arbitrary input text.

    Returns:
        Logical lines in reading order.
    """
    return [line.strip() for line in text.splitlines()]
