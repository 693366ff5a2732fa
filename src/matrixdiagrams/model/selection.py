"""
Diagram selection routing.

A 1-based diagram number arrives from outside (command line, or anything that
plays the role of a URL fragment such as ``"#3"``). Invalid or missing numbers
fall back to the first diagram. Once any selection has been resolved, the
digit keys ``1..N`` switch diagrams directly.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from matrixdiagrams.config import DEFAULT_DIAGRAM_INDEX

logger = logging.getLogger(__name__)

# Leading ASCII number; "#3abc" selects diagram 3.
_LEADING_NUMBER = re.compile(r"[0-9]+")


def parse_selection(text: Optional[str], count: int) -> Optional[int]:
    """
    Convert ``"3"`` or ``"#3"`` into the 0-based index ``2``.

    Only ASCII digits count, and trailing text after the number is ignored
    (``"3abc"`` is 3). Returns None for empty, unparsable or out-of-range input.
    """
    if text is None:
        return None
    match = _LEADING_NUMBER.match(text.strip().lstrip("#").strip())
    if match is None:
        return None
    index = int(match.group()) - 1
    if 0 <= index < count:
        return index
    return None


class SelectionRouter:
    """Decides which catalog entry to show for external selections and key presses."""

    def __init__(self, count: int) -> None:
        if count < 1:
            raise ValueError("Catalog must contain at least one diagram.")
        self.count = count
        self.keys_enabled = False

    def route(self, text: Optional[str]) -> int:
        index = parse_selection(text, self.count)
        self.keys_enabled = True
        if index is not None:
            return index
        logger.info(f"Selection {text!r} not valid, showing diagram {DEFAULT_DIAGRAM_INDEX + 1}.")
        return DEFAULT_DIAGRAM_INDEX

    def key_pressed(self, key: str) -> Optional[int]:
        """Index for a digit key ``"1".."N"``, or None if keys are not active or the key is unknown."""
        if not self.keys_enabled:
            return None
        if len(key) != 1 or key not in "0123456789":
            return None
        index = int(key) - 1
        if 0 <= index < self.count:
            return index
        return None
