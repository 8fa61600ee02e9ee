"""Completion status of a bullet item."""

from __future__ import annotations

from enum import Enum


class Status(Enum):
    """Whether a topic has been visited (completed) or not."""

    TODO = 0
    COMPLETED = 1

    def symbol(self) -> str:
        """The check-box glyph shown in front of the item."""
        return _SYMBOLS[self]

    def color(self) -> str:
        """Foreground colour, as a hex RGB string, used for the item."""
        return _COLORS[self]

    def toggled(self) -> Status:
        """The other status."""
        return Status.COMPLETED if self is Status.TODO else Status.TODO

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Status):
            return NotImplemented
        return self.value < other.value


TEXT_FG_COLOR = "#86efac"
COMPLETED_TEXT_FG_COLOR = "#500724"

_SYMBOLS = {Status.TODO: "☐", Status.COMPLETED: "✓"}
_COLORS = {Status.TODO: TEXT_FG_COLOR, Status.COMPLETED: COMPLETED_TEXT_FG_COLOR}