"""Enumerations for Morse symbol marks."""

from enum import Enum


class Mark(Enum):
    """A single keyed element of a Morse character."""
    DOT = "."
    DASH = "-"

    @classmethod
    def from_char(cls, char: str) -> "Mark":
        """Convert ``'.'`` or ``'-'`` to a Mark."""
        return cls(char)
