from __future__ import annotations

from enum import Enum


class Color(Enum):
    """Edge color. `NONE` is the neutral value: it never conflicts."""

    RED = "red"
    BLUE = "blue"
    NONE = "none"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Color":
        # Unknown names are unconstrained edges rather than errors.
        if name == "red":
            return cls.RED
        if name == "blue":
            return cls.BLUE
        return cls.NONE


def can_follow(last: Color, candidate: Color) -> bool:
    """True if an edge of color `candidate` may be taken right after one of color `last`."""
    if last is Color.NONE or candidate is Color.NONE:
        return True
    return last is not candidate
