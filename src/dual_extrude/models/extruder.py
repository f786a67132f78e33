"""Extruder side model and toolhead selectors."""

from enum import Enum

RIGHT_SELECTOR = "T0"
LEFT_SELECTOR = "T1"


class ExtruderSide(Enum):
    """Which physical extruder a single-extruder file drives."""

    NONE = "none"  # Nothing found yet
    LEFT = "left"  # Addressed as T1
    RIGHT = "right"  # Addressed as T0

    @property
    def selector(self) -> str:
        """Toolhead selector token addressing this side."""
        if self is ExtruderSide.RIGHT:
            return RIGHT_SELECTOR
        elif self is ExtruderSide.LEFT:
            return LEFT_SELECTOR
        else:
            raise ValueError("No toolhead selector for an undetermined extruder side")

    @property
    def opposite(self) -> "ExtruderSide":
        """The other physical side."""
        if self is ExtruderSide.RIGHT:
            return ExtruderSide.LEFT
        elif self is ExtruderSide.LEFT:
            return ExtruderSide.RIGHT
        else:
            raise ValueError("An undetermined extruder side has no opposite")
