"""Mutable conversion state shared by the usage scan and the rewrite pass."""

from dataclasses import dataclass
from typing import Optional

from dual_extrude.errors import ValidationError
from dual_extrude.models.extruder import ExtruderSide

ERROR_BOTH_USED = "File already uses both extruders"


@dataclass
class ConversionState:
    """State of a single conversion run.

    The usage scan writes ``active_side``; the rewrite pass writes
    ``first_extrusion``. ``ratio`` is fixed when the state is created.

    Attributes:
        ratio: Diameter correction factor for the added extruder
        active_side: Extruder the input file drives
        first_extrusion: First positive extrusion value seen by the rewriter,
            0.0 until then
    """

    ratio: float = 1.0
    active_side: ExtruderSide = ExtruderSide.NONE
    first_extrusion: float = 0.0

    def __post_init__(self) -> None:
        """Validate the ratio."""
        if self.ratio <= 0:
            raise ValueError(f"ratio must be positive, got {self.ratio}")

    def mark_used(self, side: ExtruderSide, line_number: Optional[int] = None) -> None:
        """Record that the input file uses ``side``.

        Raises:
            ValidationError: If the opposite side was already marked
        """
        if side is ExtruderSide.NONE:
            raise ValueError("Cannot mark an undetermined side as used")
        if self.active_side is side.opposite:
            raise ValidationError(ERROR_BOTH_USED, line_number)
        self.active_side = side

    @property
    def not_used_selector(self) -> str:
        """Selector of the toolhead the input file never drives."""
        return self.active_side.opposite.selector

    @property
    def has_first_extrusion(self) -> bool:
        return self.first_extrusion > 0

    def record_first_extrusion(self, value: float) -> None:
        """Store the origin for corrected extrusion values.

        Has no effect once a positive value has been stored.
        """
        if not self.has_first_extrusion:
            self.first_extrusion = value
