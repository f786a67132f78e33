"""Filament configuration model for diameter correction."""

from dataclasses import dataclass
from typing import Optional

from dual_extrude.ratio import calculate_diameter_ratio


@dataclass(frozen=True)
class FilamentConfig:
    """Filament diameters of the source extruder and the added extruder.

    Leaving both diameters unset means both extruders use the same filament
    and extrusion values are duplicated without correction.

    Attributes:
        input_diameter: Diameter in millimeters the input file was sliced for
        output_diameter: Diameter in millimeters loaded in the added extruder
    """

    input_diameter: Optional[float] = None
    output_diameter: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate that diameters are given as a positive pair."""
        if (self.input_diameter is None) != (self.output_diameter is None):
            raise ValueError("input_diameter and output_diameter must be given together")
        for name in ("input_diameter", "output_diameter"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

    @property
    def is_corrected(self) -> bool:
        """True when distinct diameters were supplied."""
        return self.input_diameter is not None

    @property
    def ratio(self) -> float:
        """Correction factor applied to extrusion distances of the added extruder."""
        if not self.is_corrected:
            return 1.0
        return calculate_diameter_ratio(self.input_diameter, self.output_diameter)
