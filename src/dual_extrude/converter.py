"""End-to-end dual-extruder conversion pipeline.

This module provides the DualExtruder class that runs both passes:
- Usage scan: find the single extruder the input drives
- Rewrite: expand commands for both toolheads and split extrusion

Example:
    >>> from dual_extrude.converter import DualExtruder
    >>>
    >>> extruder = DualExtruder(input_diameter=1.75, output_diameter=1.8)
    >>> result = extruder.convert("part.gcode", "part_dual.gcode")
    >>> print(f"{result.lines_processed} Lines processed")
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from dual_extrude.models import ConversionState, ExtruderSide, FilamentConfig
from dual_extrude.rewriter import convert_file, rewrite_lines
from dual_extrude.scanner import check_file, scan_extruder_usage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Summary of a finished conversion.

    Attributes:
        active_side: Extruder the input file drove
        lines_processed: Number of input lines rewritten
        ratio: Diameter correction factor that was applied
    """

    active_side: ExtruderSide
    lines_processed: int
    ratio: float

    @property
    def added_side(self) -> ExtruderSide:
        """Extruder that the conversion added."""
        return self.active_side.opposite


class DualExtruder:
    """Convert single-extruder G-code to drive both extruders at once.

    Args:
        input_diameter: Filament diameter the input was sliced for (mm).
                        Leave unset together with output_diameter to
                        duplicate extrusion without correction.
        output_diameter: Filament diameter in the added extruder (mm)

    Example:
        >>> extruder = DualExtruder()
        >>> extruder.convert_lines(["M101 T0\\n", "G1 X10 E5.0\\n"])
        ['M101 T1\\n', 'M101 T0\\n', 'G1 X10 A5.00000 B5.00000\\n']
    """

    def __init__(
        self,
        input_diameter: Optional[float] = None,
        output_diameter: Optional[float] = None,
    ):
        """Initialize the converter.

        Raises:
            ValueError: If only one diameter is given, or a diameter is not positive
        """
        self.filament = FilamentConfig(
            input_diameter=input_diameter, output_diameter=output_diameter
        )
        self.ratio = self.filament.ratio

    def _new_state(self) -> ConversionState:
        return ConversionState(ratio=self.ratio)

    def convert(self, infile: str, outfile: str) -> ConversionResult:
        """Convert a file on disk.

        The usage scan must succeed before the output file is created, so a
        file that fails validation never produces output.

        Args:
            infile: Path of the single-extruder input file
            outfile: Path of the dual-extruder output file

        Returns:
            ConversionResult describing the run

        Raises:
            FileOpenError: If a file cannot be opened or created
            ValidationError: If the input does not drive exactly one extruder
            ConversionError: If a line carries malformed parameter data
        """
        state = self._new_state()
        side = check_file(infile, state)
        logger.info(
            "Input uses %s extruder, adding %s (ratio %.6f)",
            side.value,
            side.opposite.value,
            self.ratio,
        )
        count = convert_file(infile, outfile, state)
        return ConversionResult(active_side=side, lines_processed=count, ratio=self.ratio)

    def convert_lines(self, lines: Sequence[str]) -> List[str]:
        """Run both passes over lines held in memory.

        Raises:
            ValidationError: If the lines do not drive exactly one extruder
            ConversionError: If a line carries malformed parameter data
        """
        state = self._new_state()
        scan_extruder_usage(lines, state)
        return list(rewrite_lines(lines, state))

    def __repr__(self) -> str:
        """Return string representation of the converter."""
        return (
            f"DualExtruder(input_diameter={self.filament.input_diameter}, "
            f"output_diameter={self.filament.output_diameter}, ratio={self.ratio:.6f})"
        )
