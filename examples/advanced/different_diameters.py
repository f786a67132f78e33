"""Different filament diameters example.

This example demonstrates:
- Converting a left-extruder (T1) program
- Correcting extrusion for a thinner filament in the added extruder
- Comparing the corrected and original extrusion of every move

Use this when the two extruders are loaded with filament from different spools.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from plot_helper import generate_example_plot

from dual_extrude import DualExtruder


def create_left_extruder_program():
    """Create a left-extruder program with a retract early in the file.

    Returns:
        List of G-code lines
    """
    lines = ["M104 S210 T1\n", "M101 T1\n", "G1 X0 Y0 F1200 E0.5\n"]
    extrusion = 0.5
    for i in range(1, 11):
        extrusion += 0.8
        lines.append(f"G1 X{i * 10} Y{(i % 2) * 10} E{extrusion:.2f}\n")
    lines.append("M103 T1\n")
    return lines


def main():
    """Compare extrusion with and without diameter correction."""

    print("=" * 80)
    print("DIFFERENT FILAMENT DIAMETERS")
    print("=" * 80)

    source = create_left_extruder_program()

    for input_diameter, output_diameter in [(None, None), (1.75, 1.6), (1.75, 2.0)]:
        extruder = DualExtruder(input_diameter=input_diameter, output_diameter=output_diameter)
        converted = extruder.convert_lines(source)
        moves = [line for line in converted if line.startswith("G1")]

        print(f"\n{extruder!r}")
        print(f"  Last move: {moves[-1].rstrip()}")

        if input_diameter is not None:
            name = f"diameters_{input_diameter}_{output_diameter}".replace(".", "_")
            generate_example_plot(name, converted)
    print()


if __name__ == "__main__":
    main()
