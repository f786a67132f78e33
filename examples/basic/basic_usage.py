"""Basic usage example.

This example demonstrates:
- Writing a small single-extruder G-code program
- Converting it to drive both extruders with the same filament
- Displaying the input and output side by side

This is the simplest way to use the converter.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from plot_helper import generate_example_plot

from dual_extrude import DualExtruder


def main():
    """Basic usage example with a right-extruder program."""

    print("=" * 80)
    print("BASIC DUAL EXTRUDE USAGE")
    print("=" * 80)

    # A short right-extruder (T0) program: heat, start the motor, print a square
    source = [
        "; single extruder program\n",
        "M104 S220 T0\n",
        "M108 R3.0 T0\n",
        "M101 T0\n",
        "G1 X0 Y0 Z0.3 F1800 E1.0\n",
        "G1 X20 Y0 E1.8\n",
        "G1 X20 Y20 E2.6\n",
        "G1 X0 Y20 E3.4\n",
        "G1 X0 Y0 E4.2\n",
        "M103 T0\n",
        "M104 S0 T0\n",
    ]

    print("\nInput:")
    for line in source:
        print(f"  {line.rstrip()}")

    extruder = DualExtruder()
    print(f"\nConverting with {extruder!r}...")
    converted = extruder.convert_lines(source)
    print("Done!\n")

    print("Output:")
    for line in converted:
        print(f"  {line.rstrip()}")

    print(f"\nInput lines: {len(source)}  Output lines: {len(converted)}")

    print("\n" + "=" * 80)
    print("GENERATING PLOT")
    print("=" * 80)
    generate_example_plot("basic_usage", converted)
    print()


if __name__ == "__main__":
    main()
