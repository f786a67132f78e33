"""Helper functions for saving extrusion split plots in examples."""

import os
from typing import List, Optional

import matplotlib.pyplot as plt

from dual_extrude.visualize import plot_extrusion_split


def generate_example_plot(
    name: str,
    converted_lines: List[str],
    output_dir: Optional[str] = None,
    title: Optional[str] = None,
) -> None:
    """Save an extrusion split plot next to the calling example.

    Args:
        name: Base name for the plot (e.g., "basic_usage")
        converted_lines: Output of DualExtruder.convert_lines()
        output_dir: Optional output directory (defaults to caller's directory)
        title: Optional custom title
    """
    if output_dir is None:
        import inspect

        caller_frame = inspect.stack()[1]
        output_dir = os.path.dirname(os.path.abspath(caller_frame.filename))

    filename = os.path.join(output_dir, f"{name}_plot.png")
    if title is None:
        title = name.replace("_", " ").title()

    fig = plot_extrusion_split(converted_lines, title=title, show=False, save_path=filename)
    plt.close(fig)
    print(f"  Plot saved: {filename}")
