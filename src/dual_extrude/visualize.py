"""Visualization of the extrusion split between both extruders.

Plots the A and B extrusion values of converted coordinated moves so the
effect of a diameter correction can be checked before printing.
"""

from typing import Iterable, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from dual_extrude.models.command import Command, classify
from dual_extrude.tokens import first_token, parse_float_prefix, tokenize


def extract_extrusion_series(lines: Iterable[str]) -> Tuple[np.ndarray, np.ndarray]:
    """Collect the A/B extrusion values of converted moves.

    Only moves carrying both an A and a B parameter are used.

    Args:
        lines: Converted G-code lines

    Returns:
        Tuple of (a_values, b_values) arrays of equal length
    """
    a_values = []
    b_values = []
    for line in lines:
        tokens = tokenize(line)
        if classify(first_token(tokens)) is not Command.COORDINATED_MOVE:
            continue
        a = None
        b = None
        for token in tokens[1:]:
            if token.startswith("A"):
                a = parse_float_prefix(token[1:])
            elif token.startswith("B"):
                b = parse_float_prefix(token[1:])
        if a is not None and b is not None:
            a_values.append(a)
            b_values.append(b)
    return np.array(a_values), np.array(b_values)


def plot_extrusion_split(
    lines: Iterable[str],
    title: Optional[str] = None,
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot both extruders' extrusion over the converted moves.

    Creates a two-panel figure:
    - Extrusion position of extruder A and extruder B per move
    - Difference B - A, which stays at zero without diameter correction

    Args:
        lines: Converted G-code lines
        title: Optional custom title
        show: Whether to display the plot (default: True)
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object

    Raises:
        ValueError: If there are no extrusion moves in ``lines``
    """
    a_values, b_values = extract_extrusion_series(lines)
    if a_values.size == 0:
        raise ValueError("No extrusion moves to plot")

    moves = np.arange(1, a_values.size + 1)
    difference = b_values - a_values

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(12, 8), sharex=True)

    if title is None:
        title = f"Extrusion Split ({a_values.size} moves)"
    fig.suptitle(title, fontsize=14, fontweight="bold")

    ax1.plot(moves, a_values, label="Extruder A", alpha=0.7)
    ax1.plot(moves, b_values, label="Extruder B", linewidth=2, linestyle="--")
    ax1.set_ylabel("Extrusion (mm)")
    ax1.set_title("Extrusion Position")
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    ax2.step(moves, difference, where="post", color="purple", linewidth=2)
    ax2.axhline(0.0, color="gray", linestyle="--", alpha=0.7)
    ax2.set_ylabel("B - A (mm)")
    ax2.set_xlabel("Move")
    ax2.set_title("Extrusion Difference")
    ax2.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig
