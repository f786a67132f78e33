"""Command-line interface for dual-extruder conversion.

Usage:
  dual-extrude infile [DiaIn] outfile [DiaNew] [--plot PATH] [-v]

  infile  - Input single extruder G-code file
  DiaIn   - Diameter of filament used to generate the input file
  outfile - Output both extruder G-code file
  DiaNew  - Diameter of filament used on the added extruder

When using different diameter filaments, BOTH DiaIn and DiaNew must be given.
"""

import argparse
import logging
import sys
from typing import List, Optional

from dual_extrude import __version__
from dual_extrude.converter import DualExtruder
from dual_extrude.errors import DualExtrudeError

# Accepted filament diameters, exclusive bounds (mm)
MIN_DIAMETER = 1.5
MAX_DIAMETER = 2.2

EXIT_OK = 0
EXIT_FAILURE = 1


def parse_diameter(text: str) -> float:
    """Parse a filament diameter and check it lies inside the accepted band.

    Raises:
        ValueError: If ``text`` is not a number or is out of range
    """
    diameter = float(text)
    if not MIN_DIAMETER < diameter < MAX_DIAMETER:
        raise ValueError(f"diameter {diameter} outside ({MIN_DIAMETER}, {MAX_DIAMETER})")
    return diameter


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="dual-extrude",
        description="Generate a 'both extruders on' G-code file from a single extruder file.",
        epilog="If you are using different diameter filaments, BOTH DiaIn and DiaNew must be given.",
    )
    ap.add_argument(
        "files",
        nargs="+",
        metavar="infile [DiaIn] outfile [DiaNew]",
        help="Input file, optional input diameter, output file, optional added diameter",
    )
    ap.add_argument("--plot", metavar="PATH", default=None, help="Save an extrusion split plot")
    ap.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log pass summaries (-v) or every rewritten command (-vv)",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def save_plot(outfile: str, plot_path: str) -> None:
    import matplotlib.pyplot as plt

    from dual_extrude.visualize import plot_extrusion_split

    with open(outfile, encoding="utf-8", errors="surrogateescape") as f:
        fig = plot_extrusion_split(f, show=False, save_path=plot_path)
    plt.close(fig)
    print(f"Plot saved: {plot_path}")


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    input_diameter = None
    output_diameter = None
    if len(args.files) == 2:
        infile, outfile = args.files
    elif len(args.files) == 4:
        infile, dia_in, outfile, dia_new = args.files
        try:
            input_diameter = parse_diameter(dia_in)
        except ValueError:
            ap.error(f"Filament diameter: {dia_in} too big/small!")
        try:
            output_diameter = parse_diameter(dia_new)
        except ValueError:
            ap.error(f"Filament diameter: {dia_new} too big/small!")
    else:
        ap.error("expected 'infile outfile' or 'infile DiaIn outfile DiaNew'")

    print(f"DualExtrude version {__version__}\n")
    extruder = DualExtruder(input_diameter=input_diameter, output_diameter=output_diameter)

    print("Checking file...")
    try:
        result = extruder.convert(infile, outfile)
    except DualExtrudeError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    print(
        f"File uses {result.active_side.value} extruder, "
        f"added {result.added_side.value}."
    )
    if input_diameter is not None:
        print(f"Input file diameter: {dia_in}   Added extruder diameter: {dia_new}")
    print(f"{result.lines_processed} Lines processed")

    if args.plot:
        try:
            save_plot(outfile, args.plot)
        except ValueError as exc:
            print(f"WARNING: {exc}", file=sys.stderr)

    return EXIT_OK
