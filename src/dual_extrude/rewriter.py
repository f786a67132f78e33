"""Rewrite pass: expand single-extruder commands for both toolheads.

Each recognized command has one rule:

- Switch commands (M101, M102, M103, M6): dropped when addressed to the unused
  toolhead, otherwise duplicated for T1 and T0
- Temperature (M104): duplicated with the parsed temperature
- Speed (M108): duplicated with the speed token copied verbatim
- Coordinated move (G1): every E/A/B parameter becomes an A/B pair, the added
  extruder's value scaled by the diameter ratio

Lines that are not recognized pass through unchanged.
"""

import logging
import math
from typing import Iterable, Iterator, List

from dual_extrude.errors import ConversionError, FileOpenError
from dual_extrude.models.command import SWITCH_COMMANDS, Command, classify
from dual_extrude.models.extruder import LEFT_SELECTOR, RIGHT_SELECTOR, ExtruderSide
from dual_extrude.models.state import ConversionState
from dual_extrude.tokens import first_token, parse_float_prefix, parse_int_prefix, tokenize

logger = logging.getLogger(__name__)

# Longest speed token and longest extrusion value (after the tag) accepted
MAX_TOKEN_LENGTH = 15

EXTRUSION_DECIMALS = 5
EXTRUSION_TAGS = ("E", "A", "B")

# Both toolheads, in output order
OUTPUT_SELECTORS = (LEFT_SELECTOR, RIGHT_SELECTOR)


def round_half_up(value: float, decimals: int = EXTRUSION_DECIMALS) -> float:
    """Round to ``decimals`` places with halves rounded up.

    Examples:
        >>> round_half_up(0.125, 2)
        0.13
        >>> round_half_up(2.5, 0)
        3.0
    """
    scale = 10.0**decimals
    return math.floor(value * scale + 0.5) / scale


def format_extrusion(value: float) -> str:
    return f"{value:.{EXTRUSION_DECIMALS}f}"


def _duplicate(body: str) -> List[str]:
    return [f"{body} {selector}\n" for selector in OUTPUT_SELECTORS]


def rewrite_switch(command: Command, params: List[str], state: ConversionState) -> List[str]:
    """Duplicate an on/off/tool-change command, or drop it for the unused toolhead."""
    if params and params[0] == state.not_used_selector:
        logger.debug("Dropping %s for unused toolhead %s", command.token, params[0])
        return []
    return _duplicate(command.token)


def rewrite_temperature(params: List[str], state: ConversionState) -> List[str]:
    """Duplicate a temperature command.

    Parameters after the unused selector are ignored; the command is still
    emitted with whatever temperature was read before it.
    """
    temperature = 0
    for token in params:
        if token == state.not_used_selector:
            break
        if token.startswith("S"):
            temperature = parse_int_prefix(token[1:])
    return _duplicate(f"{Command.SET_TEMPERATURE.token} S{temperature}")


def rewrite_speed(params: List[str], state: ConversionState, line_number: int) -> List[str]:
    """Duplicate an extruder speed command.

    Raises:
        ConversionError: If the speed token is too long or missing
    """
    speed = ""
    for token in params:
        if token == state.not_used_selector:
            break
        if token.startswith("R"):
            if len(token) > MAX_TOKEN_LENGTH:
                raise ConversionError("speed command too long", line_number)
            speed = token

    if not speed:
        raise ConversionError("no speed in command", line_number)
    return _duplicate(f"{Command.SET_SPEED.token} {speed}")


def split_extrusion(token: str, state: ConversionState, line_number: int) -> List[str]:
    """Turn one E/A/B parameter into the A/B pair for both extruders.

    The first positive extrusion value becomes the origin. Later values are
    scaled relative to it for the added extruder:

        new = ((current - first) * ratio) + first

    With the right extruder in use the added (left) value goes first under B,
    otherwise under A.

    Raises:
        ConversionError: If the value is longer than MAX_TOKEN_LENGTH
    """
    if len(token) - 1 > MAX_TOKEN_LENGTH:
        raise ConversionError("parameter too long", line_number)

    current = parse_float_prefix(token[1:])
    original = format_extrusion(current)

    if not state.has_first_extrusion:
        state.record_first_extrusion(current)
        if state.has_first_extrusion:
            logger.debug("First extrusion %s recorded at line %d", original, line_number)
        return [f"A{original}", f"B{original}"]

    first = state.first_extrusion
    added = format_extrusion(round_half_up(((current - first) * state.ratio) + first))
    if state.active_side is ExtruderSide.RIGHT:
        return [f"B{added}", f"A{original}"]
    return [f"A{added}", f"B{original}"]


def rewrite_move(params: List[str], state: ConversionState, line_number: int) -> List[str]:
    """Rewrite a coordinated move, passing non-extrusion parameters through."""
    parts = [Command.COORDINATED_MOVE.token]
    for token in params:
        if token.startswith(EXTRUSION_TAGS):
            parts.extend(split_extrusion(token, state, line_number))
        else:
            parts.append(token)
    return [" ".join(parts) + "\n"]


def rewrite_line(line: str, line_number: int, state: ConversionState) -> List[str]:
    """Rewrite one input line into zero, one or two output lines.

    Args:
        line: Raw input line, including its line ending
        line_number: 1-based position of the line, used in error messages
        state: Conversion state with the active side already determined

    Returns:
        Output lines, each ending in a newline. Unrecognized lines are
        returned unchanged.

    Raises:
        ConversionError: If the line carries malformed parameter data

    Example:
        >>> state = ConversionState(active_side=ExtruderSide.RIGHT)
        >>> rewrite_line("M103\\n", 1, state)
        ['M103 T1\\n', 'M103 T0\\n']
    """
    tokens = tokenize(line)
    command = classify(first_token(tokens))
    if command is None:
        return [line]

    params = tokens[1:]
    if command in SWITCH_COMMANDS:
        return rewrite_switch(command, params, state)
    elif command is Command.SET_TEMPERATURE:
        return rewrite_temperature(params, state)
    elif command is Command.SET_SPEED:
        return rewrite_speed(params, state, line_number)
    elif command is Command.COORDINATED_MOVE:
        return rewrite_move(params, state, line_number)
    else:
        raise ValueError(f"No rewrite rule for command: {command}")


def rewrite_lines(lines: Iterable[str], state: ConversionState) -> Iterator[str]:
    """Rewrite a stream of lines, numbering them from 1."""
    for line_number, line in enumerate(lines, start=1):
        yield from rewrite_line(line, line_number, state)


def convert_file(infile: str, outfile: str, state: ConversionState) -> int:
    """Rewrite ``infile`` into ``outfile``.

    Both files are closed on every exit path. A failure part way through
    leaves a partial output file behind; callers should discard it.

    Args:
        infile: Path of the single-extruder input file
        outfile: Path of the dual-extruder output file
        state: Conversion state with the active side already determined

    Returns:
        Number of input lines processed

    Raises:
        FileOpenError: If the input cannot be opened or the output cannot be created
        ConversionError: See rewrite_line()
    """
    try:
        source = open(infile, encoding="utf-8", errors="surrogateescape", newline="")
    except OSError as exc:
        raise FileOpenError(f"Can't open input file: {infile}") from exc

    with source:
        try:
            target = open(outfile, "w", encoding="utf-8", errors="surrogateescape", newline="")
        except OSError as exc:
            raise FileOpenError(f"Can't create output file: {outfile}") from exc

        count = 0
        with target:
            for count, line in enumerate(source, start=1):
                target.writelines(rewrite_line(line, count, state))

    logger.info("%d lines processed", count)
    return count
