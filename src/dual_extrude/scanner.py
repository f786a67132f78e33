"""Usage scan: find the one extruder a single-extruder file drives.

The scan is the first of two passes. It walks the file once and marks a side
as used when it sees:

- an extruder-on command (M101/M102) addressed to T0 (right) or T1 (left)
- a temperature command (M104) addressed to a toolhead with a positive
  temperature

Finding both sides, or neither, makes the file unusable for conversion.
"""

import logging
from typing import Iterable, List

from dual_extrude.errors import FileOpenError, ValidationError
from dual_extrude.models.command import ON_COMMANDS, Command, classify
from dual_extrude.models.extruder import LEFT_SELECTOR, RIGHT_SELECTOR, ExtruderSide
from dual_extrude.models.state import ConversionState
from dual_extrude.tokens import first_token, parse_int_prefix, tokenize

logger = logging.getLogger(__name__)

ERROR_NONE_USED = "Couldn't find a used extruder"


def _side_for_selector(token: str) -> ExtruderSide:
    if token == RIGHT_SELECTOR:
        return ExtruderSide.RIGHT
    if token == LEFT_SELECTOR:
        return ExtruderSide.LEFT
    return ExtruderSide.NONE


def _scan_on_command(params: List[str], state: ConversionState, line_number: int) -> None:
    """Only the first parameter of an on-command is a selector."""
    if not params:
        return
    side = _side_for_selector(params[0])
    if side is not ExtruderSide.NONE:
        state.mark_used(side, line_number)


def _scan_temperature(params: List[str], state: ConversionState, line_number: int) -> None:
    """Mark the addressed side if the command actually heats it.

    Setting a toolhead to zero does not count as using it. When both selectors
    appear with a positive temperature the right side wins.
    """
    right = False
    left = False
    temperature = 0
    for token in params:
        if token == RIGHT_SELECTOR:
            right = True
        if token == LEFT_SELECTOR:
            left = True
        if token.startswith("S"):
            temperature = parse_int_prefix(token[1:])

    if temperature <= 0:
        return
    if right:
        state.mark_used(ExtruderSide.RIGHT, line_number)
    elif left:
        state.mark_used(ExtruderSide.LEFT, line_number)


def scan_extruder_usage(lines: Iterable[str], state: ConversionState) -> ExtruderSide:
    """Determine which extruder ``lines`` drive and store it in ``state``.

    Args:
        lines: Input lines, consumed once in order
        state: Conversion state receiving the active side

    Returns:
        The side in use

    Raises:
        ValidationError: If both sides are used, or no side is found

    Example:
        >>> state = ConversionState()
        >>> scan_extruder_usage(["M104 S210 T1\\n", "M101 T1\\n"], state)
        <ExtruderSide.LEFT: 'left'>
    """
    count = 0
    for count, line in enumerate(lines, start=1):
        tokens = tokenize(line)
        command = classify(first_token(tokens))
        if command in ON_COMMANDS:
            _scan_on_command(tokens[1:], state, count)
        elif command is Command.SET_TEMPERATURE:
            _scan_temperature(tokens[1:], state, count)

    if state.active_side is ExtruderSide.NONE:
        raise ValidationError(ERROR_NONE_USED)

    logger.info("%d lines checked, %s extruder in use", count, state.active_side.value)
    return state.active_side


def check_file(infile: str, state: ConversionState) -> ExtruderSide:
    """Run the usage scan over a file on disk.

    Raises:
        FileOpenError: If the file cannot be opened
        ValidationError: See scan_extruder_usage()
    """
    try:
        handle = open(infile, encoding="utf-8", errors="surrogateescape", newline="")
    except OSError as exc:
        raise FileOpenError(f"Can't open input file: {infile}") from exc

    with handle:
        return scan_extruder_usage(handle, state)
