"""Line tokenizing and lenient numeric parsing for G-code parameters."""

import re
from typing import List, Optional

# Leading integer, as in "S210" or "S-5"
_INT_PREFIX = re.compile(r"[+-]?\d+")

# Leading decimal number with optional exponent, as in "12.5" or ".75e1"
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def tokenize(line: str) -> List[str]:
    """Split a line into whitespace-separated tokens."""
    return line.split()


def first_token(tokens: List[str]) -> Optional[str]:
    return tokens[0] if tokens else None


def parse_int_prefix(text: str) -> int:
    """Parse the integer at the start of ``text``.

    Anything that does not start with an integer yields 0, and trailing
    characters are ignored ("210.5" gives 210).
    """
    match = _INT_PREFIX.match(text.lstrip())
    if match is None:
        return 0
    return int(match.group(0))


def parse_float_prefix(text: str) -> float:
    """Parse the number at the start of ``text``, 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(text.lstrip())
    if match is None:
        return 0.0
    return float(match.group(0))
