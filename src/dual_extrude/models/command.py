"""Recognized command vocabulary and token classification."""

from enum import Enum
from typing import Optional


class Command(Enum):
    """G/M codes that take part in the dual-extruder conversion."""

    EXTRUDER_ON_FORWARD = "M101"
    EXTRUDER_ON_REVERSE = "M102"
    EXTRUDER_OFF = "M103"
    SET_TEMPERATURE = "M104"
    SET_SPEED = "M108"
    TOOL_CHANGE = "M6"
    COORDINATED_MOVE = "G1"  # Carries the E/A/B extrusion parameters

    @property
    def token(self) -> str:
        """The literal token written to G-code."""
        return self.value


# Commands that switch an extruder motor or toolhead and take only a selector
SWITCH_COMMANDS = frozenset(
    {
        Command.EXTRUDER_ON_FORWARD,
        Command.EXTRUDER_ON_REVERSE,
        Command.EXTRUDER_OFF,
        Command.TOOL_CHANGE,
    }
)

# Commands whose selector marks an extruder as in use during the usage scan
ON_COMMANDS = frozenset({Command.EXTRUDER_ON_FORWARD, Command.EXTRUDER_ON_REVERSE})


def classify(token: Optional[str]) -> Optional[Command]:
    """Map the first token of a line to a recognized command.

    Matching is exact and case-sensitive. A missing token or any token outside
    the vocabulary is not an error; both return None.

    Args:
        token: First token of a line, or None for a line without tokens

    Returns:
        The matching Command, or None if the token is not recognized

    Examples:
        >>> classify("M104")
        <Command.SET_TEMPERATURE: 'M104'>
        >>> classify("m104") is None
        True
        >>> classify(None) is None
        True
    """
    if token is None:
        return None
    try:
        return Command(token)
    except ValueError:
        return None
