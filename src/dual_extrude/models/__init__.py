"""Core data models for dual-extruder conversion.

This package contains the command vocabulary, extruder sides, filament
configuration and per-run conversion state.
"""

from dual_extrude.models.command import ON_COMMANDS, SWITCH_COMMANDS, Command, classify
from dual_extrude.models.extruder import LEFT_SELECTOR, RIGHT_SELECTOR, ExtruderSide
from dual_extrude.models.filament import FilamentConfig
from dual_extrude.models.state import ConversionState

__all__ = [
    "Command",
    "classify",
    "ON_COMMANDS",
    "SWITCH_COMMANDS",
    "ExtruderSide",
    "LEFT_SELECTOR",
    "RIGHT_SELECTOR",
    "FilamentConfig",
    "ConversionState",
]
