"""Dual-extruder conversion for single-extruder 3D printer G-code."""

__version__ = "2.2.0"

from .converter import ConversionResult, DualExtruder
from .errors import ConversionError, DualExtrudeError, FileOpenError, ValidationError
from .models import Command, ConversionState, ExtruderSide, FilamentConfig

__all__ = [
    "DualExtruder",
    "ConversionResult",
    "Command",
    "ConversionState",
    "ExtruderSide",
    "FilamentConfig",
    "DualExtrudeError",
    "FileOpenError",
    "ValidationError",
    "ConversionError",
]
