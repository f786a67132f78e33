"""Exceptions raised while converting a G-code file."""

from typing import Optional


class DualExtrudeError(Exception):
    """Base class for all conversion failures.

    Attributes:
        message: Human-readable description without location
        line_number: 1-based input line the failure refers to, if any
    """

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.message = message
        self.line_number = line_number
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"{self.message} in line {self.line_number}"


class FileOpenError(DualExtrudeError):
    """Input file unreadable or output file cannot be created."""


class ValidationError(DualExtrudeError):
    """Input file does not drive exactly one extruder."""


class ConversionError(DualExtrudeError):
    """Malformed parameter data found while rewriting a line."""
