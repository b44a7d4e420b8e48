"""Exceptions raised by the steric overlap detector."""


class StericOverlapError(Exception):
    """Base class for all steric overlap detector errors."""


class DimensionMismatchError(StericOverlapError, ValueError):
    """Raised when two coordinates of different dimension are combined."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Dimensions don't agree: {expected} != {actual}")
        self.expected = expected
        self.actual = actual


class EmptyPointSetError(StericOverlapError):
    """Raised when a comparison is requested with an empty point set."""


class PointSetReadError(StericOverlapError):
    """Raised when an input structure file cannot be read."""


class PDBFormatError(PointSetReadError):
    """Raised when an ATOM/HETATM record cannot be parsed."""

    def __init__(self, file_path: str, line_number: int, reason: str):
        super().__init__(f"{file_path}:{line_number}: {reason}")
        self.file_path = file_path
        self.line_number = line_number
