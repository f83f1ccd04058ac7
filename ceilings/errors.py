"""Error taxonomy shared by the geometry, measure and layout modules."""

from __future__ import annotations

from typing import Optional


class CeilingsError(ValueError):
    """Base class for errors a caller can recover from by fixing its input."""


class NotEnoughPointsError(CeilingsError):
    """Raised when a figure lacks the anchor points an operation needs."""

    def __init__(self, message: str, *, required: int = 0, available: int = 0):
        super().__init__(message)
        self.required = required
        self.available = available


class TooManyPointsError(CeilingsError):
    """Raised when a fixed-size figure would exceed its vertex count."""


class TooFewPointsError(CeilingsError):
    """Raised when a figure is too small to be laid out for rendering."""


class IndexOutOfRangeError(CeilingsError, IndexError):
    """Raised when a vertex index is outside ``[0, len)``."""

    def __init__(self, index: int, length: int):
        super().__init__(f"point index {index} out of range for polygon with {length} point(s)")
        self.index = index
        self.length = length


class UnknownUnitError(CeilingsError):
    """Raised when a unit short name does not resolve to a measure."""

    def __init__(self, family: str, name: Optional[str]):
        super().__init__(f"unknown {family} unit {name!r}")
        self.family = family
        self.name = name


class InvalidVertexError(CeilingsError):
    """Raised when an inbound vertex payload matches no vertex kind."""


class InvalidDescriptionError(CeilingsError):
    """Raised when a note is not a ``(key, value)`` pair."""


class InvalidSurveyError(CeilingsError):
    """Raised when a survey document does not have the expected shape."""


class MeasureFamilyError(TypeError):
    """Raised when a conversion mixes measures of different families."""


__all__ = [
    "CeilingsError",
    "IndexOutOfRangeError",
    "InvalidDescriptionError",
    "InvalidSurveyError",
    "InvalidVertexError",
    "MeasureFamilyError",
    "NotEnoughPointsError",
    "TooFewPointsError",
    "TooManyPointsError",
    "UnknownUnitError",
]
