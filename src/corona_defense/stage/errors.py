"""Exceptions raised while loading and querying stages."""

from __future__ import annotations


class StageError(Exception):
    """Base class for all stage errors."""


class ParseError(StageError, ValueError):
    """A board document is malformed or misses a required field.

    Args:
        message: Human-readable description.
        fields: Locations of the offending fields, e.g. ``["PathPoints.0.X"]``.
    """

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or []


class DegenerateSegmentError(StageError, ValueError):
    """A path segment cannot be fitted (zero length or non-finite input)."""


class EmptyPathError(StageError, LookupError):
    """A path query was made against a path with no waypoints."""
