"""Board coordinate value types.

Board files are read and written through
:mod:`corona_defense.stage.schemas`; these types carry no parsing of their own.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in continuous board coordinates.

    One board tile spans one unit in each direction, so ``Point(2.5, 0.5)``
    is the centre of tile ``(2, 0)``.
    """

    x: float
    """X coordinate."""

    y: float
    """Y coordinate."""

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to *other*."""
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Tile:
    """A discrete board cell, addressed by column ``x`` and row ``y``."""

    x: int
    y: int
