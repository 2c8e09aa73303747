"""Affine line segments parameterised by path length."""

from __future__ import annotations

from dataclasses import dataclass

from corona_defense.stage.errors import DegenerateSegmentError


@dataclass(frozen=True)
class AffineLine:
    """The function ``f(length) = a * length + b``.

    One line describes a single coordinate (X or Y) over one segment of the
    path, so a path of *n* waypoints needs two lists of lines.
    """

    a: float
    """Slope."""

    b: float
    """Value at ``length == 0``."""

    @classmethod
    def constant(cls, value: float) -> AffineLine:
        """A zero-slope line that evaluates to *value* everywhere."""
        return cls(a=0.0, b=value)

    @classmethod
    def from_points(
        cls,
        length0: float,
        value0: float,
        length1: float,
        value1: float,
    ) -> AffineLine:
        """Fit the line through ``(length0, value0)`` and ``(length1, value1)``.

        Raises:
            DegenerateSegmentError: If ``length0 == length1``.
        """
        if length1 == length0:
            raise DegenerateSegmentError(
                f"Cannot fit a line between two samples at the same length {length0!r}"
            )
        a = (value1 - value0) / (length1 - length0)
        return cls(a=a, b=value0 - a * length0)

    def evaluate(self, length: float) -> float:
        if not self.a:
            # 0 * inf is NaN
            return self.b
        return self.a * length + self.b
