"""Arc-length parameterisation of the enemy path.

Given the ordered waypoints of a stage, :class:`PathModel` precomputes the
cumulative length at every waypoint and one :class:`AffineLine` per segment
and coordinate, so the position of anything that has travelled a distance
``length`` along the path is found with one binary search.

Table layout for waypoints ``p0 .. p(n-1)``::

    index     0           1          ...  n-1              n
    length    0           L1         ...  L(n-1)           +inf
    segment   const(p0)   p0 -> p1   ...  p(n-2) -> p(n-1) const(p(n-1))

A query uses the first index whose cumulative length is strictly greater than
``length``. Queries before the start land on index 0 and queries at or past
the end land on the ``+inf`` entry, so both clamp to a waypoint exactly.
"""

from __future__ import annotations

import bisect
import logging
import math
from collections.abc import Iterable

from corona_defense.stage.affine import AffineLine
from corona_defense.stage.errors import DegenerateSegmentError, EmptyPathError
from corona_defense.stage.models import Point

_logger = logging.getLogger(__name__)

MAX_SAMPLES = 10_000  # upper bound on points returned by PathModel.sample


def _collapse_duplicates(waypoints: tuple[Point, ...]) -> list[Point]:
    """Drop waypoints equal to their predecessor (zero-length segments)."""
    result: list[Point] = []
    for pt in waypoints:
        if result and pt == result[-1]:
            continue
        result.append(pt)
    return result


class PathModel:
    """Queryable polyline path, parameterised by distance travelled.

    Consecutive duplicate waypoints are collapsed before the segment tables
    are built; :attr:`waypoints` still returns the sequence as given.

    Args:
        waypoints: Ordered path vertices. May be empty, in which case every
            query raises :class:`EmptyPathError`.

    Raises:
        DegenerateSegmentError: If a waypoint has a NaN or infinite coordinate.
    """

    def __init__(self, waypoints: Iterable[Point] = ()) -> None:
        self._waypoints: tuple[Point, ...] = ()
        self._lengths: list[float] = []
        self._segments_x: list[AffineLine] = []
        self._segments_y: list[AffineLine] = []
        self.build(waypoints)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def build(self, waypoints: Iterable[Point]) -> None:
        """Rebuild all segment tables from *waypoints*, discarding previous state."""
        points = tuple(waypoints)
        for i, pt in enumerate(points):
            if not (math.isfinite(pt.x) and math.isfinite(pt.y)):
                raise DegenerateSegmentError(f"Waypoint {i} has a non-finite coordinate: {pt}")

        lengths: list[float] = []
        segments_x: list[AffineLine] = []
        segments_y: list[AffineLine] = []

        effective = _collapse_duplicates(points)
        if len(effective) < len(points):
            _logger.debug(
                "Collapsed %d duplicate waypoint(s)", len(points) - len(effective)
            )

        if effective:
            first = effective[0]
            lengths.append(0.0)
            segments_x.append(AffineLine.constant(first.x))
            segments_y.append(AffineLine.constant(first.y))

            cumulative = 0.0
            for prev, curr in zip(effective, effective[1:]):
                new_cumulative = cumulative + prev.distance_to(curr)
                segments_x.append(AffineLine.from_points(cumulative, prev.x, new_cumulative, curr.x))
                segments_y.append(AffineLine.from_points(cumulative, prev.y, new_cumulative, curr.y))
                cumulative = new_cumulative
                lengths.append(cumulative)

            last = effective[-1]
            lengths.append(math.inf)
            segments_x.append(AffineLine.constant(last.x))
            segments_y.append(AffineLine.constant(last.y))

        # Publish only fully built tables.
        self._waypoints = points
        self._lengths = lengths
        self._segments_x = segments_x
        self._segments_y = segments_y

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def waypoints(self) -> tuple[Point, ...]:
        return self._waypoints

    @property
    def cumulative_lengths(self) -> tuple[float, ...]:
        """Cumulative length table, including the trailing ``+inf`` entry."""
        return tuple(self._lengths)

    @property
    def segment_count(self) -> int:
        """Number of real (non-clamping) segments."""
        return max(len(self._lengths) - 2, 0)

    @property
    def is_empty(self) -> bool:
        return not self._lengths

    @property
    def path_length(self) -> float:
        """Total length of the path.

        Raises:
            EmptyPathError: If the path has no waypoints.
        """
        self._require_points()
        return self._lengths[-2]

    def point_at(self, length: float) -> Point:
        """Return the point reached after travelling *length* along the path.

        Lengths below zero clamp to the first waypoint and lengths at or past
        :attr:`path_length` clamp to the last waypoint.

        Raises:
            EmptyPathError: If the path has no waypoints.
            ValueError: If *length* is NaN.
        """
        self._require_points()
        if math.isnan(length):
            raise ValueError("length must not be NaN")
        # length == +inf matches the sentinel itself
        idx = min(bisect.bisect_right(self._lengths, length), len(self._lengths) - 1)
        return Point(
            x=self._segments_x[idx].evaluate(length),
            y=self._segments_y[idx].evaluate(length),
        )

    def sample(self, step: float, max_samples: int = MAX_SAMPLES) -> list[tuple[float, Point]]:
        """Return ``(length, point)`` pairs every *step* units, ending exactly at the end.

        Raises:
            ValueError: If *step* is not positive, or if *step* is so small
                that more than *max_samples* points would be produced.
            EmptyPathError: If the path has no waypoints.
        """
        if not step > 0:
            raise ValueError("step must be > 0")
        total = self.path_length
        too_many = ValueError(
            f"step {step!r} would produce more than {max_samples} samples "
            f"over a path of length {total!r}"
        )
        # checked before flooring: total / step may be huge or infinite
        if total / step >= max_samples:
            raise too_many
        n = int(total // step)
        needs_end = n * step < total
        if n + 1 + needs_end > max_samples:
            raise too_many
        lengths = [i * step for i in range(n + 1)]
        if needs_end:
            lengths.append(total)
        return [(length, self.point_at(length)) for length in lengths]

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _require_points(self) -> None:
        if not self._lengths:
            raise EmptyPathError("Path has no waypoints")
