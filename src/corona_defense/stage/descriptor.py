"""StageDescriptor — a parsed board with its path model.

Loading is two explicit steps: the board document is validated into a
:class:`~corona_defense.stage.schemas.StageDocument`, then
:meth:`StageDescriptor.from_document` converts it to value types and builds
the :class:`~corona_defense.stage.path.PathModel`. A descriptor is immutable;
to change a stage, parse a new one and swap the reference.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import ValidationError

from corona_defense.stage.errors import ParseError
from corona_defense.stage.models import Point, Tile
from corona_defense.stage.path import PathModel
from corona_defense.stage.schemas import PointSchema, StageDocument, TileSchema


def _validation_fields(exc: ValidationError) -> list[str]:
    return [".".join(str(part) for part in err["loc"]) for err in exc.errors()]


def _parse_error(exc: ValidationError) -> ParseError:
    fields = _validation_fields(exc)
    where = ", ".join(fields) if fields else "document"
    return ParseError(f"Invalid stage document ({where}): {exc.error_count()} error(s)", fields)


@dataclass(frozen=True)
class StageDescriptor:
    """A game stage: board size, blocked tiles and the enemy path."""

    number: int
    """Unique stage number."""

    name: str
    """Display name."""

    x_size: int
    """Number of tile columns."""

    y_size: int
    """Number of tile rows."""

    blocked_tiles: frozenset[Tile]
    """Tiles that towers can not occupy."""

    waypoints: tuple[Point, ...]
    """Points the enemy path passes through, in travel order."""

    path: PathModel = field(compare=False, repr=False)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str | bytes) -> StageDescriptor:
        """Parse a JSON board document.

        Raises:
            ParseError: On invalid JSON or a missing / mistyped field.
        """
        try:
            doc = StageDocument.model_validate_json(text)
        except ValidationError as exc:
            raise _parse_error(exc) from exc
        return cls.from_document(doc)

    @classmethod
    def from_dict(cls, data: dict) -> StageDescriptor:
        """Build from an already decoded board document.

        Raises:
            ParseError: On a missing or mistyped field.
        """
        try:
            doc = StageDocument.model_validate(data)
        except ValidationError as exc:
            raise _parse_error(exc) from exc
        return cls.from_document(doc)

    @classmethod
    def from_document(cls, doc: StageDocument) -> StageDescriptor:
        waypoints = tuple(Point(x=p.x, y=p.y) for p in doc.path_points)
        return cls(
            number=doc.number,
            name=doc.name,
            x_size=doc.x_size,
            y_size=doc.y_size,
            blocked_tiles=frozenset(Tile(x=t.x, y=t.y) for t in doc.blocked_tiles),
            waypoints=waypoints,
            path=PathModel(waypoints),
        )

    # ------------------------------------------------------------------
    # Path queries
    # ------------------------------------------------------------------

    @property
    def path_length(self) -> float:
        return self.path.path_length

    def point_along_path(self, length: float) -> Point:
        """Position after travelling *length* along the enemy path (clamped to the ends)."""
        return self.path.point_at(length)

    # ------------------------------------------------------------------
    # Tiles
    # ------------------------------------------------------------------

    def in_bounds(self, tile: Tile) -> bool:
        return 0 <= tile.x < self.x_size and 0 <= tile.y < self.y_size

    def is_blocked(self, tile: Tile) -> bool:
        return tile in self.blocked_tiles

    def can_place_tower(self, tile: Tile) -> bool:
        """True if *tile* lies on the board and is not blocked."""
        return self.in_bounds(tile) and not self.is_blocked(tile)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_document(self) -> StageDocument:
        """Return the board document this stage was built from.

        Blocked tiles are written in ``(y, x)`` order so output is stable.
        """
        tiles = sorted(self.blocked_tiles, key=lambda t: (t.y, t.x))
        return StageDocument(
            number=self.number,
            name=self.name,
            x_size=self.x_size,
            y_size=self.y_size,
            blocked_tiles=[TileSchema(x=t.x, y=t.y) for t in tiles],
            path_points=[PointSchema(x=p.x, y=p.y) for p in self.waypoints],
        )

    def to_dict(self) -> dict:
        """Return a JSON-serializable dict using the board-file keys."""
        return self.to_document().model_dump(by_alias=True)

    def dumps(self, indent: int | None = 2) -> str:
        """Serialize to board-file JSON text; :meth:`parse` reads it back."""
        return self.to_document().model_dump_json(by_alias=True, indent=indent)


def parse_stage(text: str | bytes) -> StageDescriptor:
    """Shorthand for :meth:`StageDescriptor.parse`."""
    return StageDescriptor.parse(text)
