"""StageService — stage catalog queries for the Web API."""

from __future__ import annotations

from corona_defense.stage.catalog import StageCatalog
from corona_defense.stage.models import Tile
from corona_defense.web.schemas import (
    PathPointResponse,
    PathSamplesResponse,
    StageDetailResponse,
    StageSummary,
    TileResponse,
)


class StageService:
    """Turns catalog lookups into API response models.

    Parameters
    ----------
    catalog:
        Loaded stage catalog.

    Unknown stage numbers raise :class:`KeyError`; invalid query parameters
    raise :class:`ValueError`.
    """

    def __init__(self, catalog: StageCatalog) -> None:
        self._catalog = catalog

    def list_stages(self) -> list[StageSummary]:
        return [
            StageSummary(
                number=s.number,
                name=s.name,
                x_size=s.x_size,
                y_size=s.y_size,
                path_length=s.path_length,
                waypoint_count=len(s.waypoints),
            )
            for s in self._catalog
        ]

    def stage_detail(self, number: int) -> StageDetailResponse:
        stage = self._catalog.get(number)
        return StageDetailResponse(stage=stage.to_document(), path_length=stage.path_length)

    def point(self, number: int, length: float) -> PathPointResponse:
        pt = self._catalog.get(number).point_along_path(length)
        return PathPointResponse(length=length, x=pt.x, y=pt.y)

    def samples(self, number: int, step: float) -> PathSamplesResponse:
        stage = self._catalog.get(number)
        points = [
            PathPointResponse(length=length, x=pt.x, y=pt.y)
            for length, pt in stage.path.sample(step)
        ]
        return PathSamplesResponse(
            number=number, step=step, path_length=stage.path_length, points=points
        )

    def tile(self, number: int, x: int, y: int) -> TileResponse:
        stage = self._catalog.get(number)
        tile = Tile(x=x, y=y)
        return TileResponse(
            x=x,
            y=y,
            in_bounds=stage.in_bounds(tile),
            blocked=stage.is_blocked(tile),
            buildable=stage.can_place_tower(tile),
        )

    def reload(self) -> int:
        """Reload all board files; returns the new stage count."""
        self._catalog.reload()
        return len(self._catalog)
