"""Stage boards and the enemy path model."""

from corona_defense.stage.affine import AffineLine
from corona_defense.stage.catalog import StageCatalog, load_stage_file
from corona_defense.stage.descriptor import StageDescriptor, parse_stage
from corona_defense.stage.errors import (
    DegenerateSegmentError,
    EmptyPathError,
    ParseError,
    StageError,
)
from corona_defense.stage.models import Point, Tile
from corona_defense.stage.path import PathModel

__all__ = [
    "AffineLine",
    "DegenerateSegmentError",
    "EmptyPathError",
    "ParseError",
    "PathModel",
    "Point",
    "StageCatalog",
    "StageDescriptor",
    "StageError",
    "Tile",
    "load_stage_file",
    "parse_stage",
]
