"""Pydantic schema of the board description document.

Board files use the PascalCase keys of the game client (``XSize``,
``PathPoints`` ...). The schema keeps those keys as aliases so that
``model_dump(by_alias=True)`` writes a file the client can read back.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TileSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    x: int = Field(alias="X")
    y: int = Field(alias="Y")


class PointSchema(BaseModel):
    # NaN / Infinity literals are malformed coordinates
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    x: float = Field(alias="X")
    y: float = Field(alias="Y")


class StageDocument(BaseModel):
    """One stage as stored in a board file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    number: int = Field(alias="Number")
    name: str = Field(alias="Name")
    x_size: int = Field(alias="XSize")
    y_size: int = Field(alias="YSize")
    blocked_tiles: list[TileSchema] = Field(alias="BlockedTiles")
    path_points: list[PointSchema] = Field(alias="PathPoints", min_length=1)
