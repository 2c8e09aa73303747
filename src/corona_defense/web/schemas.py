"""Pydantic response schemas for the stage inspection API."""

from __future__ import annotations

from pydantic import BaseModel

from corona_defense.stage.schemas import StageDocument


class HealthResponse(BaseModel):
    status: str
    version: str


class StageSummary(BaseModel):
    number: int
    name: str
    x_size: int
    y_size: int
    path_length: float
    waypoint_count: int


class StagesResponse(BaseModel):
    stages: list[StageSummary]


class StageDetailResponse(BaseModel):
    stage: StageDocument
    path_length: float


class PathPointResponse(BaseModel):
    length: float
    x: float
    y: float


class PathSamplesResponse(BaseModel):
    number: int
    step: float
    path_length: float
    points: list[PathPointResponse]


class TileResponse(BaseModel):
    x: int
    y: int
    in_bounds: bool
    blocked: bool
    buildable: bool


class ReloadResponse(BaseModel):
    stage_count: int
