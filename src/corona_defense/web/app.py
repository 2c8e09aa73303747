"""FastAPI stage inspection application.

Read-only view of the stage catalog for level designers and tooling:
stage listings, path queries and tile checks.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException

from corona_defense.stage.catalog import StageCatalog
from corona_defense.web.schemas import (
    HealthResponse,
    PathPointResponse,
    PathSamplesResponse,
    ReloadResponse,
    StageDetailResponse,
    StagesResponse,
    TileResponse,
)
from corona_defense.web.service import StageService

load_dotenv()  # loads .env from project root; must run before env vars are consumed

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

VERSION = "0.1.0"

app = FastAPI(title="Corona Defense Stages", version=VERSION)

_DEFAULT_STAGES = os.environ.get("CORONA_DEFENSE_STAGES", "stages")

_catalogs: dict[str, StageCatalog] = {}


def _service(stages_dir: str | None = None) -> StageService:
    directory = stages_dir or _DEFAULT_STAGES
    catalog = _catalogs.get(directory)
    if catalog is None:
        catalog = StageCatalog(directory)
        _catalogs[directory] = catalog
    return StageService(catalog)


def _not_found(exc: KeyError) -> HTTPException:
    return HTTPException(status_code=404, detail=str(exc.args[0]) if exc.args else "Not found")


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=VERSION)


@app.get("/api/stages", response_model=StagesResponse)
def list_stages() -> StagesResponse:
    return StagesResponse(stages=_service().list_stages())


@app.post("/api/stages/reload", response_model=ReloadResponse)
def reload_stages() -> ReloadResponse:
    """Re-read the board files; on failure the previous stages stay loaded."""
    try:
        count = _service().reload()
    except (ValueError, FileNotFoundError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return ReloadResponse(stage_count=count)


@app.get("/api/stages/{number}", response_model=StageDetailResponse)
def stage_detail(number: int) -> StageDetailResponse:
    try:
        return _service().stage_detail(number)
    except KeyError as exc:
        raise _not_found(exc) from exc


@app.get("/api/stages/{number}/point", response_model=PathPointResponse)
def path_point(number: int, length: float) -> PathPointResponse:
    """Position after travelling *length* along the stage's enemy path."""
    try:
        return _service().point(number, length)
    except KeyError as exc:
        raise _not_found(exc) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.get("/api/stages/{number}/samples", response_model=PathSamplesResponse)
def path_samples(number: int, step: float = 1.0) -> PathSamplesResponse:
    try:
        return _service().samples(number, step)
    except KeyError as exc:
        raise _not_found(exc) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.get("/api/stages/{number}/tiles/{x}/{y}", response_model=TileResponse)
def tile(number: int, x: int, y: int) -> TileResponse:
    try:
        return _service().tile(number, x, y)
    except KeyError as exc:
        raise _not_found(exc) from exc
