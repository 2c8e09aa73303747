"""Shared fixtures for web tests."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

import corona_defense.web.app as web_app
from corona_defense.web.app import app


def make_board(number: int = 1, name: str = "Outbreak") -> dict:
    """Build a board document with an L-shaped path of length 20."""
    return {
        "Number": number,
        "Name": name,
        "XSize": 12,
        "YSize": 8,
        "BlockedTiles": [{"X": 5, "Y": 3}],
        "PathPoints": [{"X": 0, "Y": 0}, {"X": 10, "Y": 0}, {"X": 10, "Y": 10}],
    }


@pytest.fixture
def stages_dir(tmp_path, monkeypatch):
    """Directory with two boards, used as the app's stage directory."""
    (tmp_path / "01.json").write_text(json.dumps(make_board(1, "Outbreak")))
    (tmp_path / "02.json").write_text(json.dumps(make_board(2, "Second Wave")))
    monkeypatch.setattr(web_app, "_DEFAULT_STAGES", str(tmp_path))
    monkeypatch.setattr(web_app, "_catalogs", {})
    return tmp_path


@pytest.fixture
def client(stages_dir):
    """FastAPI test client serving the boards in ``stages_dir``."""
    with TestClient(app) as c:
        yield c
