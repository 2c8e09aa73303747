"""Tests for StageCatalog."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path

import pytest

from corona_defense.stage.catalog import StageCatalog, load_stage_file
from corona_defense.stage.errors import DegenerateSegmentError, ParseError
from corona_defense.stage.models import Point


def write_board(directory: Path, filename: str, number: int, name: str = "Stage") -> Path:
    path = directory / filename
    path.write_text(json.dumps({
        "Number": number,
        "Name": name,
        "XSize": 10,
        "YSize": 10,
        "BlockedTiles": [],
        "PathPoints": [{"X": 0, "Y": 0}, {"X": number * 10, "Y": 0}],
    }))
    return path


class TestStageCatalog:
    def test_loads_all_boards(self, tmp_path):
        write_board(tmp_path, "a.json", 2, "Second")
        write_board(tmp_path, "b.json", 1, "First")
        catalog = StageCatalog(tmp_path)
        assert len(catalog) == 2
        assert catalog.numbers() == [1, 2]
        assert catalog.get(2).name == "Second"
        assert catalog.get(2).path_length == 20.0

    def test_iterates_in_number_order(self, tmp_path):
        write_board(tmp_path, "a.json", 3)
        write_board(tmp_path, "b.json", 1)
        write_board(tmp_path, "c.json", 2)
        assert [s.number for s in StageCatalog(tmp_path)] == [1, 2, 3]

    def test_ignores_non_json_files(self, tmp_path):
        write_board(tmp_path, "a.json", 1)
        (tmp_path / "notes.txt").write_text("not a board")
        assert len(StageCatalog(tmp_path)) == 1

    def test_empty_directory(self, tmp_path):
        catalog = StageCatalog(tmp_path)
        assert len(catalog) == 0
        assert list(catalog) == []

    def test_contains(self, tmp_path):
        write_board(tmp_path, "a.json", 1)
        catalog = StageCatalog(tmp_path)
        assert 1 in catalog
        assert 2 not in catalog

    def test_unknown_stage_raises_key_error(self, tmp_path):
        catalog = StageCatalog(tmp_path)
        with pytest.raises(KeyError):
            catalog.get(7)

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            StageCatalog(tmp_path / "nope")

    def test_duplicate_numbers_raise(self, tmp_path):
        write_board(tmp_path, "a.json", 1)
        write_board(tmp_path, "b.json", 1)
        with pytest.raises(ValueError, match="Duplicate stage number 1"):
            StageCatalog(tmp_path)

    def test_invalid_board_names_file(self, tmp_path):
        (tmp_path / "broken.json").write_text("{}")
        with pytest.raises(ParseError, match="broken.json"):
            StageCatalog(tmp_path)

    def test_non_finite_coordinate_names_file(self, tmp_path):
        board = json.loads(write_board(tmp_path, "bad.json", 1).read_text())
        board["PathPoints"][1]["X"] = math.nan
        (tmp_path / "bad.json").write_text(json.dumps(board))
        with pytest.raises(ParseError, match="bad.json"):
            StageCatalog(tmp_path)

    def test_path_build_error_names_file(self, tmp_path):
        """A 1-unit step after 1e20 units is lost to rounding: a zero-length segment."""
        board = json.loads(write_board(tmp_path, "huge.json", 1).read_text())
        board["PathPoints"] = [{"X": 0, "Y": 0}, {"X": 1e20, "Y": 0}, {"X": 1e20, "Y": 1}]
        (tmp_path / "huge.json").write_text(json.dumps(board))
        with pytest.raises(DegenerateSegmentError, match="huge.json"):
            StageCatalog(tmp_path)

    def test_reload_picks_up_new_files(self, tmp_path):
        write_board(tmp_path, "a.json", 1)
        catalog = StageCatalog(tmp_path)
        write_board(tmp_path, "b.json", 2)
        catalog.reload()
        assert catalog.numbers() == [1, 2]

    def test_failed_reload_keeps_previous_stages(self, tmp_path):
        write_board(tmp_path, "a.json", 1)
        catalog = StageCatalog(tmp_path)
        old = catalog.get(1)
        (tmp_path / "b.json").write_text("{broken")
        with pytest.raises(ParseError):
            catalog.reload()
        assert catalog.get(1) is old

    def test_reload_replaces_descriptors_without_touching_old_ones(self, tmp_path):
        write_board(tmp_path, "a.json", 1)
        catalog = StageCatalog(tmp_path)
        old = catalog.get(1)
        write_board(tmp_path, "a.json", 1, name="Renamed")
        catalog.reload()
        assert catalog.get(1).name == "Renamed"
        assert old.name == "Stage"
        assert old.point_along_path(5) == Point(5, 0)

    def test_reload_logs_stage_count(self, tmp_path, caplog):
        write_board(tmp_path, "a.json", 1)
        with caplog.at_level(logging.INFO, logger="corona_defense.stage.catalog"):
            StageCatalog(tmp_path)
        assert "Loaded 1 stage(s)" in caplog.text


class TestLoadStageFile:
    def test_loads_bundled_board(self):
        board = Path(__file__).resolve().parents[2] / "stages" / "01_outbreak.json"
        stage = load_stage_file(board)
        assert stage.number == 1
        assert stage.path_length == pytest.approx(22.0)
        assert stage.point_along_path(0) == Point(0.0, 1.5)
        assert stage.point_along_path(stage.path_length) == Point(12.0, 1.5)
