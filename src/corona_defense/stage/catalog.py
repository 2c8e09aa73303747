"""StageCatalog — loads every board file in a directory."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from corona_defense.stage.descriptor import StageDescriptor
from corona_defense.stage.errors import ParseError, StageError

_logger = logging.getLogger(__name__)


def load_stage_file(path: Path) -> StageDescriptor:
    """Parse a single board file.

    Raises:
        ParseError: If the file content is not a valid board document.
        StageError: If the path cannot be built from the document.

        Either message names the file.
    """
    try:
        return StageDescriptor.parse(path.read_bytes())
    except ParseError as exc:
        raise ParseError(f"{path.name}: {exc}", exc.fields) from exc
    except StageError as exc:
        raise type(exc)(f"{path.name}: {exc}") from exc


class StageCatalog:
    """All stages found in *directory*, keyed by stage number.

    Board files are the ``*.json`` files directly inside the directory, read
    in filename order. :meth:`reload` builds a complete new mapping before
    replacing the current one, so a reader never sees a partially loaded
    catalog.

    Parameters
    ----------
    directory:
        Directory containing board files.

    Raises
    ------
    FileNotFoundError
        If *directory* does not exist.
    ParseError
        If a board file is invalid.
    ValueError
        If two files declare the same stage number.
    """

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)
        self._stages: dict[int, StageDescriptor] = {}
        self.reload()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def directory(self) -> Path:
        return self._directory

    def reload(self) -> None:
        """Re-read all board files and swap in the new stages."""
        if not self._directory.is_dir():
            raise FileNotFoundError(f"Stage directory not found: {self._directory}")

        stages: dict[int, StageDescriptor] = {}
        sources: dict[int, str] = {}
        for path in sorted(self._directory.glob("*.json")):
            stage = load_stage_file(path)
            if stage.number in stages:
                raise ValueError(
                    f"Duplicate stage number {stage.number}: "
                    f"{sources[stage.number]} and {path.name}"
                )
            stages[stage.number] = stage
            sources[stage.number] = path.name
            _logger.debug("Loaded stage %d (%s) from %s", stage.number, stage.name, path.name)

        self._stages = stages
        _logger.info("Loaded %d stage(s) from %s", len(stages), self._directory)

    def get(self, number: int) -> StageDescriptor:
        """Return stage *number*.

        Raises:
            KeyError: If no such stage was loaded.
        """
        try:
            return self._stages[number]
        except KeyError:
            raise KeyError(f"Unknown stage {number}") from None

    def numbers(self) -> list[int]:
        return sorted(self._stages)

    def __contains__(self, number: object) -> bool:
        return number in self._stages

    def __len__(self) -> int:
        return len(self._stages)

    def __iter__(self) -> Iterator[StageDescriptor]:
        stages = self._stages
        return iter([stages[n] for n in sorted(stages)])
