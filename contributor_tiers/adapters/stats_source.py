"""
Contributor stats source adapters.

Implementations of ContributorStatsSourcePort. The production source is the
sync job that pulls activity from the source-control host; these cover
local files and tests.

Key behaviors:
- Stats are filtered by project ID and period
- JSON input may use snake_case or camelCase keys
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from contributor_tiers.domain.entities import ContributorStats

logger = logging.getLogger(__name__)

_stats_list = TypeAdapter(list[ContributorStats])


def parse_stats(data: object) -> list[ContributorStats]:
    """
    Validate raw decoded JSON into stats records.

    Raises:
        ValueError: If the payload does not match the stats schema.
    """
    try:
        return _stats_list.validate_python(data)
    except ValidationError as e:
        raise ValueError(f"Invalid contributor stats:\n{e}") from e


class InMemoryStatsSource:
    """In-memory stats source for testing."""

    def __init__(self, stats: Iterable[ContributorStats] = ()) -> None:
        self._stats: list[ContributorStats] = list(stats)

    def add(self, stats: ContributorStats) -> None:
        self._stats.append(stats)

    def list_stats(self, project_id: str, period: str) -> list[ContributorStats]:
        return [s for s in self._stats if s.project_id == project_id and s.period == period]


class JsonFileStatsSource:
    """
    Stats source reading a JSON array exported by the sync job.

    The file is read on every call, so edits are picked up without a restart.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[ContributorStats]:
        """
        Load every record in the file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not valid JSON or not a stats array.
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Stats file not found at: {self._path}")

        with open(self._path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in stats file {self._path}: {e}") from e

        stats = parse_stats(data)
        logger.debug("Loaded %d stats records from %s", len(stats), self._path)
        return stats

    def list_stats(self, project_id: str, period: str) -> list[ContributorStats]:
        return [s for s in self.load() if s.project_id == project_id and s.period == period]
