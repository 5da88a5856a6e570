from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest

from contributor_tiers.domain.entities import ContributorStats

PROJECT_ROOT = Path(__file__).parent.parent


@dataclass
class Contributor:
    """Minimal record exposing commits. Unhashable, like most callers' records."""

    name: str
    commits: float


@pytest.fixture
def contributor() -> type[Contributor]:
    return Contributor


@pytest.fixture
def descending_ten() -> list[Contributor]:
    """Ten contributors with strictly decreasing commit counts."""
    return [Contributor(name=f"c{i}", commits=(10 - i) * 100) for i in range(10)]


@pytest.fixture
def make_stats() -> Callable[..., ContributorStats]:
    """Factory for ContributorStats with sensible defaults."""
    counter = iter(range(1, 10_000))

    def _make(
        github_username: str,
        commits: int,
        project_id: str = "proj-1",
        period: str = "all_time",
    ) -> ContributorStats:
        return ContributorStats(
            id=f"stats-{next(counter)}",
            project_id=project_id,
            github_username=github_username,
            period=period,
            commits=commits,
        )

    return _make


@pytest.fixture
def rules_path() -> Path:
    """Path to the checked-in rules file."""
    return PROJECT_ROOT / "contributor_tiers_rules.yaml"
