"""
Tiers component port definitions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from contributor_tiers.domain.entities import ContributorStats

    from .models import Tier, TierStyle, TierThresholds


class ContributorMetric(Protocol):
    """Any record exposing a numeric commit count."""

    @property
    def commits(self) -> float:
        ...


class ContributorStatsSourcePort(Protocol):
    """Source of synchronized per-contributor stats."""

    def list_stats(self, project_id: str, period: str) -> list[ContributorStats]:
        """List stats for a project and period. Order is not significant."""
        ...


class TierRulesPort(Protocol):
    """Port for tier rules configuration."""

    def get_thresholds(self) -> TierThresholds:
        """Get the cumulative threshold table."""
        ...

    def get_styles(self) -> Mapping[Tier, TierStyle]:
        """Get display styles per tier."""
        ...
