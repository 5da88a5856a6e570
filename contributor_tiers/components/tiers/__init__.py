"""
Tiers component - Contributor tier classification.

Buckets contributors into S, A, B, C tiers by percentile rank of commits.
"""

from ._impl import (
    FALLBACK_TIER,
    assign_tiers,
    build_leaderboard,
    leaderboard_rows,
    rank_contributors,
    tier_commit_totals,
    tier_distribution,
    tier_for_percentile,
    tier_of,
)
from .component import (
    run,
    run_classify,
    run_distribution,
    run_leaderboard,
)
from .models import (
    DEFAULT_TIER_STYLES,
    DEFAULT_TIER_THRESHOLDS,
    STATS_PERIODS,
    TIER_ORDER,
    ClassifyInput,
    ClassifyOutput,
    DistributionInput,
    DistributionOutput,
    LeaderboardInput,
    LeaderboardOutput,
    LeaderboardRow,
    RankedContributor,
    Tier,
    TierAssignment,
    TierBand,
    TierStyle,
    TierThresholds,
    TierValidationError,
)
from .ports import (
    ContributorMetric,
    ContributorStatsSourcePort,
    TierRulesPort,
)

__all__ = [
    # Entry points
    "run",
    "run_classify",
    "run_distribution",
    "run_leaderboard",
    # Functional core
    "assign_tiers",
    "build_leaderboard",
    "leaderboard_rows",
    "rank_contributors",
    "tier_commit_totals",
    "tier_distribution",
    "tier_for_percentile",
    "tier_of",
    "FALLBACK_TIER",
    # Input models
    "ClassifyInput",
    "DistributionInput",
    "LeaderboardInput",
    # Output models
    "ClassifyOutput",
    "DistributionOutput",
    "LeaderboardOutput",
    "LeaderboardRow",
    "RankedContributor",
    "TierAssignment",
    "TierValidationError",
    # Configuration
    "DEFAULT_TIER_STYLES",
    "DEFAULT_TIER_THRESHOLDS",
    "STATS_PERIODS",
    "TIER_ORDER",
    "Tier",
    "TierBand",
    "TierStyle",
    "TierThresholds",
    # Ports
    "ContributorMetric",
    "ContributorStatsSourcePort",
    "TierRulesPort",
]
