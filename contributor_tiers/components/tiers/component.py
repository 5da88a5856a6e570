"""
Tiers component - Contributor tier classification.

Ranks contributors by commit count and buckets them into S, A, B, C tiers
by cumulative percentile rank.

Invariants:
- I1: Every input record is a key of the assignment exactly once
- I2: Each record gets the first tier whose bound is >= its percentile rank
- I3: Higher commit counts never land in a worse tier
- I4: Same input always yields the same assignment
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ._impl import (
    assign_tiers,
    leaderboard_rows,
    tier_commit_totals,
    tier_distribution,
)
from .models import (
    DEFAULT_TIER_STYLES,
    DEFAULT_TIER_THRESHOLDS,
    STATS_PERIODS,
    ClassifyInput,
    ClassifyOutput,
    DistributionInput,
    DistributionOutput,
    LeaderboardInput,
    LeaderboardOutput,
    Tier,
    TierStyle,
    TierThresholds,
    TierValidationError,
)
from .ports import ContributorStatsSourcePort, TierRulesPort

logger = logging.getLogger(__name__)


def _thresholds(rules: TierRulesPort | None) -> TierThresholds:
    if rules is None:
        return DEFAULT_TIER_THRESHOLDS
    return rules.get_thresholds()


def _styles(rules: TierRulesPort | None) -> Mapping[Tier, TierStyle]:
    if rules is None:
        return DEFAULT_TIER_STYLES
    return rules.get_styles()


def _validate_leaderboard_input(inp: LeaderboardInput) -> list[TierValidationError]:
    errors: list[TierValidationError] = []

    if not inp.project_id or not inp.project_id.strip():
        errors.append(
            TierValidationError(
                code="project_id_required",
                message="Project ID is required",
                field_name="project_id",
            )
        )

    if inp.period not in STATS_PERIODS:
        errors.append(
            TierValidationError(
                code="period_invalid",
                message=f"Period must be one of: {', '.join(sorted(STATS_PERIODS))}",
                field_name="period",
            )
        )

    return errors


# --- Component Entry Points ---


def run_classify(
    inp: ClassifyInput,
    *,
    rules: TierRulesPort | None = None,
) -> ClassifyOutput:
    """
    Classify an in-memory collection of contributors.

    Args:
        inp: Input containing the contributor records.
        rules: Optional rules port for the threshold table.

    Returns:
        ClassifyOutput with the identity-keyed assignment and populations.
    """
    assignment = assign_tiers(inp.contributors, thresholds=_thresholds(rules))

    return ClassifyOutput(
        assignment=assignment,
        distribution=tier_distribution(assignment),
        errors=[],
        success=True,
    )


def run_distribution(
    inp: DistributionInput,
    *,
    rules: TierRulesPort | None = None,
) -> DistributionOutput:
    """
    Tier populations and summed commits per tier.

    Args:
        inp: Input containing the contributor records.
        rules: Optional rules port for the threshold table.

    Returns:
        DistributionOutput with counts per tier and commit totals.
    """
    assignment = assign_tiers(inp.contributors, thresholds=_thresholds(rules))

    return DistributionOutput(
        distribution=tier_distribution(assignment),
        commit_totals=tier_commit_totals(assignment),
        total=len(assignment),
        errors=[],
        success=True,
    )


def run_leaderboard(
    inp: LeaderboardInput,
    *,
    source: ContributorStatsSourcePort,
    rules: TierRulesPort | None = None,
) -> LeaderboardOutput:
    """
    Build a project leaderboard from synchronized stats.

    Args:
        inp: Input containing project ID and stats period.
        source: Contributor stats source port.
        rules: Optional rules port for thresholds and styles.

    Returns:
        LeaderboardOutput with ranked rows, or validation errors.
    """
    errors = _validate_leaderboard_input(inp)
    if errors:
        return LeaderboardOutput(rows=(), distribution={}, errors=errors, success=False)

    stats = source.list_stats(inp.project_id, inp.period)
    assignment = assign_tiers(stats, thresholds=_thresholds(rules))
    rows = leaderboard_rows(assignment, styles=_styles(rules))

    logger.info(
        "Built leaderboard for project %s (%s): %d contributors",
        inp.project_id,
        inp.period,
        len(rows),
    )

    return LeaderboardOutput(
        rows=tuple(rows),
        distribution=tier_distribution(assignment),
        commit_totals=tier_commit_totals(assignment),
        errors=[],
        success=True,
    )


def run(
    inp: ClassifyInput | DistributionInput | LeaderboardInput,
    *,
    source: ContributorStatsSourcePort | None = None,
    rules: TierRulesPort | None = None,
) -> ClassifyOutput | DistributionOutput | LeaderboardOutput:
    """
    Main entry point for the tiers component.

    Dispatches to the appropriate handler based on input type.

    Args:
        inp: Input model determining the operation.
        source: Stats source port, required for leaderboards.
        rules: Optional rules port.

    Returns:
        Appropriate output model for the operation.

    Raises:
        ValueError: If a leaderboard is requested without a source.
    """
    if isinstance(inp, ClassifyInput):
        return run_classify(inp, rules=rules)
    elif isinstance(inp, DistributionInput):
        return run_distribution(inp, rules=rules)
    elif isinstance(inp, LeaderboardInput):
        if source is None:
            raise ValueError("ContributorStatsSourcePort is required for leaderboards")
        return run_leaderboard(inp, source=source, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
