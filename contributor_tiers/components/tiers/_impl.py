"""
Tier classification - percentile bucketing of contributors.

Ranks contributors by commit count and assigns each one to a tier by
comparing its percentile rank against a cumulative threshold table.

Functional Core - pure business logic, no I/O.

Percentile contract:
- Records are ranked by metric, highest first
- Position p is 1-indexed; percentile rank is p / N, in (0, 1]
- The first band whose upper bound is >= the percentile rank wins
- Populations emerge from that rule; they are never sliced from N

Ties keep input order (sorted() is stable), so of two records with equal
counts the one given first takes the better position.

Records must expose ``commits`` unless a ``metric`` accessor is passed;
the overloads below let a type checker enforce that at the call site.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from operator import attrgetter
from typing import Any, TypeVar, overload

from .models import (
    DEFAULT_TIER_STYLES,
    DEFAULT_TIER_THRESHOLDS,
    TIER_ORDER,
    LeaderboardRow,
    RankedContributor,
    Tier,
    TierAssignment,
    TierStyle,
    TierThresholds,
)
from .ports import ContributorMetric

logger = logging.getLogger(__name__)

T = TypeVar("T")

MetricFn = Callable[[Any], float]

# Lookups for records missing from an assignment
FALLBACK_TIER: Tier = "C"

_commits: MetricFn = attrgetter("commits")


# --- Threshold Lookup ---


def tier_for_percentile(
    percentile: float,
    thresholds: TierThresholds = DEFAULT_TIER_THRESHOLDS,
) -> Tier:
    """
    Return the first tier whose cumulative upper bound covers a percentile.

    Raises:
        ValueError: If percentile is outside (0, 1].
    """
    if not 0.0 < percentile <= 1.0:
        raise ValueError(f"Percentile rank must be in (0, 1], got {percentile}")

    for band in thresholds.bands:
        if percentile <= band.upper_bound:
            return band.tier

    # Unreachable: TierThresholds guarantees a final bound of 1.0
    return thresholds.bands[-1].tier


# --- Ranking ---


def _rank(
    contributors: Iterable[Any],
    thresholds: TierThresholds,
    key: MetricFn,
) -> list[RankedContributor]:
    ordered = sorted(contributors, key=key, reverse=True)
    total = len(ordered)

    ranked: list[RankedContributor] = []
    for index, record in enumerate(ordered):
        position = index + 1
        percentile = position / total
        ranked.append(
            RankedContributor(
                position=position,
                percentile=percentile,
                tier=tier_for_percentile(percentile, thresholds),
                record=record,
            )
        )
    return ranked


@overload
def rank_contributors(
    contributors: Iterable[ContributorMetric],
    *,
    thresholds: TierThresholds = ...,
    metric: None = None,
) -> list[RankedContributor]: ...


@overload
def rank_contributors(
    contributors: Iterable[T],
    *,
    thresholds: TierThresholds = ...,
    metric: Callable[[T], float],
) -> list[RankedContributor]: ...


def rank_contributors(
    contributors: Iterable[Any],
    *,
    thresholds: TierThresholds = DEFAULT_TIER_THRESHOLDS,
    metric: MetricFn | None = None,
) -> list[RankedContributor]:
    """Rank records by metric descending and attach position, percentile and tier."""
    return _rank(contributors, thresholds, metric or _commits)


@overload
def assign_tiers(
    contributors: Iterable[ContributorMetric],
    *,
    thresholds: TierThresholds = ...,
    metric: None = None,
) -> TierAssignment: ...


@overload
def assign_tiers(
    contributors: Iterable[T],
    *,
    thresholds: TierThresholds = ...,
    metric: Callable[[T], float],
) -> TierAssignment: ...


def assign_tiers(
    contributors: Iterable[Any],
    *,
    thresholds: TierThresholds = DEFAULT_TIER_THRESHOLDS,
    metric: MetricFn | None = None,
) -> TierAssignment:
    """
    Assign every contributor to one of the S, A, B, C tiers.

    Args:
        contributors: Records exposing a numeric ``commits`` attribute, or
            any records when ``metric`` is given. May be empty.
        thresholds: Cumulative threshold table.
        metric: Optional accessor used instead of ``record.commits``.

    Returns:
        TierAssignment keyed by record identity.
    """
    assignment = TierAssignment(_rank(contributors, thresholds, metric or _commits))
    if assignment:
        logger.debug(
            "Assigned tiers to %d contributors: %s",
            len(assignment),
            tier_distribution(assignment),
        )
    return assignment


def tier_of(assignment: TierAssignment, record: object) -> Tier:
    """Tier of a record, or the fallback tier when it was not classified."""
    return assignment.get(record, FALLBACK_TIER)


# --- Aggregates ---


def tier_distribution(assignment: TierAssignment) -> dict[Tier, int]:
    """Population per tier. Every tier is present, best first."""
    counts: dict[Tier, int] = {tier: 0 for tier in TIER_ORDER}
    for tier in assignment.values():
        counts[tier] += 1
    return counts


def tier_commit_totals(
    assignment: TierAssignment,
    *,
    metric: MetricFn | None = None,
) -> dict[Tier, float]:
    """
    Summed metric per tier, omitting tiers whose total is not positive.

    Every occurrence counts, so a record passed twice adds its metric twice
    to the tier the assignment holds for it.
    """
    key = metric or _commits
    totals: dict[Tier, float] = {tier: 0 for tier in TIER_ORDER}
    for entry in assignment.ranked():
        totals[assignment[entry.record]] += key(entry.record)
    return {tier: total for tier, total in totals.items() if total > 0}


def leaderboard_rows(
    assignment: TierAssignment,
    *,
    styles: Mapping[Tier, TierStyle] | None = None,
    metric: MetricFn | None = None,
) -> list[LeaderboardRow]:
    """Leaderboard rows for an existing assignment, in rank order."""
    key = metric or _commits
    palette = styles or DEFAULT_TIER_STYLES

    return [
        LeaderboardRow(
            position=entry.position,
            percentile=entry.percentile,
            tier=entry.tier,
            commits=key(entry.record),
            color=palette[entry.tier].color,
            record=entry.record,
        )
        for entry in assignment.ranked()
    ]


@overload
def build_leaderboard(
    contributors: Iterable[ContributorMetric],
    *,
    thresholds: TierThresholds = ...,
    styles: Mapping[Tier, TierStyle] | None = None,
    metric: None = None,
) -> list[LeaderboardRow]: ...


@overload
def build_leaderboard(
    contributors: Iterable[T],
    *,
    thresholds: TierThresholds = ...,
    styles: Mapping[Tier, TierStyle] | None = None,
    metric: Callable[[T], float],
) -> list[LeaderboardRow]: ...


def build_leaderboard(
    contributors: Iterable[Any],
    *,
    thresholds: TierThresholds = DEFAULT_TIER_THRESHOLDS,
    styles: Mapping[Tier, TierStyle] | None = None,
    metric: MetricFn | None = None,
) -> list[LeaderboardRow]:
    """Leaderboard rows in rank order with tier and display color."""
    key = metric or _commits
    assignment = TierAssignment(_rank(contributors, thresholds, key))
    return leaderboard_rows(assignment, styles=styles, metric=key)
