"""
Tiers component input/output models.

Tier labels, the cumulative threshold table, display styles and the
input/output dataclasses used by the component entry points.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal

# --- Tier Labels ---


Tier = Literal["S", "A", "B", "C"]

# Best first
TIER_ORDER: tuple[Tier, ...] = ("S", "A", "B", "C")
STATS_PERIODS: frozenset[str] = frozenset({"all_time", "ytd"})


# --- Validation Error ---


@dataclass(frozen=True)
class TierValidationError:
    """Tiers validation error."""

    code: str
    message: str
    field_name: str | None = None


# --- Threshold Table ---


@dataclass(frozen=True)
class TierBand:
    """Cumulative upper bound of a tier's percentile range."""

    upper_bound: float
    tier: Tier


@dataclass(frozen=True)
class TierThresholds:
    """
    Ordered cumulative percentile bands.

    A record whose percentile rank is at or below a band's upper bound
    belongs to that band's tier, checked from the first band onward.

    Invariants:
    - Every tier appears exactly once, in S, A, B, C order
    - Upper bounds strictly increase within (0, 1]
    - The last upper bound is exactly 1.0, so every rank matches a band
    """

    bands: tuple[TierBand, ...]

    def __post_init__(self) -> None:
        tiers = tuple(band.tier for band in self.bands)
        if tiers != TIER_ORDER:
            raise ValueError(
                f"Threshold bands must cover tiers {', '.join(TIER_ORDER)} in order, "
                f"got {', '.join(tiers) or 'none'}"
            )

        previous = 0.0
        for band in self.bands:
            if not previous < band.upper_bound <= 1.0:
                raise ValueError(
                    f"Upper bound {band.upper_bound} for tier {band.tier} must be "
                    f"greater than {previous} and at most 1.0"
                )
            previous = band.upper_bound

        if self.bands[-1].upper_bound != 1.0:
            raise ValueError("Last threshold band must end at 1.0")

    @classmethod
    def from_pairs(cls, pairs: list[tuple[float, Tier]]) -> TierThresholds:
        """Build a table from (upper_bound, tier) pairs."""
        return cls(bands=tuple(TierBand(upper_bound=b, tier=t) for b, t in pairs))

    def as_pairs(self) -> list[tuple[float, Tier]]:
        return [(band.upper_bound, band.tier) for band in self.bands]


DEFAULT_TIER_THRESHOLDS = TierThresholds.from_pairs(
    [
        (0.10, "S"),
        (0.30, "A"),
        (0.60, "B"),
        (1.00, "C"),
    ]
)


# --- Display Styles ---


@dataclass(frozen=True)
class TierStyle:
    """Display metadata for a tier."""

    label: str
    color: str
    bg_class: str
    text_class: str


DEFAULT_TIER_STYLES: Mapping[Tier, TierStyle] = MappingProxyType({
    "S": TierStyle(
        label="S",
        color="#10b981",
        bg_class="bg-emerald-100 dark:bg-emerald-950",
        text_class="text-emerald-700 dark:text-emerald-400",
    ),
    "A": TierStyle(
        label="A",
        color="#3b82f6",
        bg_class="bg-blue-100 dark:bg-blue-950",
        text_class="text-blue-700 dark:text-blue-400",
    ),
    "B": TierStyle(
        label="B",
        color="#f59e0b",
        bg_class="bg-amber-100 dark:bg-amber-950",
        text_class="text-amber-700 dark:text-amber-400",
    ),
    "C": TierStyle(
        label="C",
        color="#64748b",
        bg_class="bg-slate-100 dark:bg-slate-800",
        text_class="text-slate-700 dark:text-slate-400",
    ),
})


# --- Ranked Output ---


@dataclass(frozen=True)
class RankedContributor:
    """A record with its rank position, percentile rank and tier."""

    position: int
    percentile: float
    tier: Tier
    record: Any


class TierAssignment(Mapping[Any, Tier]):
    """
    Tier per record, keyed by object identity.

    Records need not be hashable, and two distinct records with equal
    field values are two separate keys. Iteration yields records in rank
    order, best first.

    A record passed more than once keeps the tier of its lowest-ranked
    occurrence; ranked() still lists every occurrence.
    """

    __slots__ = ("_ranked", "_by_id")

    def __init__(self, ranked: Iterable[RankedContributor] = ()) -> None:
        self._ranked = tuple(ranked)
        self._by_id: dict[int, RankedContributor] = {}
        for entry in self._ranked:
            self._by_id[id(entry.record)] = entry

    def _entry(self, record: object) -> RankedContributor | None:
        entry = self._by_id.get(id(record))
        if entry is None or entry.record is not record:
            return None
        return entry

    def __getitem__(self, record: Any) -> Tier:
        entry = self._entry(record)
        if entry is None:
            raise KeyError(record)
        return entry.tier

    def __contains__(self, record: object) -> bool:
        return self._entry(record) is not None

    def __iter__(self) -> Iterator[Any]:
        for entry in self._ranked:
            if self._by_id[id(entry.record)] is entry:
                yield entry.record

    def __len__(self) -> int:
        return len(self._by_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TierAssignment):
            return NotImplemented
        return self._ranked == other._ranked

    def __repr__(self) -> str:
        summary = ", ".join(f"#{e.position}:{e.tier}" for e in self._ranked)
        return f"TierAssignment({summary})"

    def ranked(self) -> list[RankedContributor]:
        """All entries in rank order."""
        return list(self._ranked)


@dataclass(frozen=True)
class LeaderboardRow:
    """Single leaderboard row."""

    position: int
    percentile: float
    tier: Tier
    commits: float
    color: str
    record: Any


# --- Input Models ---


@dataclass(frozen=True)
class ClassifyInput:
    """Input for classifying an in-memory collection."""

    contributors: tuple[Any, ...]


@dataclass(frozen=True)
class DistributionInput:
    """Input for tier populations and commit totals."""

    contributors: tuple[Any, ...]


@dataclass(frozen=True)
class LeaderboardInput:
    """Input for building a project leaderboard from the stats source."""

    project_id: str
    period: str = "all_time"


# --- Output Models ---


@dataclass(frozen=True)
class ClassifyOutput:
    """Output for classification."""

    assignment: TierAssignment
    distribution: dict[Tier, int]
    errors: list[TierValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class DistributionOutput:
    """Output for tier populations and commit totals."""

    distribution: dict[Tier, int]
    commit_totals: dict[Tier, float]
    total: int
    errors: list[TierValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class LeaderboardOutput:
    """Output for a project leaderboard."""

    rows: tuple[LeaderboardRow, ...]
    distribution: dict[Tier, int]
    commit_totals: dict[Tier, float] = field(default_factory=dict)
    errors: list[TierValidationError] = field(default_factory=list)
    success: bool = True
