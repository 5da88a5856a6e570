"""
Property sweeps over seeded random populations.

R1: Size preservation
R2: Earliest-tier rule
R3: Monotonicity
R4: Repeatability
R5: Exact populations for strictly descending input
"""

import random

import pytest

from contributor_tiers.components.tiers import TIER_ORDER, assign_tiers, tier_distribution

SEEDS = range(25)


class Record:
    """Plain record; identity is the only key."""

    def __init__(self, commits: int) -> None:
        self.commits = commits


def _population(seed: int) -> list[Record]:
    rng = random.Random(seed)
    size = rng.randint(0, 60)
    # Narrow value range so ties are common
    return [Record(rng.randint(-5, 40)) for _ in range(size)]


def _expected_tier(position: int, total: int) -> str:
    # Integer form of position / total <= 0.10, 0.30, 0.60
    if position * 10 <= total:
        return "S"
    if position * 10 <= total * 3:
        return "A"
    if position * 10 <= total * 6:
        return "B"
    return "C"


@pytest.mark.parametrize("seed", SEEDS)
def test_R1_size_preservation(seed: int) -> None:
    """R1: Every input record is a key exactly once."""
    records = _population(seed)

    tiers = assign_tiers(records)

    assert len(tiers) == len(records)
    assert all(r in tiers for r in records)
    assert {id(r) for r in tiers} == {id(r) for r in records}


@pytest.mark.parametrize("seed", SEEDS)
def test_R2_earliest_tier_rule(seed: int) -> None:
    """R2: Each record gets the first tier whose bound covers its percentile."""
    records = _population(seed)

    entries = assign_tiers(records).ranked()

    for entry in entries:
        assert entry.percentile == entry.position / len(records)
        assert entry.tier == _expected_tier(entry.position, len(records))


@pytest.mark.parametrize("seed", SEEDS)
def test_R3_monotonicity(seed: int) -> None:
    """R3: More commits never means a worse tier."""
    records = _population(seed)

    tiers = assign_tiers(records)

    for x in records:
        for y in records:
            if x.commits > y.commits:
                assert TIER_ORDER.index(tiers[x]) <= TIER_ORDER.index(tiers[y])


@pytest.mark.parametrize("seed", SEEDS)
def test_R4_repeatability(seed: int) -> None:
    """R4: Same records, same counts, same tiers."""
    records = _population(seed)

    first = assign_tiers(records)
    second = assign_tiers(records)

    assert [first[r] for r in records] == [second[r] for r in records]


@pytest.mark.parametrize("multiple", [1, 2, 5, 10])
def test_R5_exact_populations(multiple: int) -> None:
    """R5: Strictly descending input of size 10k splits k/2k/3k/4k."""
    n = 10 * multiple
    records = [Record(n - i) for i in range(n)]

    distribution = tier_distribution(assign_tiers(records))

    assert distribution == {"S": multiple, "A": 2 * multiple, "B": 3 * multiple, "C": 4 * multiple}
