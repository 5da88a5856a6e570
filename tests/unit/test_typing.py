"""
Static typing tests.

Type-check small callers of the classification API with mypy and check
that records without a commits accessor are rejected at the call site.
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

api = pytest.importorskip("mypy.api")

PROJECT_ROOT = Path(__file__).parent.parent.parent


def _mypy_errors(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, source: str) -> list[str]:
    """Errors mypy reports for the snippet itself, using the project config."""
    snippet = tmp_path / "caller.py"
    snippet.write_text(textwrap.dedent(source))
    monkeypatch.chdir(PROJECT_ROOT)

    stdout, _, _ = api.run(
        [
            str(snippet),
            "--follow-imports=silent",
            "--no-incremental",
            "--cache-dir",
            str(tmp_path / "mypy_cache"),
        ]
    )
    return [line for line in stdout.splitlines() if "caller.py:" in line and ": error:" in line]


class TestClassifyCallSites:
    """Test overload resolution of assign_tiers, rank_contributors and build_leaderboard."""

    def test_records_with_commits_accepted(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        errors = _mypy_errors(
            tmp_path,
            monkeypatch,
            """
            from dataclasses import dataclass
            from typing import assert_type

            from contributor_tiers.components.tiers import (
                LeaderboardRow,
                TierAssignment,
                assign_tiers,
                build_leaderboard,
            )


            @dataclass
            class Dev:
                name: str
                commits: int


            assert_type(assign_tiers([Dev("a", 3)]), TierAssignment)
            assert_type(build_leaderboard([Dev("a", 3)]), list[LeaderboardRow])
            """,
        )

        assert errors == []

    def test_metric_accessor_accepted(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Records of any shape are fine once a metric is given."""
        errors = _mypy_errors(
            tmp_path,
            monkeypatch,
            """
            from contributor_tiers.components.tiers import assign_tiers, rank_contributors

            records = [{"commits": 3}, {"commits": 5}]

            assign_tiers(records, metric=lambda r: float(r["commits"]))
            rank_contributors(records, metric=lambda r: float(r["commits"]))
            """,
        )

        assert errors == []

    @pytest.mark.parametrize(
        "call",
        [
            "assign_tiers([NoCommits()])",
            "rank_contributors([NoCommits()])",
            "build_leaderboard([NoCommits()])",
            'assign_tiers([{"commits": 3}])',
        ],
    )
    def test_records_without_commits_rejected(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, call: str
    ) -> None:
        errors = _mypy_errors(
            tmp_path,
            monkeypatch,
            f"""
            from contributor_tiers.components.tiers import (
                assign_tiers,
                build_leaderboard,
                rank_contributors,
            )


            class NoCommits:
                name = "x"


            {call}
            """,
        )

        assert len(errors) == 1
        assert "call-overload" in errors[0]
