import argparse
import logging
import sys
from pathlib import Path

from contributor_tiers.adapters.rules_port import RulesTierAdapter
from contributor_tiers.adapters.stats_source import JsonFileStatsSource
from contributor_tiers.components.tiers import (
    STATS_PERIODS,
    LeaderboardInput,
    LeaderboardOutput,
    run_leaderboard,
)
from contributor_tiers.rules.loader import load_rules, resolve_rules_path
from contributor_tiers.rules.models import Rules

logger = logging.getLogger("cli")


def get_rules(path: Path) -> Rules:
    if not path.exists():
        logger.warning(f"Rules file {path} not found, using default tiers.")
        return Rules()
    return load_rules(path)


def _leaderboard(rules: Rules, args: argparse.Namespace) -> LeaderboardOutput:
    result = run_leaderboard(
        LeaderboardInput(project_id=args.project_id, period=args.period),
        source=JsonFileStatsSource(args.stats_file),
        rules=RulesTierAdapter(rules),
    )
    for error in result.errors:
        logger.error(f"{error.field_name}: {error.message}")
    return result


def handle_classify(rules: Rules, args: argparse.Namespace) -> int:
    result = _leaderboard(rules, args)
    if not result.success:
        return 1

    if not result.rows:
        print(f"No contributors for project '{args.project_id}' ({args.period}).")
        return 0

    print(f"{'#':>4}  {'Tier':<4}  {'Commits':>8}  Contributor")
    for row in result.rows:
        print(f"{row.position:>4}  {row.tier:<4}  {row.commits:>8}  {row.record.github_username}")
    return 0


def handle_distribution(rules: Rules, args: argparse.Namespace) -> int:
    result = _leaderboard(rules, args)
    if not result.success:
        return 1

    print(f"Contributors: {len(result.rows)}")
    for tier, count in result.distribution.items():
        commits = result.commit_totals.get(tier, 0)
        print(f"Tier {tier}: {count} contributors, {commits} commits")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Contributor tier classification")
    parser.add_argument(
        "--rules",
        help="Path to rules YAML (default: $CONTRIBUTOR_TIERS_RULES or contributor_tiers_rules.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("classify", "Print the tiered leaderboard for a project"),
        ("distribution", "Print tier populations and commit totals"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("stats_file", help="JSON array of contributor stats")
        sub.add_argument("--project-id", required=True, help="Project to rank")
        sub.add_argument(
            "--period",
            default="all_time",
            choices=sorted(STATS_PERIODS),
            help="Stats period (default: all_time)",
        )

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        rules = get_rules(resolve_rules_path(args.rules))
    except ValueError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(str(e))
        return 1

    logging.basicConfig(level=rules.logging.level)

    try:
        if args.command == "classify":
            return handle_classify(rules, args)
        return handle_distribution(rules, args)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
