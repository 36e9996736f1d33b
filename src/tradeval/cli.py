"""Command-line interface for comparing trade groups from a roster CSV."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tradeval.config_loader import ColumnProfile
from tradeval.errors import TradevalError
from tradeval.session import TradeSession


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare trade groups using roster TA Scores")
    parser.add_argument("roster", type=Path, help="Path to roster CSV")
    parser.add_argument("--team-a", nargs="*", default=[], help="Player names on side A")
    parser.add_argument("--team-b", nargs="*", default=[], help="Player names on side B")
    parser.add_argument(
        "--team-c",
        nargs="*",
        default=[],
        help="Optional third group checked for best value",
    )
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Column mapping override (e.g., name=Skater, score=FPTS)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument("--output", type=Path, default=None, help="Write the report to this path")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (e.g., INFO, DEBUG)")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    mapping = _parse_mapping(args.column)
    if args.load_profile:
        profile = ColumnProfile.load(args.load_profile)
        mapping = profile.column_mapping | mapping
    if args.save_profile:
        ColumnProfile(mapping).save(args.save_profile)
        print(f"Saved column profile to {args.save_profile}")

    session = TradeSession()
    try:
        roster = session.load_file(args.roster, mapping=mapping or None)
    except (TradevalError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Loaded {len(roster)} players ({roster.report.scored_players} with scores)")

    session.set_selection("A", args.team_a)
    session.set_selection("B", args.team_b)
    session.set_selection("C", args.team_c)
    report = session.report()

    if args.output:
        args.output.write_text(report, encoding="utf-8")
        print(f"Wrote trade report to {args.output}")
    else:
        print(report, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
