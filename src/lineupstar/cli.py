"""Command-line interface for generating a batting order from a roster file."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

from lineupstar.confidence import summarize_confidence
from lineupstar.config import default_strategy, iter_strategies, log_level
from lineupstar.export import export_lineup_to_csv
from lineupstar.ingest import load_roster
from lineupstar.ranking import rank_lineup


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a batting order from player stats")
    parser.add_argument("roster", type=Path, nargs="?", help="Path to roster JSON")
    parser.add_argument(
        "--strategy",
        default=None,
        help="Strategy key (traditional or situational); defaults to LINEUPSTAR_DEFAULT_STRATEGY",
    )
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write lineup CSV")
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Optional path to write load and confidence summary JSON",
    )
    parser.add_argument(
        "--list-strategies",
        action="store_true",
        help="Print available strategies and exit",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=log_level(), format="%(levelname)s %(name)s: %(message)s")

    if args.list_strategies:
        for profile in iter_strategies():
            print(f"{profile.key}: {profile.label} - {profile.description}")
        return 0

    if args.roster is None:
        raise SystemExit("A roster JSON path is required")

    strategy = args.strategy if args.strategy is not None else default_strategy()

    try:
        players, report = load_roster(args.roster)
        result = rank_lineup(players, strategy)
    except (ValueError, OSError) as exc:
        raise SystemExit(str(exc)) from exc

    print(f"Loaded {report.loaded_players}/{report.total_rows} players")
    if report.skipped_rows:
        preview = ", ".join(report.skipped_rows[:5])
        more = len(report.skipped_rows) - 5
        suffix = f", +{more} more" if more > 0 else ""
        print(f"Skipped rows: {preview}{suffix}")

    if not result.entries:
        print("No lineup generated: no players with batting stats")
    else:
        print(f"Batting order ({result.strategy}):")
        for entry in result.entries:
            print(
                f"{entry.slot}. {entry.player.name or entry.player.id} "
                f"[{entry.role}] {entry.confidence.value}"
            )
        if result.used_fallback:
            print("Note: every player is under 4 plate appearances; stats are heavily discounted")

    if args.output:
        try:
            args.output.write_text(export_lineup_to_csv(result), encoding="utf-8")
        except OSError as exc:
            raise SystemExit(f"Could not write lineup to {args.output}: {exc}") from exc
        print(f"Wrote lineup to {args.output}")

    if args.report:
        report_payload = {
            "strategy": result.strategy,
            "total_rows": report.total_rows,
            "loaded_players": report.loaded_players,
            "skipped_rows": report.skipped_rows,
            "duplicate_ids": report.duplicate_ids,
            "eligible_players": result.eligible_count,
            "used_fallback": result.used_fallback,
            "confidence": {
                level.value: count for level, count in summarize_confidence(players).items()
            },
            "lineup": [entry.player.id for entry in result.entries],
        }
        try:
            args.report.write_text(json.dumps(report_payload, indent=2), encoding="utf-8")
        except OSError as exc:
            raise SystemExit(f"Could not write report to {args.report}: {exc}") from exc
        print(f"Wrote report to {args.report}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
