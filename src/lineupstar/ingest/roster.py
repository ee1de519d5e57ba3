"""Helpers to load JSON rosters and emit canonical player records."""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Tuple

from pydantic import ValidationError

from lineupstar.models import PlayerStats


logger = logging.getLogger(__name__)


@dataclass
class RosterLoadReport:
    total_rows: int = 0
    loaded_players: int = 0
    skipped_rows: List[str] = field(default_factory=list)
    duplicate_ids: List[str] = field(default_factory=list)


def _describe_row(index: int, row: Any) -> str:
    if isinstance(row, dict):
        label = row.get("name") or row.get("id")
        if label:
            return f"row {index}: {label}"
    return f"row {index}"


def rows_to_players(rows: Iterable[Any]) -> Tuple[List[PlayerStats], RosterLoadReport]:
    """Validate raw player rows, skipping (and reporting) rows that cannot be used."""

    report = RosterLoadReport()
    players: List[PlayerStats] = []

    for index, row in enumerate(rows, start=1):
        report.total_rows += 1
        if not isinstance(row, dict):
            logger.warning("Skipping %s: expected an object, got %s", _describe_row(index, row), type(row).__name__)
            report.skipped_rows.append(_describe_row(index, row))
            continue
        try:
            players.append(PlayerStats.model_validate(row))
        except ValidationError as exc:
            logger.warning("Skipping %s: %s", _describe_row(index, row), exc.errors()[0]["msg"])
            report.skipped_rows.append(_describe_row(index, row))

    counts = Counter(player.id for player in players)
    report.duplicate_ids = [player_id for player_id, count in counts.items() if count > 1]
    if report.duplicate_ids:
        logger.warning("Roster contains duplicate player ids: %s", ", ".join(report.duplicate_ids))

    report.loaded_players = len(players)
    return players, report


def load_roster(path: Path) -> Tuple[List[PlayerStats], RosterLoadReport]:
    """Load a roster JSON file: either a list of players or ``{"players": [...]}``."""

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Roster file {path} is not valid JSON: {exc}") from exc

    if isinstance(data, dict):
        data = data.get("players")
    if not isinstance(data, list):
        raise ValueError(f"Roster file {path} must contain a list of players or a 'players' list")

    return rows_to_players(data)
