"""CSV export for generated batting orders."""

from __future__ import annotations

import csv
from io import StringIO

from lineupstar.ranking import LineupResult


EXPORT_HEADERS: tuple[str, ...] = (
    "slot",
    "role",
    "player_id",
    "name",
    "confidence",
    "pa",
    "avg",
    "obp",
    "slg",
    "ops",
    "score",
)


def _stat(value: float) -> str:
    return f"{value:.3f}"


def export_lineup_to_csv(result: LineupResult) -> str:
    """Convert a ranked lineup to CSV text, one row per batting slot."""

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(EXPORT_HEADERS)

    for entry in result.entries:
        player = entry.player
        writer.writerow([
            entry.slot,
            entry.role,
            player.id,
            player.name,
            entry.confidence.value,
            f"{player.pa:g}",
            _stat(player.avg),
            _stat(player.obp),
            _stat(player.slg),
            _stat(player.ops),
            f"{entry.score:.4f}",
        ])

    return buffer.getvalue()


__all__ = ["EXPORT_HEADERS", "export_lineup_to_csv"]
