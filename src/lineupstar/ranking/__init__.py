"""Batting-order ranking built on confidence-adjusted player stats."""

from .scoring import has_situational_data, score_slot, situational_confidence
from .service import (
    LINEUP_SIZE,
    LineupEntry,
    LineupResult,
    SlotRule,
    generate_lineup,
    rank_lineup,
    select_eligible,
)

__all__ = [
    "LINEUP_SIZE",
    "LineupEntry",
    "LineupResult",
    "SlotRule",
    "generate_lineup",
    "has_situational_data",
    "rank_lineup",
    "score_slot",
    "select_eligible",
    "situational_confidence",
]
