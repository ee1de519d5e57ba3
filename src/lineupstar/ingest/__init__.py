"""Input adapters that normalize raw roster data."""

from .roster import RosterLoadReport, load_roster, rows_to_players

__all__ = [
    "RosterLoadReport",
    "load_roster",
    "rows_to_players",
]
