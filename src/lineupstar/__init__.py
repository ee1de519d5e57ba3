"""Batting-order ranking engine for amateur baseball and softball rosters."""

from lineupstar.confidence import apply_confidence_penalty
from lineupstar.models import PlayerStats
from lineupstar.ranking import generate_lineup, rank_lineup

__all__ = ["PlayerStats", "apply_confidence_penalty", "generate_lineup", "rank_lineup"]
