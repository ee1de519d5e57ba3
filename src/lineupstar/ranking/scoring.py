"""Slot scoring functions used by the batting-order strategies.

All functions expect penalty-adjusted players whose ``ops`` has already been
recomputed as ``obp + slg``.
"""

from __future__ import annotations

from typing import Callable, Mapping

from lineupstar.models import PlayerStats


ScoreFn = Callable[[PlayerStats], float]


def on_base(player: PlayerStats) -> float:
    return player.obp


def slugging(player: PlayerStats) -> float:
    return player.slg


def on_base_plus_slugging(player: PlayerStats) -> float:
    return player.ops


def situational_confidence(player: PlayerStats) -> float:
    """Weight given to RISP stats based on how many RISP at-bats back them."""

    if player.ab_risp >= 5:
        return 1.0
    if player.ab_risp >= 3:
        return 0.7
    return 0.3


def has_situational_data(player: PlayerStats) -> bool:
    return player.ab_risp >= 2


def leadoff_score(player: PlayerStats) -> float:
    return (
        0.4 * player.obp
        + 0.3 * player.sb_percent
        + 0.2 * player.contact_percent
        + 0.1 * player.avg
    )


def table_setter_score(player: PlayerStats) -> float:
    if has_situational_data(player):
        sc = situational_confidence(player)
        return (
            0.4 * player.contact_percent
            + 0.3 * player.ba_risp * sc
            + 0.2 * player.qab_percent
            + 0.1 * player.avg * (1 - sc)
        )
    return 0.5 * player.contact_percent + 0.3 * player.avg + 0.2 * player.qab_percent


def best_hitter_score(player: PlayerStats) -> float:
    if has_situational_data(player):
        sc = situational_confidence(player)
        return (
            0.3 * player.ops
            + 0.2 * player.slg
            + 0.25 * player.ba_risp * sc
            + 0.15 * player.qab_percent
            + 0.1 * player.avg * (1 - sc)
        )
    return 0.5 * player.ops + 0.3 * player.slg + 0.2 * player.qab_percent


def cleanup_score(player: PlayerStats) -> float:
    if has_situational_data(player):
        sc = situational_confidence(player)
        return (
            0.45 * player.ba_risp * sc
            + 0.35 * player.slg
            + 0.20 * player.two_out_rbi_rate * sc
            + 0.15 * player.ops * (1 - sc)
        )
    return 0.50 * player.slg + 0.30 * player.ops + 0.20 * player.avg


def protection_score(player: PlayerStats) -> float:
    if has_situational_data(player):
        sc = situational_confidence(player)
        return (
            0.35 * player.slg
            + 0.35 * player.ba_risp * sc
            + 0.20 * player.two_out_rbi_rate * sc
            + 0.10 * player.ops * (1 - sc)
        )
    return 0.50 * player.slg + 0.30 * player.ops + 0.20 * player.avg


SITUATIONAL_SLOT_SCORES: Mapping[int, ScoreFn] = {
    1: leadoff_score,
    2: table_setter_score,
    3: best_hitter_score,
    4: cleanup_score,
    5: protection_score,
}


def score_slot(player: PlayerStats, slot: int) -> float:
    """Situational evaluation of ``player`` for batting slot ``slot`` (1-9)."""

    if not 1 <= slot <= 9:
        raise ValueError(f"slot must be between 1 and 9, got {slot}")
    scorer = SITUATIONAL_SLOT_SCORES.get(slot, on_base_plus_slugging)
    return scorer(player)
