"""Greedy batting-order assignment over confidence-adjusted rosters."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Iterable, List, Mapping, Sequence, Tuple

from lineupstar.confidence import ConfidenceLevel, apply_confidence_penalty, confidence_level
from lineupstar.config import SITUATIONAL, SLOT_ROLES, TRADITIONAL, get_strategy
from lineupstar.models import PlayerStats, coerce_number

from .scoring import ScoreFn, on_base, on_base_plus_slugging, score_slot, slugging


logger = logging.getLogger(__name__)

LINEUP_SIZE = 9
MIN_PLATE_APPEARANCES = 4


@dataclass(frozen=True)
class SlotRule:
    slot: int
    score: ScoreFn


@dataclass(frozen=True)
class LineupEntry:
    slot: int
    role: str
    player: PlayerStats
    score: float
    confidence: ConfidenceLevel


@dataclass(frozen=True)
class LineupResult:
    strategy: str
    entries: Tuple[LineupEntry, ...]
    eligible_count: int
    used_fallback: bool = False

    @property
    def players(self) -> List[PlayerStats]:
        return [entry.player for entry in self.entries]


# Rules run in tuple order; the traditional table fills 1, 4, 2, 5, 3 before 6-9.
STRATEGY_SLOT_RULES: Mapping[str, Tuple[SlotRule, ...]] = {
    TRADITIONAL: (
        SlotRule(1, on_base),
        SlotRule(4, slugging),
        SlotRule(2, on_base_plus_slugging),
        SlotRule(5, slugging),
        SlotRule(3, on_base_plus_slugging),
        SlotRule(6, on_base_plus_slugging),
        SlotRule(7, on_base_plus_slugging),
        SlotRule(8, on_base_plus_slugging),
        SlotRule(9, on_base_plus_slugging),
    ),
    SITUATIONAL: tuple(
        SlotRule(slot, partial(score_slot, slot=slot)) for slot in range(1, LINEUP_SIZE + 1)
    ),
}


def _has_batting_stats(player: PlayerStats) -> bool:
    return player.avg > 0 or player.obp > 0 or player.slg > 0


def select_eligible(roster: Sequence[PlayerStats]) -> tuple[List[PlayerStats], bool]:
    """Return the players eligible for ranking and whether the PA filter fell back.

    Players need some batting stats to be considered. Among those, players
    under the minimum PA are dropped unless that would leave nobody.
    """

    with_stats = [player for player in roster if _has_batting_stats(player)]
    if not with_stats:
        return [], False

    qualified = [player for player in with_stats if player.pa >= MIN_PLATE_APPEARANCES]
    if qualified:
        return qualified, False

    logger.info(
        "No player has %s+ plate appearances; ranking all %s players with stats",
        MIN_PLATE_APPEARANCES,
        len(with_stats),
    )
    return with_stats, True


def _working_copy(player: PlayerStats) -> PlayerStats:
    adjusted = apply_confidence_penalty(player)
    return adjusted.model_copy(update={"ops": coerce_number(adjusted.obp + adjusted.slg)})


def _pick_best(
    pool: Tuple[PlayerStats, ...],
    score: ScoreFn,
) -> tuple[PlayerStats, float, Tuple[PlayerStats, ...]]:
    """Arg-max over ``pool``; the earliest player wins ties."""

    best_index = 0
    best_score = coerce_number(score(pool[0]))
    for index in range(1, len(pool)):
        value = coerce_number(score(pool[index]))
        if value > best_score:
            best_index = index
            best_score = value
    remaining = pool[:best_index] + pool[best_index + 1 :]
    return pool[best_index], best_score, remaining


def assign_slots(
    working: Iterable[PlayerStats],
    rules: Sequence[SlotRule],
) -> List[tuple[int, PlayerStats, float]]:
    """Fill slots in rule order, returning ``(slot, player, score)`` sorted by slot."""

    remaining = tuple(working)
    picks: List[tuple[int, PlayerStats, float]] = []
    for rule in rules:
        if not remaining:
            break
        selected, score, remaining = _pick_best(remaining, rule.score)
        logger.debug("Slot %s -> %s (score %.4f)", rule.slot, selected.id, score)
        picks.append((rule.slot, selected, score))
    picks.sort(key=lambda pick: pick[0])
    return picks


def rank_lineup(roster: Iterable[PlayerStats], strategy: str) -> LineupResult:
    """Build a batting order with per-slot details.

    Raises UnknownStrategyError for strategies that are not configured. The
    returned entries always reference the caller's original records, never the
    discounted working copies.
    """

    profile = get_strategy(strategy)
    originals = list(roster)

    eligible, used_fallback = select_eligible(originals)
    if not eligible:
        return LineupResult(strategy=profile.key, entries=(), eligible_count=0)

    working = [_working_copy(player) for player in eligible]
    picks = assign_slots(working, STRATEGY_SLOT_RULES[profile.key])

    by_id: dict[str, PlayerStats] = {}
    for player in originals:
        by_id.setdefault(player.id, player)

    roles = SLOT_ROLES[profile.key]
    entries: List[LineupEntry] = []
    for slot, selected, score in picks:
        original = by_id.get(selected.id)
        if original is None:
            logger.warning("Dropping slot %s: no roster record for player %s", slot, selected.id)
            continue
        entries.append(
            LineupEntry(
                slot=slot,
                role=roles[slot],
                player=original,
                score=score,
                confidence=confidence_level(original.pa),
            )
        )

    return LineupResult(
        strategy=profile.key,
        entries=tuple(entries),
        eligible_count=len(eligible),
        used_fallback=used_fallback,
    )


def generate_lineup(roster: Iterable[PlayerStats], strategy: str) -> List[PlayerStats]:
    """Return up to nine original player records in batting order."""

    return rank_lineup(roster, strategy).players
