"""Sample-size confidence bands and the stat discounts they imply."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from lineupstar.models import PlayerStats, coerce_number


class ConfidenceLevel(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    EXCLUDED = "Excluded"


@dataclass(frozen=True)
class ConfidenceInfo:
    level: ConfidenceLevel
    label: str
    penalty: float


# (minimum pa, info), checked top-down
_BASIC_BANDS: Tuple[Tuple[float, ConfidenceInfo], ...] = (
    (15, ConfidenceInfo(ConfidenceLevel.HIGH, "High Confidence", 0.0)),
    (8, ConfidenceInfo(ConfidenceLevel.MEDIUM, "Medium Confidence", 0.15)),
    (4, ConfidenceInfo(ConfidenceLevel.LOW, "Low Confidence", 0.30)),
)
_EXCLUDED = ConfidenceInfo(ConfidenceLevel.EXCLUDED, "Excluded", 1.0)

# (minimum ab_risp, penalty)
_SITUATIONAL_BANDS: Tuple[Tuple[float, float], ...] = (
    (5, 0.0),
    (3, 0.10),
    (1, 0.25),
)
_SITUATIONAL_FLOOR = 0.50

BASIC_PENALTY_FIELDS: Tuple[str, ...] = (
    "avg",
    "obp",
    "slg",
    "ops",
    "sb_percent",
    "contact_percent",
    "qab_percent",
    "xbh",
    "hr",
    "tb",
    "bb_k",
    "rbi",
    "hr_rate",
    "xbh_rate",
)

SITUATIONAL_PENALTY_FIELDS: Tuple[str, ...] = (
    "ba_risp",
    "two_out_rbi",
    "two_out_rbi_rate",
)


def confidence_info(pa: float) -> ConfidenceInfo:
    """Return the confidence band for a plate-appearance count."""

    value = coerce_number(pa)
    for minimum, info in _BASIC_BANDS:
        if value >= minimum:
            return info
    return _EXCLUDED


def confidence_level(pa: float) -> ConfidenceLevel:
    return confidence_info(pa).level


def basic_penalty(pa: float) -> float:
    """Discount for rate and counting stats; anything under 4 PA is excluded (1.0)."""

    return confidence_info(pa).penalty


def situational_penalty(ab_risp: float) -> float:
    """Discount for RISP-derived stats; no RISP at-bats still keeps half the value."""

    value = coerce_number(ab_risp)
    for minimum, penalty in _SITUATIONAL_BANDS:
        if value >= minimum:
            return penalty
    return _SITUATIONAL_FLOOR


def apply_confidence_penalty(player: PlayerStats) -> PlayerStats:
    """Return a discounted copy of ``player``; the input record is left untouched.

    Basic stats scale by ``1 - basic_penalty(pa)`` and RISP stats by
    ``1 - situational_penalty(ab_risp)``. Identity and sample-size counters
    pass through unchanged.
    """

    basic_factor = 1.0 - basic_penalty(player.pa)
    situational_factor = 1.0 - situational_penalty(player.ab_risp)

    update = {
        field: coerce_number(getattr(player, field)) * basic_factor
        for field in BASIC_PENALTY_FIELDS
    }
    update.update(
        {
            field: coerce_number(getattr(player, field)) * situational_factor
            for field in SITUATIONAL_PENALTY_FIELDS
        }
    )
    return player.model_copy(update=update)


def summarize_confidence(roster: Iterable[PlayerStats]) -> dict[ConfidenceLevel, int]:
    """Count roster players per confidence level (every level is present)."""

    summary = {level: 0 for level in ConfidenceLevel}
    for player in roster:
        summary[confidence_level(player.pa)] += 1
    return summary
