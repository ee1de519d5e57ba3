"""Batting-order strategy profiles and slot roles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Tuple


class UnknownStrategyError(ValueError):
    """Raised when a strategy key does not match any configured profile."""


@dataclass(frozen=True)
class StrategyProfile:
    key: str
    label: str
    description: str
    aliases: Tuple[str, ...] = ()


TRADITIONAL = "traditional"
SITUATIONAL = "situational"


_STRATEGIES: Dict[str, StrategyProfile] = {
    TRADITIONAL: StrategyProfile(
        key=TRADITIONAL,
        label="Modern Baseball Consensus",
        description=(
            "A straightforward approach focused on your best hitters. "
            "Easy to understand and explain to players and parents."
        ),
        aliases=("mlb-level",),
    ),
    SITUATIONAL: StrategyProfile(
        key=SITUATIONAL,
        label="Situational Analytics",
        description=(
            "Balances advanced metrics with clutch hitting, weighted by how much "
            "runners-in-scoring-position data each player has. Designed for "
            "lower-level and youth teams."
        ),
        aliases=("jacks-custom-local-league",),
    ),
}

_ALIASES: Dict[str, str] = {
    alias: profile.key for profile in _STRATEGIES.values() for alias in profile.aliases
}


SLOT_ROLES: Mapping[str, Mapping[int, str]] = {
    TRADITIONAL: {
        1: "Leadoff",
        2: "Elite Hitter",
        3: "Remaining Talent",
        4: "Cleanup",
        5: "Protection",
        6: "Fill by OPS",
        7: "Fill by OPS",
        8: "Fill by OPS",
        9: "Fill by OPS",
    },
    SITUATIONAL: {
        1: "Leadoff",
        2: "Table Setter",
        3: "Best Hitter",
        4: "Cleanup",
        5: "Protection",
        6: "Fill by OPS",
        7: "Fill by OPS",
        8: "Fill by OPS",
        9: "Fill by OPS",
    },
}


def iter_strategies() -> Iterable[StrategyProfile]:
    """Return all configured strategy profiles in display order."""

    return _STRATEGIES.values()


def get_strategy(key: str) -> StrategyProfile:
    """Resolve a strategy by key or alias, raising UnknownStrategyError if missing."""

    if not isinstance(key, str):
        raise UnknownStrategyError(f"Strategy must be a string, got {key!r}")

    normalized = key.strip().lower()
    normalized = _ALIASES.get(normalized, normalized)
    if normalized not in _STRATEGIES:
        choices = ", ".join(sorted(_STRATEGIES))
        raise UnknownStrategyError(f"Unknown strategy {key!r}; expected one of: {choices}")
    return _STRATEGIES[normalized]
