"""Configuration helpers for strategies and runtime defaults."""

from .settings import default_strategy, log_level
from .strategies import (
    SITUATIONAL,
    SLOT_ROLES,
    TRADITIONAL,
    StrategyProfile,
    UnknownStrategyError,
    get_strategy,
    iter_strategies,
)

__all__ = [
    "SITUATIONAL",
    "SLOT_ROLES",
    "TRADITIONAL",
    "StrategyProfile",
    "UnknownStrategyError",
    "default_strategy",
    "get_strategy",
    "iter_strategies",
    "log_level",
]
