"""Environment-driven defaults for the CLI and API."""

from __future__ import annotations

import logging
import os

from .strategies import TRADITIONAL, UnknownStrategyError, get_strategy


logger = logging.getLogger(__name__)

_DEFAULT_STRATEGY_ENV = "LINEUPSTAR_DEFAULT_STRATEGY"
_LOG_LEVEL_ENV = "LINEUPSTAR_LOG_LEVEL"

_LOG_LEVEL_DEFAULT = "INFO"


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def default_strategy() -> str:
    raw = _env_str(_DEFAULT_STRATEGY_ENV, TRADITIONAL)
    try:
        return get_strategy(raw).key
    except UnknownStrategyError:
        logger.warning("Invalid strategy for %s: %s; using default %s", _DEFAULT_STRATEGY_ENV, raw, TRADITIONAL)
        return TRADITIONAL


def log_level() -> int:
    raw = _env_str(_LOG_LEVEL_ENV, _LOG_LEVEL_DEFAULT).upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        logger.warning("Invalid log level for %s: %s; using default %s", _LOG_LEVEL_ENV, raw, _LOG_LEVEL_DEFAULT)
        return logging.INFO
    return level
