"""Data models shared by the ranking engine and its adapters."""

from .player import NUMERIC_FIELDS, PlayerStats, coerce_number

__all__ = ["NUMERIC_FIELDS", "PlayerStats", "coerce_number"]
