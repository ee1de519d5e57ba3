"""Pydantic models for API I/O."""

from .confidence import ConfidenceReportResponse, PlayerConfidenceResponse
from .lineup import (
    LineupEntryResponse,
    LineupRequest,
    LineupResponse,
    RosterRequest,
    StrategyResponse,
)

__all__ = [
    "ConfidenceReportResponse",
    "PlayerConfidenceResponse",
    "LineupEntryResponse",
    "LineupRequest",
    "LineupResponse",
    "RosterRequest",
    "StrategyResponse",
]
