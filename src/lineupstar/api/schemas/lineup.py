from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from lineupstar.models import PlayerStats


class RosterRequest(BaseModel):
    players: List[PlayerStats] = Field(default_factory=list)


class LineupRequest(RosterRequest):
    strategy: str | None = None


class LineupEntryResponse(BaseModel):
    slot: int = Field(..., ge=1, le=9)
    role: str
    score: float
    confidence: str
    player: PlayerStats


class LineupResponse(BaseModel):
    strategy: str
    eligible_count: int
    used_fallback: bool
    entries: List[LineupEntryResponse]
    players: List[PlayerStats]


class StrategyResponse(BaseModel):
    key: str
    label: str
    description: str
    aliases: List[str]
