from __future__ import annotations

from pydantic import BaseModel


class PlayerConfidenceResponse(BaseModel):
    id: str
    name: str
    level: str
    label: str
    basic_penalty: float
    situational_penalty: float


class ConfidenceReportResponse(BaseModel):
    players: list[PlayerConfidenceResponse]
    summary: dict[str, int]
