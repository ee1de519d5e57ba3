"""REST API for the batting-order engine."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from lineupstar.api.schemas import (
    ConfidenceReportResponse,
    LineupEntryResponse,
    LineupRequest,
    LineupResponse,
    PlayerConfidenceResponse,
    RosterRequest,
    StrategyResponse,
)
from lineupstar.confidence import confidence_info, situational_penalty, summarize_confidence
from lineupstar.config import UnknownStrategyError, default_strategy, iter_strategies
from lineupstar.export import export_lineup_to_csv
from lineupstar.ranking import LineupResult, rank_lineup


logger = logging.getLogger("uvicorn.error")


def _rank_or_400(request: LineupRequest) -> LineupResult:
    strategy = request.strategy if request.strategy is not None else default_strategy()
    try:
        result = rank_lineup(request.players, strategy)
    except UnknownStrategyError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    logger.info(
        "Ranked %s/%s players with %s strategy",
        len(result.entries),
        len(request.players),
        result.strategy,
    )
    return result


def _result_to_response(result: LineupResult) -> LineupResponse:
    return LineupResponse(
        strategy=result.strategy,
        eligible_count=result.eligible_count,
        used_fallback=result.used_fallback,
        entries=[
            LineupEntryResponse(
                slot=entry.slot,
                role=entry.role,
                score=entry.score,
                confidence=entry.confidence.value,
                player=entry.player,
            )
            for entry in result.entries
        ],
        players=result.players,
    )


def create_app() -> FastAPI:
    app = FastAPI(title="lineupstar batting order")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/strategies", response_model=list[StrategyResponse])
    async def strategies() -> list[StrategyResponse]:
        return [
            StrategyResponse(
                key=profile.key,
                label=profile.label,
                description=profile.description,
                aliases=list(profile.aliases),
            )
            for profile in iter_strategies()
        ]

    @app.post("/confidence", response_model=ConfidenceReportResponse)
    async def confidence(request: RosterRequest) -> ConfidenceReportResponse:
        players = []
        for player in request.players:
            info = confidence_info(player.pa)
            players.append(
                PlayerConfidenceResponse(
                    id=player.id,
                    name=player.name,
                    level=info.level.value,
                    label=info.label,
                    basic_penalty=info.penalty,
                    situational_penalty=situational_penalty(player.ab_risp),
                )
            )
        summary = {
            level.value: count for level, count in summarize_confidence(request.players).items()
        }
        return ConfidenceReportResponse(players=players, summary=summary)

    @app.post("/lineup", response_model=LineupResponse)
    async def lineup(request: LineupRequest) -> LineupResponse:
        return _result_to_response(_rank_or_400(request))

    @app.post("/lineup.csv")
    async def lineup_csv(request: LineupRequest) -> Response:
        result = _rank_or_400(request)
        return Response(
            content=export_lineup_to_csv(result),
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="lineup-{result.strategy}.csv"'},
        )

    return app
