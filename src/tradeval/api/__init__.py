"""REST API for the trade analyzer."""

from __future__ import annotations

import json
import logging

from fastapi import FastAPI, File, Form, HTTPException, Query, UploadFile
from fastapi.responses import Response

from tradeval.api.schemas import (
    GroupAggregateResponse,
    PlayerListResponse,
    PlayerResponse,
    RosterSummaryResponse,
    TradeRequest,
    TradeResponse,
    VerdictResponse,
)
from tradeval.config import AnalyzerSettings
from tradeval.errors import FileTypeError, FormatError, NoRosterError, SizeError, ValidationError
from tradeval.ingest import Roster
from tradeval.models import PlayerRecord
from tradeval.session import TradeSession
from tradeval.trade import GroupAggregate, TradeEvaluation


logger = logging.getLogger(__name__)


def _player_to_response(player: PlayerRecord) -> PlayerResponse:
    return PlayerResponse(
        name=player.name,
        position=player.position,
        score=player.score,
        salary=player.salary,
        age=player.age,
        relative_value=player.relative_value,
        stats=dict(player.stats),
    )


def _roster_summary(roster: Roster, settings: AnalyzerSettings) -> RosterSummaryResponse:
    return RosterSummaryResponse(
        players=roster.report.players,
        scored_players=roster.report.scored_players,
        skipped_rows=roster.report.skipped_rows,
        mean=roster.mean,
        std_dev=roster.std_dev,
        columns=list(roster.columns),
        tracked_stats=list(settings.tracked_keys),
    )


def _group_to_response(group: GroupAggregate) -> GroupAggregateResponse:
    return GroupAggregateResponse(
        label=group.label,
        count=group.count,
        players=[_player_to_response(player) for player in group.players],
        total_score=group.total_score,
        total_salary=group.total_salary,
        total_age=group.total_age,
        average_age=round(group.average_age, 1),
        total_relative_value=group.total_relative_value,
        stat_totals=dict(group.stat_totals),
        position_counts=dict(group.position_counts),
    )


def _evaluation_to_response(evaluation: TradeEvaluation) -> TradeResponse:
    verdict = evaluation.verdict
    return TradeResponse(
        teams=[_group_to_response(group) for group in evaluation.groups],
        verdict=VerdictResponse(
            winner=verdict.winner,
            message=verdict.message,
            score_impact=verdict.score_impact,
            relative_gap=verdict.relative_gap,
            best_value=verdict.best_value,
        ),
    )


def _parse_mapping(mapping_str: str | None) -> dict[str, str]:
    if not mapping_str:
        return {}
    try:
        mapping = json.loads(mapping_str)
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid mapping JSON: {exc}") from exc
    if not isinstance(mapping, dict):
        raise HTTPException(status_code=400, detail="Column mapping must be a JSON object")
    return {str(key): str(value) for key, value in mapping.items()}


def create_app(settings: AnalyzerSettings | None = None) -> FastAPI:
    app = FastAPI(title="tradeval analyzer")
    session = TradeSession(settings)
    app.state.session = session

    def _apply_request(payload: TradeRequest) -> TradeEvaluation:
        session.set_selection("A", payload.team_a)
        session.set_selection("B", payload.team_b)
        session.set_selection("C", payload.team_c or [])
        try:
            return session.evaluate()
        except NoRosterError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/roster", response_model=RosterSummaryResponse)
    async def upload_roster(
        roster: UploadFile = File(...),
        column_mapping: str | None = Form(None),
    ) -> RosterSummaryResponse:
        contents = await roster.read()
        mapping = _parse_mapping(column_mapping) or None
        try:
            loaded = session.load_upload(roster.filename, contents, mapping=mapping)
        except SizeError as exc:
            raise HTTPException(status_code=413, detail=str(exc)) from exc
        except FileTypeError as exc:
            raise HTTPException(status_code=415, detail=str(exc)) from exc
        except (FormatError, ValidationError) as exc:
            logger.info("Rejected roster upload %s: %s", roster.filename, exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _roster_summary(loaded, session.settings)

    @app.get("/roster", response_model=RosterSummaryResponse)
    async def get_roster() -> RosterSummaryResponse:
        if session.roster is None:
            raise HTTPException(status_code=404, detail="No roster loaded")
        return _roster_summary(session.roster, session.settings)

    @app.delete("/roster")
    async def reset_roster() -> dict[str, str]:
        session.reset()
        return {"status": "reset"}

    @app.get("/players", response_model=PlayerListResponse)
    async def list_players(q: str | None = Query(None)) -> PlayerListResponse:
        return PlayerListResponse(players=session.player_names(q))

    @app.post("/trade", response_model=TradeResponse)
    async def evaluate_trade(payload: TradeRequest) -> TradeResponse:
        return _evaluation_to_response(_apply_request(payload))

    @app.post("/trade/report")
    async def export_report(payload: TradeRequest) -> Response:
        _apply_request(payload)
        return Response(
            content=session.report(),
            media_type="text/plain",
            headers={"Content-Disposition": "attachment; filename=trade_report.txt"},
        )

    return app
