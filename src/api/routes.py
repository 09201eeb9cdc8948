"""POST /de-score, POST /de-score/batch, GET /de-score/{score_id} endpoint handlers."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.api.schemas import (
    BatchScoreRequest,
    BatchScoreResponse,
    ErrorResponse,
    ScoreRecord,
    ScoreRequest,
    ScoreResponse,
)
from src.api.service import ScoreService
from src.config import Settings

router = APIRouter()


def _get_service(request: Request) -> ScoreService:
    return request.app.state.service


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings


def error_response(status_code: int, error: str) -> JSONResponse:
    """Build the ``{"success": false, "error": ...}`` envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error).model_dump(by_alias=True, exclude_none=True),
    )


@router.post("/de-score", response_model=ScoreResponse)
async def create_score(
    body: ScoreRequest,
    service: ScoreService = Depends(_get_service),
):
    record = await service.score(str(body.domain))
    return ScoreResponse(score_id=record.score_id, data=record.result)


@router.post("/de-score/batch", response_model=BatchScoreResponse, response_model_exclude_none=True)
async def create_scores(
    body: BatchScoreRequest,
    service: ScoreService = Depends(_get_service),
    settings: Settings = Depends(_get_settings),
):
    if len(body.domains) > settings.max_batch_size:
        return error_response(
            400, f"Too many domains: at most {settings.max_batch_size} per request"
        )

    urls = [str(domain) for domain in body.domains]
    outcomes = await service.score_many(urls)

    items: list[ScoreResponse | ErrorResponse] = []
    for url, outcome in zip(urls, outcomes):
        if isinstance(outcome, ScoreRecord):
            items.append(ScoreResponse(score_id=outcome.score_id, data=outcome.result))
        else:
            items.append(ErrorResponse(error=str(outcome), domain=url))
    return BatchScoreResponse(data=items)


@router.get("/de-score/{score_id}", response_model=ScoreRecord)
async def get_score(
    score_id: str,
    service: ScoreService = Depends(_get_service),
):
    record = await service.get(score_id)
    if record is None:
        return error_response(404, "Score not found or expired")
    return record
