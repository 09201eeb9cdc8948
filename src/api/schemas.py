"""Request/response Pydantic models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, HttpUrl
from pydantic.alias_generators import to_camel

from src.scoring.models import DEScoreResult


class ScoreRequest(BaseModel):
    domain: HttpUrl


class BatchScoreRequest(BaseModel):
    domains: list[HttpUrl] = Field(min_length=1)


class ScoreRecord(BaseModel):
    """A finished DE Score report as stored and served by the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    score_id: str
    url: str
    page_title: str = ""
    page_description: str = ""
    result: DEScoreResult
    created_at: datetime
    expires_at: datetime | None = None


class ScoreResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: Literal[True] = True
    score_id: str
    data: DEScoreResult


class ErrorResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: Literal[False] = False
    error: str
    domain: str | None = None


class BatchScoreResponse(BaseModel):
    success: Literal[True] = True
    data: list[ScoreResponse | ErrorResponse]
