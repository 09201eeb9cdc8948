"""Redis result store for finished DE Score reports."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

import redis.asyncio as redis
from pydantic import ValidationError
from redis.backoff import ExponentialBackoff
from redis.retry import Retry

from src.api.schemas import ScoreRecord

logger = logging.getLogger(__name__)

KEY_PREFIX = "de-score:"


class ScoreCache:
    """Async Redis store for score records, keyed by ``score_id``.

    Failures are logged and reported as a miss (``None``) or ``False`` so a
    Redis outage or an unreadable record never fails a scoring request.
    """

    def __init__(self, client: redis.Redis, default_ttl: int = 3600) -> None:
        self._client = client
        self._default_ttl = default_ttl

    async def get(self, score_id: str) -> ScoreRecord | None:
        try:
            raw = await self._client.get(f"{KEY_PREFIX}{score_id}")
        except redis.RedisError:
            logger.warning("score lookup failed", extra={"score_id": score_id}, exc_info=True)
            return None
        if raw is None:
            logger.debug("score not found", extra={"score_id": score_id})
            return None
        try:
            return ScoreRecord.model_validate_json(raw)
        except ValidationError:
            logger.warning("stored score unreadable", extra={"score_id": score_id}, exc_info=True)
            return None

    async def set(self, record: ScoreRecord, ttl: int | None = None) -> bool:
        effective_ttl = ttl if ttl is not None else self._default_ttl
        try:
            await self._client.set(
                f"{KEY_PREFIX}{record.score_id}",
                record.model_dump_json(),
                ex=effective_ttl,
            )
        except redis.RedisError:
            logger.warning(
                "score store failed", extra={"score_id": record.score_id}, exc_info=True
            )
            return False
        logger.debug("score stored", extra={"score_id": record.score_id, "ttl": effective_ttl})
        return True


def _display_url(redis_url: str) -> str:
    """``host:port/db`` of *redis_url*, without scheme or credentials."""
    parsed = urlparse(redis_url)
    return f"{parsed.hostname or ''}:{parsed.port or 6379}{parsed.path or '/0'}"


async def create_redis_client(redis_url: str, timeout: float = 5.0) -> redis.Redis:
    """Build the result-store client; connections are opened lazily."""
    logger.info(
        "connecting to score store",
        extra={"redis_target": _display_url(redis_url), "timeout": timeout},
    )
    return redis.from_url(
        redis_url,
        decode_responses=True,
        socket_connect_timeout=timeout,
        socket_timeout=timeout,
        health_check_interval=30,
        retry=Retry(ExponentialBackoff(), retries=3),
        retry_on_error=[redis.ConnectionError, redis.TimeoutError],
    )
