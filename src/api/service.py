"""Service layer — orchestrates scraping, scoring and storage for the API routes."""

from __future__ import annotations

import asyncio
import logging
import uuid
from datetime import datetime, timedelta, timezone

from src.api.schemas import ScoreRecord
from src.cache.redis import ScoreCache
from src.config import Settings
from src.scoring import ScoringError, compute_de_score
from src.scrape import PageLoader, ScrapeError

logger = logging.getLogger(__name__)


def _generate_score_id() -> str:
    return uuid.uuid4().hex[:12]


class ScoreService:
    """Computes DE Scores for live URLs.

    The page loader and result store are injected so the service can run
    against canned content in tests.
    """

    def __init__(self, loader: PageLoader, cache: ScoreCache, settings: Settings) -> None:
        self._loader = loader
        self._cache = cache
        self._settings = settings

    async def score(self, url: str) -> ScoreRecord:
        """Scrape *url*, score it and store the record.

        Raises ``ScrapeError`` or ``InsufficientContentError`` unchanged.
        """
        logger.info("de score requested", extra={"url": url})
        page = await self._loader.load(url)
        result = compute_de_score(
            page.content, url, min_content_length=self._settings.min_content_length
        )

        now = datetime.now(timezone.utc)
        ttl = self._settings.result_ttl_seconds
        record = ScoreRecord(
            score_id=_generate_score_id(),
            url=url,
            page_title=page.title,
            page_description=page.description,
            result=result,
            created_at=now,
            expires_at=now + timedelta(seconds=ttl),
        )
        await self._cache.set(record, ttl=ttl)

        logger.info(
            "de score completed",
            extra={
                "url": url,
                "score_id": record.score_id,
                "total_score": result.total_score,
                "brand_score": result.brand_score,
                "operations_score": result.operations_score,
                "paid_score": result.paid_score,
            },
        )
        return record

    async def score_many(
        self, urls: list[str]
    ) -> list[ScoreRecord | ScoringError | ScrapeError]:
        """Score several URLs concurrently, preserving input order.

        Per-URL scrape and scoring failures are returned in place of the
        record; any other exception propagates.
        """
        logger.info("batch de score requested", extra={"url_count": len(urls)})
        outcomes = await asyncio.gather(
            *(self.score(url) for url in urls), return_exceptions=True
        )

        results: list[ScoreRecord | ScoringError | ScrapeError] = []
        for url, outcome in zip(urls, outcomes):
            if isinstance(outcome, (ScoringError, ScrapeError)):
                logger.info("batch item failed", extra={"url": url, "error": str(outcome)})
                results.append(outcome)
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                results.append(outcome)
        return results

    async def get(self, score_id: str) -> ScoreRecord | None:
        """Retrieve a stored score record by ``score_id``."""
        return await self._cache.get(score_id)
