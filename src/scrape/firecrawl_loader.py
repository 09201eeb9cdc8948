"""Firecrawl page loader implementation."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from firecrawl import AsyncFirecrawl

from .models import ScrapedPage, ScrapeError

logger = logging.getLogger(__name__)


class PageLoader(Protocol):
    """Protocol for page loaders."""

    async def load(self, url: str) -> ScrapedPage: ...


def _read_metadata(response: Any) -> dict[str, str]:
    metadata: Any = {}
    if isinstance(response, dict):
        metadata = response.get("metadata") or {}
    elif hasattr(response, "metadata"):
        metadata = response.metadata or {}

    if isinstance(metadata, dict):
        return {
            "title": metadata.get("title") or "",
            "description": metadata.get("description") or "",
        }
    # Newer SDKs return a metadata object
    return {
        "title": getattr(metadata, "title", None) or "",
        "description": getattr(metadata, "description", None) or "",
    }


class FirecrawlLoader:
    """Loads pages as Markdown using the Firecrawl API."""

    def __init__(
        self,
        api_key: str,
        api_url: str = "",
        timeout_ms: int = 30000,
        only_main_content: bool = True,
    ) -> None:
        kwargs: dict = {"api_key": api_key}
        if api_url:
            kwargs["api_url"] = api_url
        self._client = AsyncFirecrawl(**kwargs)
        self._timeout_ms = timeout_ms
        self._only_main_content = only_main_content

    async def load(self, url: str) -> ScrapedPage:
        """Scrape a single URL via Firecrawl and return a ScrapedPage.

        Raises :class:`ScrapeError` when Firecrawl fails. An empty page is
        returned as-is; judging whether it is long enough is up to the caller.
        """
        try:
            response = await self._client.scrape(
                url,
                formats=["markdown"],
                only_main_content=self._only_main_content,
                timeout=self._timeout_ms,
            )
        except Exception as exc:
            logger.warning("scrape failed", extra={"url": url}, exc_info=True)
            raise ScrapeError(url, str(exc)) from exc

        if response is None:
            raise ScrapeError(url, "empty response")

        if isinstance(response, dict):
            markdown = response.get("markdown") or ""
        else:
            markdown = getattr(response, "markdown", None) or ""

        metadata = _read_metadata(response)
        logger.debug("page scraped", extra={"url": url, "content_length": len(markdown)})
        return ScrapedPage(
            url=url,
            title=metadata["title"],
            description=metadata["description"],
            content=markdown,
        )
