"""Web scraping submodule: the page-content capability used by the scorer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .firecrawl_loader import FirecrawlLoader, PageLoader
from .models import ScrapedPage, ScrapeError

if TYPE_CHECKING:
    from src.config import Settings

__all__ = [
    "FirecrawlLoader",
    "PageLoader",
    "ScrapeError",
    "ScrapedPage",
    "build_loader",
]


def build_loader(settings: Settings) -> FirecrawlLoader:
    """Build the Firecrawl loader from configured settings."""
    return FirecrawlLoader(
        api_key=settings.firecrawl_api_key,
        api_url=settings.firecrawl_api_url,
        timeout_ms=settings.scrape_timeout_ms,
        only_main_content=settings.scrape_only_main_content,
    )
