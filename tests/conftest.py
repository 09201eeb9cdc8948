"""Fixtures — in-memory result store, canned page loader, sample content."""

import pytest
import pytest_asyncio
from fakeredis.aioredis import FakeRedis

from src.cache.redis import ScoreCache
from src.config import Settings
from src.scrape import ScrapedPage, ScrapeError

EXAMPLE_BLOCK = "# Title\n\nSome text with [a link](http://x.com) and ![img](http://x.com/i.png).\n"
EXAMPLE_CONTENT = EXAMPLE_BLOCK * 50


class StaticLoader:
    """Page loader that serves canned Markdown instead of calling Firecrawl."""

    def __init__(self, default: str = "", pages: dict[str, str] | None = None, failing=()):
        self.default = default
        self.pages = pages or {}
        self.failing = set(failing)
        self.calls: list[str] = []

    async def load(self, url: str) -> ScrapedPage:
        self.calls.append(url)
        if url in self.failing:
            raise ScrapeError(url, "connection refused")
        return ScrapedPage(
            url=url,
            title="Example Domain",
            description="A canned test page",
            content=self.pages.get(url, self.default),
        )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        firecrawl_api_key="test-firecrawl",
        min_content_length=50,
        max_batch_size=3,
        result_ttl_seconds=3600,
    )


@pytest.fixture
def example_content() -> str:
    return EXAMPLE_CONTENT


@pytest_asyncio.fixture
async def redis_cache():
    """ScoreCache backed by an in-memory FakeRedis instance."""
    client = FakeRedis(decode_responses=True)
    cache = ScoreCache(client, default_ttl=3600)
    yield cache
    await client.aclose()
