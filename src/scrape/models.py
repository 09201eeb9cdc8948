"""Data models for the scrape submodule."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScrapedPage:
    """A single scraped web page with its Markdown content."""

    url: str
    title: str = ""
    description: str = ""
    content: str = ""


class ScrapeError(Exception):
    """Raised when a page loader cannot retrieve a page."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to scrape {url}: {reason}")
