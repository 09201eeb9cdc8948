"""Scoring exceptions."""


class ScoringError(Exception):
    """Base class for errors raised while computing a DE Score."""


class InsufficientContentError(ScoringError):
    """Raised when scraped content is too short to score."""

    def __init__(self, url: str, length: int, min_length: int) -> None:
        self.url = url
        self.length = length
        self.min_length = min_length
        super().__init__(
            f"Insufficient content for {url}: {length} characters, need at least {min_length}"
        )
