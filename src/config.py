"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    firecrawl_api_key: str = ""
    firecrawl_api_url: str = ""
    scrape_timeout_ms: int = 30000
    scrape_only_main_content: bool = True

    redis_url: str = "redis://localhost:6379"
    redis_timeout_seconds: float = 5.0
    result_ttl_seconds: int = 3600

    min_content_length: int = 50
    max_batch_size: int = 10
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
