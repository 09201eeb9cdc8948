"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from src.api.routes import error_response, router
from src.api.service import ScoreService
from src.cache.redis import ScoreCache, create_redis_client
from src.config import get_settings
from src.logging_config import setup_logging
from src.scoring import InsufficientContentError
from src.scrape import ScrapeError, build_loader

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level)
    logger.info("starting de score service")

    redis_client = await create_redis_client(
        settings.redis_url, timeout=settings.redis_timeout_seconds
    )
    cache = ScoreCache(redis_client, default_ttl=settings.result_ttl_seconds)
    loader = build_loader(settings)

    app.state.settings = settings
    app.state.service = ScoreService(loader=loader, cache=cache, settings=settings)

    logger.info(
        "de score service ready",
        extra={
            "min_content_length": settings.min_content_length,
            "max_batch_size": settings.max_batch_size,
            "result_ttl_seconds": settings.result_ttl_seconds,
        },
    )

    yield

    logger.info("shutting down de score service")
    await redis_client.aclose()


app = FastAPI(title="DE Score Service", lifespan=lifespan)
app.include_router(router)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError):
    logger.info(
        "invalid request", extra={"path": request.url.path, "error_count": len(exc.errors())}
    )
    return error_response(400, "Invalid request")


@app.exception_handler(InsufficientContentError)
async def handle_insufficient_content(request: Request, exc: InsufficientContentError):
    logger.info(
        "insufficient content",
        extra={"url": exc.url, "length": exc.length, "min_length": exc.min_length},
    )
    return error_response(422, str(exc))


@app.exception_handler(ScrapeError)
async def handle_scrape_error(request: Request, exc: ScrapeError):
    logger.error("scrape failed", extra={"url": exc.url, "reason": exc.reason})
    return error_response(502, f"Failed to scrape {exc.url}")


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("unhandled error", extra={"path": request.url.path})
    return error_response(500, "Internal server error")


@app.get("/health")
async def health():
    return {"status": "ok"}
