"""HTTP API tests against the FastAPI app with injected collaborators."""

import httpx
import pytest
import pytest_asyncio

from src.api.service import ScoreService
from src.main import app

from .conftest import EXAMPLE_CONTENT, StaticLoader

pytestmark = pytest.mark.asyncio


@pytest.fixture
def loader() -> StaticLoader:
    return StaticLoader(
        default=EXAMPLE_CONTENT,
        pages={"https://tiny.example.com/": "short"},
        failing=["https://down.example.com/"],
    )


@pytest_asyncio.fixture
async def client(loader, redis_cache, settings):
    app.state.settings = settings
    app.state.service = ScoreService(loader, redis_cache, settings)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


async def test_create_score(client):
    resp = await client.post("/de-score", json={"domain": "https://example.com"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert len(body["scoreId"]) == 12
    assert body["data"]["totalScore"] == 97
    assert body["data"]["brandScore"] == 91
    assert body["data"]["breakdown"]["technical"]["securityScore"] == 80


async def test_create_score_then_fetch(client):
    created = (await client.post("/de-score", json={"domain": "https://example.com"})).json()

    resp = await client.get(f"/de-score/{created['scoreId']}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["scoreId"] == created["scoreId"]
    assert body["url"] == "https://example.com/"
    assert body["pageTitle"] == "Example Domain"
    assert body["result"] == created["data"]
    assert "expiresAt" in body


async def test_fetch_unknown_score(client):
    resp = await client.get("/de-score/doesnotexist")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Score not found or expired"}


async def test_invalid_domain(client):
    resp = await client.post("/de-score", json={"domain": "not a url"})
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Invalid request"}


async def test_missing_domain(client):
    resp = await client.post("/de-score", json={})
    assert resp.status_code == 400


async def test_insufficient_content(client):
    resp = await client.post("/de-score", json={"domain": "https://tiny.example.com"})
    assert resp.status_code == 422
    body = resp.json()
    assert body["success"] is False
    assert "Insufficient content" in body["error"]


async def test_scrape_failure(client):
    resp = await client.post("/de-score", json={"domain": "https://down.example.com"})
    assert resp.status_code == 502
    assert resp.json() == {
        "success": False,
        "error": "Failed to scrape https://down.example.com/",
    }


async def test_batch_scores(client):
    resp = await client.post(
        "/de-score/batch",
        json={"domains": ["https://example.com", "https://down.example.com"]},
    )
    assert resp.status_code == 200
    items = resp.json()["data"]
    assert items[0]["success"] is True
    assert items[0]["data"]["totalScore"] == 97
    assert items[1]["success"] is False
    assert items[1]["domain"] == "https://down.example.com/"


async def test_batch_too_many_domains(client):
    domains = [f"https://site{i}.example.com" for i in range(4)]
    resp = await client.post("/de-score/batch", json={"domains": domains})
    assert resp.status_code == 400
    assert resp.json()["success"] is False


async def test_batch_requires_domains(client):
    resp = await client.post("/de-score/batch", json={"domains": []})
    assert resp.status_code == 400


class BrokenLoader:
    async def load(self, url: str):
        raise RuntimeError("loader crashed")


async def test_unexpected_error_returns_envelope(redis_cache, settings):
    app.state.settings = settings
    app.state.service = ScoreService(BrokenLoader(), redis_cache, settings)
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.post("/de-score", json={"domain": "https://example.com"})

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Internal server error"}
