"""CORS and catch-all error handling.

Invariants:
    - Any origin may call the API; only Origin, Content-Type, Accept and
      Authorization are accepted as request headers
    - Unhandled exceptions become a generic 500 without internal details
"""

from httpx import ASGITransport, AsyncClient

from coffee_valley.infrastructure.database import get_db
from coffee_valley.main import app


async def test_simple_request_allows_any_origin(client):
    res = await client.get("/catalogs", headers={"Origin": "http://shop.example"})
    assert res.headers["access-control-allow-origin"] == "*"


async def test_preflight_allows_configured_headers(client):
    res = await client.options(
        "/catalog",
        headers={
            "Origin": "http://shop.example",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type, Authorization",
        },
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "*"
    allowed = {
        h.strip().lower()
        for h in res.headers["access-control-allow-headers"].split(",")
    }
    assert {"origin", "content-type", "accept", "authorization"} <= allowed


async def test_preflight_rejects_unlisted_header(client):
    res = await client.options(
        "/catalog",
        headers={
            "Origin": "http://shop.example",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "X-Api-Key",
        },
    )
    assert res.status_code == 400


async def test_unhandled_exception_returns_generic_500():
    async def exploding_get_db():
        raise RuntimeError("secret internals")
        yield  # pragma: no cover

    app.dependency_overrides[get_db] = exploding_get_db
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as c:
            res = await c.get("/catalogs")
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert res.json()["error"]["category"] == "internal"
    assert "secret internals" not in res.text
