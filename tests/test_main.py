"""Application surface — landing page, static assets, health checks."""


async def test_landing_page(client):
    res = await client.get("/")

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert 'action="/api/users"' in res.text


async def test_static_stylesheet(client):
    res = await client.get("/public/style.css")

    assert res.status_code == 200
    assert "text/css" in res.headers["content-type"]


async def test_health(client):
    res = await client.get("/health")

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["version"] == "1.0.0"


async def test_health_detailed_without_client_is_degraded(client):
    # The in-memory test database is bound without a Motor client to ping
    res = await client.get("/health/detailed")

    assert res.status_code == 200
    body = res.json()
    assert body["database_connected"] is False
    assert body["status"] == "degraded"
