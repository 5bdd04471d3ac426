"""Health endpoints — liveness and readiness over HTTP."""


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["build_version"] == 135


async def test_readiness_reports_baseline_levels(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"baseline_levels": 7}}
