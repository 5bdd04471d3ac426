"""Target routes — verifies resolution precedence and response shape over HTTP.

Invariants:
    - ?target= wins over ?path= which wins over the User-Agent header
    - Unknown explicit target returns 400 INVALID_TARGET
    - Header-based resolution sets Vary: User-Agent
    - module_path is built with the configured build version
"""

CHROME_90 = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/90.0.4430.212 Safari/537.36"
)


def _vary(res) -> list[str]:
    """Vary values; CORS middleware may add Origin alongside ours."""
    return [v.strip() for v in res.headers.get("vary", "").split(",") if v.strip()]


async def test_list_targets(client):
    res = await client.get("/api/v1/targets/")
    assert res.status_code == 200
    body = res.json()
    assert len(body["targets"]) == 12
    assert body["baselines"][0] == {"target": "es2022", "unsupported_count": 7}
    assert body["baselines"][-1] == {"target": "es2016", "unsupported_count": 36}


async def test_resolve_from_user_agent(client):
    res = await client.get(
        "/api/v1/targets/resolve", headers={"User-Agent": CHROME_90},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["target"] == "es2021"
    assert body["source"] == "user_agent"
    assert body["runtime"] == {"name": "Chrome", "version": "90.0.4430.212"}
    assert body["unsupported_count"] == 9
    assert "OptionalChain" in body["unsupported_features"]
    assert body["unsupported_features"] == sorted(body["unsupported_features"])
    assert body["transpile_level"] == "es2021"
    assert body["server_target"] is False
    assert "User-Agent" in _vary(res)


async def test_resolve_deno(client):
    res = await client.get(
        "/api/v1/targets/resolve", headers={"User-Agent": "Deno/1.30.0"},
    )
    body = res.json()
    assert body["target"] == "deno"
    assert body["server_target"] is True
    assert body["transpile_level"] == "esnext"
    assert body["export_conditions"][:2] == ["deno", "worker"]


async def test_resolve_cli_tool_fails_open(client):
    res = await client.get(
        "/api/v1/targets/resolve", headers={"User-Agent": "Wget/1.21.3"},
    )
    body = res.json()
    assert body["target"] == "esnext"
    assert body["runtime"] == {"name": None, "version": None}
    assert body["unsupported_count"] == 0


async def test_path_pinned_target_skips_user_agent(client):
    res = await client.get(
        "/api/v1/targets/resolve",
        params={"path": "/v135/react@18.2.0/es2018/react.mjs"},
        headers={"User-Agent": CHROME_90},
    )
    body = res.json()
    assert body["target"] == "es2018"
    assert body["source"] == "path"
    assert body["runtime"] == {"name": None, "version": None}
    assert "User-Agent" not in _vary(res)


async def test_path_without_target_falls_back_to_user_agent(client):
    res = await client.get(
        "/api/v1/targets/resolve",
        params={"path": "/v135/react"},
        headers={"User-Agent": "curl/8.4.0"},
    )
    body = res.json()
    assert body["target"] == "esnext"
    assert body["source"] == "user_agent"


async def test_query_target_wins(client):
    res = await client.get(
        "/api/v1/targets/resolve",
        params={"target": "node", "path": "/v135/pkg/es2018/x.mjs"},
    )
    body = res.json()
    assert body["target"] == "node"
    assert body["source"] == "query"


async def test_unknown_query_target_returns_400(client):
    res = await client.get("/api/v1/targets/resolve", params={"target": "es5"})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_TARGET"
    assert error["category"] == "validation"


async def test_module_path_uses_configured_build_version(client, monkeypatch):
    monkeypatch.setenv("BUILD_VERSION", "136")
    res = await client.get(
        "/api/v1/targets/resolve",
        params={"target": "es2020", "package": "react", "version": "18.2.0"},
    )
    assert res.json()["module_path"] == "/v136/react@18.2.0/es2020/react.mjs"


async def test_dev_flag_adds_development_condition(client):
    res = await client.get(
        "/api/v1/targets/resolve",
        params={
            "target": "es2022", "dev": "true", "package": "preact",
            "version": "10.19.3", "conditions": "react-server",
        },
    )
    body = res.json()
    assert body["export_conditions"][:3] == ["react-server", "browser", "development"]
    assert body["module_path"] == "/v135/preact@10.19.3/es2022/preact.development.mjs"


async def test_module_path_omitted_without_version(client):
    res = await client.get(
        "/api/v1/targets/resolve", params={"target": "es2022", "package": "react"},
    )
    assert res.json()["module_path"] is None


async def test_invalid_query_type_returns_structured_400(client):
    res = await client.get(
        "/api/v1/targets/resolve", params={"target": "es2022", "bundle": "maybe"},
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "query.bundle"
