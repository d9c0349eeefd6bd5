import importlib

from fastapi.testclient import TestClient

from roster.api import main


def test_status_endpoint():
    with TestClient(main.app) as client:
        resp = client.get("/status")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("ROSTER_CORS_ORIGINS", " a, ,b ")
    monkeypatch.setenv("ROSTER_CORS_ALLOW_CREDENTIALS", "Yes")
    monkeypatch.setenv("ROSTER_API_LEGACY_ROOT_ROUTES", "0")
    monkeypatch.delenv("ROSTER_UNSET_FLAG", raising=False)
    assert main.env_list("ROSTER_CORS_ORIGINS") == ["a", "b"]
    assert main.env_list("ROSTER_UNSET_FLAG") == []
    assert main.env_flag("ROSTER_CORS_ALLOW_CREDENTIALS")
    assert not main.env_flag("ROSTER_API_LEGACY_ROOT_ROUTES", default=True)
    assert main.env_flag("ROSTER_UNSET_FLAG", default=True)
    assert not main.env_flag("ROSTER_UNSET_FLAG")


def test_legacy_root_routes_can_be_disabled(monkeypatch):
    monkeypatch.setenv("ROSTER_API_LEGACY_ROOT_ROUTES", "0")
    app = main.create_app()
    paths = {route.path for route in app.routes}
    assert "/api/people" in paths
    assert "/people" not in paths


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("ROSTER_CORS_ORIGINS", "https://example.org")
    app = main.create_app()
    with TestClient(app) as client:
        resp = client.options(
            "/people",
            headers={
                "Origin": "https://example.org",
                "Access-Control-Request-Method": "POST",
            },
        )
    assert resp.headers["access-control-allow-origin"] == "https://example.org"
