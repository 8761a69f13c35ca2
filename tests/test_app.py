"""Application factory, health and CORS tests."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from proxy.app import create_app
from tests.conftest import StubUpstream, make_app, make_settings


def test_default_app_instantiates() -> None:
    from proxy import app

    assert isinstance(app, FastAPI)


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_root_banner(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert "/realtime-ephemeral" in response.text


def test_apps_do_not_share_state(stub: StubUpstream) -> None:
    first = TestClient(make_app(stub))
    second = TestClient(make_app(stub))

    first.post("/persona/merge", json={"sections": [{"text": "only here"}]})

    assert first.get("/persona").json()["totalSections"] == 1
    assert second.get("/persona").json()["totalSections"] == 0


def test_factory_builds_missing_collaborators() -> None:
    app = create_app(make_settings(oauth_state_ttl_seconds=120))
    assert app.state.state_store.ttl_seconds == 120
    assert app.state.composer.total_sections == 0
    assert app.state.tiktok_oauth.is_configured


def test_cors_allows_configured_origin(stub: StubUpstream) -> None:
    client = TestClient(make_app(stub, make_settings(cors_origins=["https://app.example"])))

    allowed = client.get("/health", headers={"Origin": "https://app.example"})
    denied = client.get("/health", headers={"Origin": "https://evil.example"})

    assert allowed.headers["access-control-allow-origin"] == "https://app.example"
    assert "access-control-allow-origin" not in denied.headers
