"""Shared fixtures: isolated app instances over a stubbed upstream."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from oauth import OAuthStateStore
from persona import PersonaComposer
from proxy.app import create_app
from settings import Settings
from upstream import UpstreamClient

OPENAI_KEY = "sk-test-openai-key-0123456789"
TIKTOK_CLIENT_KEY = "aw-test-client-key"
TIKTOK_CLIENT_SECRET = "tiktok-client-secret-abcdef"
REDIRECT_URI = "http://testserver/tiktok/callback"

REALTIME_PATH = "/v1/realtime/sessions"
TOKEN_PATH = "/v2/oauth/token/"
USER_INFO_PATH = "/v2/user/info/"
VIDEO_LIST_PATH = "/v2/video/list/"


class StubUpstream:
    """Records outbound requests and answers them from canned responses."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._routes: Dict[Tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json: Any = None,
        text: Optional[str] = None,
    ) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json)

        self._routes[(method, path)] = respond

    def fail(self, method: str, path: str) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self._routes[(method, path)] = respond

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": "no stub"})
        return route(request)

    def calls_to(self, path: str) -> List[httpx.Request]:
        return [request for request in self.requests if request.url.path == path]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def make_settings(**overrides: Any) -> Settings:
    values: Dict[str, Any] = dict(
        openai_api_key=OPENAI_KEY,
        default_spice="1",
        static_persona="",
        tiktok_client_key=TIKTOK_CLIENT_KEY,
        tiktok_client_secret=TIKTOK_CLIENT_SECRET,
        tiktok_redirect_uri=REDIRECT_URI,
        tiktok_scopes=["user.info.basic", "video.list"],
        oauth_state_ttl_seconds=0,
        upstream_timeout=0,
        cors_origins=["*"],
    )
    values.update(overrides)
    return Settings(**values)


def make_app(stub: StubUpstream, settings: Optional[Settings] = None, **kwargs: Any) -> FastAPI:
    settings = settings or make_settings()
    upstream = UpstreamClient(
        openai_api_key=settings.openai_api_key,
        openai_api_base=settings.openai_api_base,
        tiktok_api_base=settings.tiktok_api_base,
        transport=stub.transport,
    )
    return create_app(settings, upstream=upstream, **kwargs)


@pytest.fixture
def stub() -> StubUpstream:
    return StubUpstream()


@pytest.fixture
def state_store() -> OAuthStateStore:
    return OAuthStateStore()


@pytest.fixture
def composer() -> PersonaComposer:
    return PersonaComposer(static_persona="", default_spice="1")


@pytest.fixture
def app(stub: StubUpstream, state_store: OAuthStateStore, composer: PersonaComposer) -> FastAPI:
    return make_app(stub, state_store=state_store, composer=composer)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
