"""
FastAPI application initialization and configuration.
"""
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from oauth import OAuthStateStore, TikTokOAuth
from persona import PersonaComposer
from settings import Settings
from upstream import UpstreamClient
from .exceptions import register_exception_handlers
from .middleware import log_requests_middleware
from .endpoints import (
    health_router,
    persona_router,
    realtime_router,
    tiktok_router,
)

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    *,
    state_store: Optional[OAuthStateStore] = None,
    composer: Optional[PersonaComposer] = None,
    upstream: Optional[UpstreamClient] = None,
) -> FastAPI:
    """Build an application with its own stores

    Anything not passed in is built from ``settings``; tests pass an
    ``UpstreamClient`` over ``httpx.MockTransport`` to stub the network.
    """
    settings = settings or Settings()

    if state_store is None:
        state_store = OAuthStateStore(ttl_seconds=settings.oauth_state_ttl_seconds)
    if composer is None:
        composer = PersonaComposer(
            static_persona=settings.static_persona,
            default_spice=settings.default_spice,
        )
    if upstream is None:
        upstream = UpstreamClient(
            openai_api_key=settings.openai_api_key,
            openai_api_base=settings.openai_api_base,
            tiktok_api_base=settings.tiktok_api_base,
            timeout=settings.upstream_timeout,
        )

    application = FastAPI(title="Kira Realtime Server", version="1.0.0")

    application.state.settings = settings
    application.state.state_store = state_store
    application.state.composer = composer
    application.state.upstream = upstream
    application.state.tiktok_oauth = TikTokOAuth(
        state_store=state_store,
        upstream=upstream,
        client_key=settings.tiktok_client_key,
        client_secret=settings.tiktok_client_secret,
        redirect_uri=settings.tiktok_redirect_uri,
        scopes=settings.tiktok_scopes,
        authorize_url=settings.tiktok_authorize_url,
    )

    # Add middleware
    application.middleware("http")(log_requests_middleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # Register routers
    application.include_router(health_router)
    application.include_router(realtime_router)
    application.include_router(tiktok_router)
    application.include_router(persona_router)

    if not settings.realtime_configured:
        logger.warning("Missing OPENAI_API_KEY - /realtime-ephemeral will return 500")
    if not settings.tiktok_configured:
        logger.info("TikTok OAuth not configured - /tiktok/login will return 500")

    logger.debug("FastAPI application initialized with all routers and middleware")
    return application


# Default application for uvicorn
app = create_app()
