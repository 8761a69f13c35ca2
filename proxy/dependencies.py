"""
Request-scoped accessors for the per-application state.

Stores live on ``app.state`` (set up by ``create_app``) instead of module
globals, so every application instance, and every test, owns its own.
"""
from fastapi import Request

from oauth import TikTokOAuth
from persona import PersonaComposer
from settings import Settings
from upstream import UpstreamClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_composer(request: Request) -> PersonaComposer:
    return request.app.state.composer


def get_upstream(request: Request) -> UpstreamClient:
    return request.app.state.upstream


def get_tiktok_oauth(request: Request) -> TikTokOAuth:
    return request.app.state.tiktok_oauth
