"""
Kira realtime server - HTTP boundary package.

This package exposes the realtime ephemeral-token endpoint, the TikTok OAuth
flow with its pass-through API helpers, and the runtime persona endpoints.
"""
from .server import RealtimeServer
from .app import app, create_app

__version__ = "1.0.0"

__all__ = [
    'RealtimeServer',
    'app',
    'create_app',
]
