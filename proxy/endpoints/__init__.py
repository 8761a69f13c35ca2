"""
Endpoint handlers for the realtime server.
"""
from .health import router as health_router
from .persona import router as persona_router
from .realtime import router as realtime_router
from .tiktok import router as tiktok_router

__all__ = [
    'health_router',
    'persona_router',
    'realtime_router',
    'tiktok_router',
]
