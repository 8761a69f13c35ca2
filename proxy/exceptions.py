"""
Error types raised by route handlers and the handlers that render them.

Upstream failures are forwarded with the upstream's own status and body;
everything else gets a fixed message that never contains secret material.
"""
import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from oauth import OAuthNotConfiguredError, OAuthStateError
from upstream import UpstreamError, UpstreamUnreachableError

logger = logging.getLogger(__name__)


class ConfigMissingError(Exception):
    """A credential needed by this route is not configured"""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ClientInputError(Exception):
    """A required query or body field is missing"""

    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def upstream_body_response(status_code: int, body: Any) -> Response:
    """Re-emit an upstream body unchanged: JSON stays JSON, text stays text"""
    if isinstance(body, (dict, list)):
        return JSONResponse(status_code=status_code, content=body)
    return PlainTextResponse(status_code=status_code, content=str(body))


async def config_missing_handler(request: Request, exc: ConfigMissingError):
    logger.error(f"{request.method} {request.url.path} unavailable: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def oauth_not_configured_handler(request: Request, exc: OAuthNotConfiguredError):
    logger.error(f"{request.method} {request.url.path} unavailable: TikTok OAuth not configured")
    return PlainTextResponse(status_code=500, content=str(exc))


async def client_input_handler(request: Request, exc: ClientInputError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def oauth_state_handler(request: Request, exc: OAuthStateError):
    return PlainTextResponse(status_code=400, content=str(exc))


async def upstream_error_handler(request: Request, exc: UpstreamError):
    logger.warning(f"{request.method} {request.url.path} - {exc.service} rejected with {exc.status_code}")
    return upstream_body_response(exc.status_code, exc.body)


async def upstream_unreachable_handler(request: Request, exc: UpstreamUnreachableError):
    # Details were logged by the client; the caller only gets a generic message
    return JSONResponse(status_code=500, content={"error": "upstream request failed"})


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(ConfigMissingError, config_missing_handler)
    app.add_exception_handler(OAuthNotConfiguredError, oauth_not_configured_handler)
    app.add_exception_handler(ClientInputError, client_input_handler)
    app.add_exception_handler(OAuthStateError, oauth_state_handler)
    app.add_exception_handler(UpstreamError, upstream_error_handler)
    app.add_exception_handler(UpstreamUnreachableError, upstream_unreachable_handler)
