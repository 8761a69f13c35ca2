"""Shared utilities package for the Kira realtime server"""

from .logging_utils import (
    REDACTED,
    log_upstream_request,
    redact_fields,
    redact_headers,
)

__all__ = [
    "REDACTED",
    "log_upstream_request",
    "redact_fields",
    "redact_headers",
]
