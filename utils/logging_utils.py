"""
Logging utilities for upstream request debugging.

Secrets (API keys, client secrets, bearer tokens, authorization codes) must
never reach a log line, so everything logged about an outbound call passes
through the redaction helpers here first.
"""
import logging
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

REDACTED = "[REDACTED]"

SENSITIVE_HEADERS = {"authorization", "x-api-key", "api-key"}
SENSITIVE_FIELDS = {
    "client_secret",
    "code",
    "access_token",
    "refresh_token",
    "api_key",
    "instructions",
}


def redact_headers(headers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Copy headers with credential-bearing values replaced"""
    if not headers:
        return {}
    return {
        name: REDACTED if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def redact_fields(payload: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Copy a request payload with secret fields replaced

    ``instructions`` is not secret, but it is long enough to drown the log,
    so only its length is kept.
    """
    if not payload:
        return {}
    redacted: Dict[str, Any] = {}
    for key, value in payload.items():
        if key == "instructions" and isinstance(value, str):
            redacted[key] = f"<{len(value)} chars>"
        elif key in SENSITIVE_FIELDS:
            redacted[key] = REDACTED
        else:
            redacted[key] = value
    return redacted


def log_upstream_request(
    request_id: str,
    method: str,
    url: str,
    headers: Optional[Mapping[str, str]] = None,
    payload: Optional[Mapping[str, Any]] = None,
):
    """Log an outbound request at debug level with secrets removed"""
    logger.debug(f"[{request_id}] {method} {url}")
    for header_name, header_value in redact_headers(headers).items():
        logger.debug(f"[{request_id}] {header_name}: {header_value}")
    if payload:
        logger.debug(f"[{request_id}] Payload: {redact_fields(payload)}")
