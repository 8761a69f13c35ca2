"""Outbound HTTP calls to the realtime provider and the video platform"""

from .client import UpstreamClient
from .exceptions import UpstreamError, UpstreamUnreachableError

__all__ = [
    "UpstreamClient",
    "UpstreamError",
    "UpstreamUnreachableError",
]
