"""Errors raised by the upstream HTTP client"""

from typing import Any


class UpstreamError(Exception):
    """Upstream answered with a non-2xx status

    ``body`` is the parsed JSON body when the upstream sent JSON, otherwise
    the raw response text. The HTTP boundary forwards both unchanged.
    """

    def __init__(self, status_code: int, body: Any, service: str = "upstream"):
        self.status_code = status_code
        self.body = body
        self.service = service
        super().__init__(f"{service} returned HTTP {status_code}")


class UpstreamUnreachableError(Exception):
    """The request never produced an HTTP response (DNS, connect, reset...)"""

    def __init__(self, service: str = "upstream"):
        self.service = service
        super().__init__(f"{service} request failed")
