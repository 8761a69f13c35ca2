"""HTTP client for the OpenAI Realtime and TikTok APIs"""

import logging
import uuid
from typing import Any, Dict, Optional

import httpx

from utils.logging_utils import log_upstream_request
from .exceptions import UpstreamError, UpstreamUnreachableError

logger = logging.getLogger(__name__)

OPENAI_SERVICE = "openai"
TIKTOK_SERVICE = "tiktok"

TIKTOK_USER_FIELDS = ["open_id", "union_id", "avatar_url", "display_name"]
TIKTOK_VIDEO_FIELDS = ["video_id", "create_time", "duration", "title", "share_url", "embed_html"]
TIKTOK_VIDEO_PAGE_SIZE = 20


class UpstreamClient:
    """Outbound calls to the realtime-session API and the TikTok OAuth/REST APIs

    Every call opens its own ``httpx.AsyncClient``: nothing is pooled, cached
    or retried. A 2xx answer returns the parsed JSON body; anything else
    raises ``UpstreamError`` carrying the upstream status and body unchanged.
    """

    def __init__(
        self,
        openai_api_key: Optional[str] = None,
        openai_api_base: str = "https://api.openai.com",
        tiktok_api_base: str = "https://open.tiktokapis.com",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._openai_api_key = openai_api_key
        self.openai_api_base = openai_api_base.rstrip("/")
        self.tiktok_api_base = tiktok_api_base.rstrip("/")
        # 0 or None means no timeout at all
        self.timeout = timeout or None
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def _send(
        self,
        service: str,
        method: str,
        url: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, str]] = None,
    ) -> Any:
        request_id = str(uuid.uuid4())[:8]
        log_upstream_request(request_id, method, url, headers=headers, payload=json or data)

        try:
            async with self._client() as client:
                response = await client.request(
                    method,
                    url,
                    headers=headers,
                    params=params,
                    json=json,
                    data=data,
                )
        except httpx.RequestError as e:
            logger.error(f"[{request_id}] {service} request to {url} failed: {type(e).__name__}: {e}")
            raise UpstreamUnreachableError(service) from e

        return self._handle_response(request_id, service, response)

    @staticmethod
    def _handle_response(request_id: str, service: str, response: httpx.Response) -> Any:
        try:
            body = response.json()
        except ValueError:
            body = response.text

        if not response.is_success:
            logger.error(f"[{request_id}] {service} API error {response.status_code}: {body}")
            raise UpstreamError(response.status_code, body, service=service)

        if isinstance(body, str):
            logger.error(f"[{request_id}] {service} returned a non-JSON success body")
            raise UpstreamError(502, body, service=service)

        logger.debug(f"[{request_id}] {service} responded {response.status_code}")
        return body

    # OpenAI Realtime

    async def create_realtime_session(self, model: str, voice: str, instructions: str) -> Dict[str, Any]:
        """Mint an ephemeral realtime session

        Returns:
            The upstream session object, e.g. ``{"client_secret": {"value": ...}, ...}``
        """
        if not self._openai_api_key:
            # Callers check configuration first; this only guards misuse
            raise RuntimeError("OpenAI API key is not configured")

        return await self._send(
            OPENAI_SERVICE,
            "POST",
            f"{self.openai_api_base}/v1/realtime/sessions",
            headers={
                "Authorization": f"Bearer {self._openai_api_key}",
                "Content-Type": "application/json",
            },
            json={
                "model": model,
                "voice": voice,
                "instructions": instructions,
            },
        )

    # TikTok

    async def exchange_authorization_code(
        self,
        code: str,
        client_key: str,
        client_secret: str,
        redirect_uri: str,
    ) -> Dict[str, Any]:
        """Exchange an authorization code for an access/refresh token pair"""
        return await self._send(
            TIKTOK_SERVICE,
            "POST",
            f"{self.tiktok_api_base}/v2/oauth/token/",
            headers={"Content-Type": "application/x-www-form-urlencoded; charset=UTF-8"},
            data={
                "client_key": client_key,
                "client_secret": client_secret,
                "code": code,
                "grant_type": "authorization_code",
                "redirect_uri": redirect_uri,
            },
        )

    async def get_user_info(self, access_token: str) -> Dict[str, Any]:
        return await self._send(
            TIKTOK_SERVICE,
            "GET",
            f"{self.tiktok_api_base}/v2/user/info/",
            headers={"Authorization": f"Bearer {access_token}"},
            params={"fields": ",".join(TIKTOK_USER_FIELDS)},
        )

    async def list_videos(self, access_token: str, cursor: str = "0") -> Dict[str, Any]:
        """Fetch one page of the user's videos (raw listing, no analysis)"""
        return await self._send(
            TIKTOK_SERVICE,
            "GET",
            f"{self.tiktok_api_base}/v2/video/list/",
            headers={"Authorization": f"Bearer {access_token}"},
            params={
                "fields": ",".join(TIKTOK_VIDEO_FIELDS),
                "cursor": str(cursor),
                "max_count": str(TIKTOK_VIDEO_PAGE_SIZE),
            },
        )
