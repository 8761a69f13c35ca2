"""OAuth authorization-code exchange"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from upstream import UpstreamClient
from .exceptions import OAuthNotConfiguredError, OAuthStateError
from .state_store import OAuthStateStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenPair:
    """Tokens from a successful exchange; lives only for one request"""

    access_token: Optional[str]
    refresh_token: Optional[str]

    @classmethod
    def from_response(cls, token_data: Dict[str, Any]) -> "TokenPair":
        return cls(
            access_token=token_data.get("access_token"),
            refresh_token=token_data.get("refresh_token"),
        )

    def __repr__(self) -> str:
        return "TokenPair(access_token=<hidden>, refresh_token=<hidden>)"


async def exchange_code(
    code: Optional[str],
    state: Optional[str],
    state_store: OAuthStateStore,
    upstream: UpstreamClient,
    client_key: Optional[str],
    client_secret: Optional[str],
    redirect_uri: Optional[str],
) -> TokenPair:
    """Verify the callback state, then exchange the authorization code

    The state check happens before any network traffic: an unverified
    callback never reaches the token endpoint.

    Args:
        code: Authorization code from the callback query
        state: State token from the callback query
        state_store: Store that issued the state
        upstream: Client used for the token endpoint

    Returns:
        The access/refresh token pair

    Raises:
        OAuthStateError: If code or state is missing, or the state is
            unknown, expired or already used
        OAuthNotConfiguredError: If the OAuth credentials are missing
        UpstreamError: If the token endpoint rejects the exchange
        UpstreamUnreachableError: If the token endpoint cannot be reached
    """
    if not code or not state:
        logger.warning("OAuth callback missing code or state")
        raise OAuthStateError()

    if not state_store.consume(state):
        logger.warning("OAuth callback with unknown, expired or replayed state")
        raise OAuthStateError()

    if not (client_key and client_secret and redirect_uri):
        raise OAuthNotConfiguredError()

    token_data = await upstream.exchange_authorization_code(
        code=code,
        client_key=client_key,
        client_secret=client_secret,
        redirect_uri=redirect_uri,
    )

    logger.info("TikTok OAuth tokens obtained")
    return TokenPair.from_response(token_data)
