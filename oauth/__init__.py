"""TikTok OAuth (authorization-code flow) package"""

from typing import Optional, Sequence

from upstream import UpstreamClient
from .authorization import AuthorizationURLBuilder
from .exceptions import OAuthNotConfiguredError, OAuthStateError
from .masking import mask_token
from .state_store import OAuthState, OAuthStateStore
from .token_exchange import TokenPair, exchange_code


class TikTokOAuth:
    """TikTok three-legged OAuth flow

    This class orchestrates:
    - State token issuing for each login attempt
    - Authorization URL construction
    - State verification and code exchange on callback
    """

    def __init__(
        self,
        state_store: OAuthStateStore,
        upstream: UpstreamClient,
        client_key: Optional[str],
        client_secret: Optional[str],
        redirect_uri: Optional[str],
        scopes: Sequence[str],
        authorize_url: str = "https://www.tiktok.com/v2/auth/authorize/",
    ):
        self.state_store = state_store
        self.upstream = upstream
        self.client_key = client_key
        self._client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.auth_builder = AuthorizationURLBuilder(
            client_key or "",
            redirect_uri or "",
            scopes,
            authorize_url=authorize_url,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.client_key and self._client_secret and self.redirect_uri)

    def _require_configured(self):
        if not self.is_configured:
            raise OAuthNotConfiguredError()

    def start_login(self) -> str:
        """Issue a fresh state and return the consent URL to redirect to

        Raises:
            OAuthNotConfiguredError: If any OAuth credential is missing
        """
        self._require_configured()
        state = self.state_store.issue()
        return self.auth_builder.get_authorize_url(state)

    async def handle_callback(self, code: Optional[str], state: Optional[str]) -> TokenPair:
        """Verify the callback and exchange its code for tokens"""
        return await exchange_code(
            code,
            state,
            self.state_store,
            self.upstream,
            client_key=self.client_key,
            client_secret=self._client_secret,
            redirect_uri=self.redirect_uri,
        )


__all__ = [
    "AuthorizationURLBuilder",
    "OAuthNotConfiguredError",
    "OAuthState",
    "OAuthStateError",
    "OAuthStateStore",
    "TikTokOAuth",
    "TokenPair",
    "exchange_code",
    "mask_token",
]
