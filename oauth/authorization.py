"""TikTok OAuth v2 authorization URL construction"""

from typing import Sequence
from urllib.parse import urlencode


class AuthorizationURLBuilder:
    """Builds TikTok consent-screen URLs for a given state token"""

    def __init__(
        self,
        client_key: str,
        redirect_uri: str,
        scopes: Sequence[str],
        authorize_url: str = "https://www.tiktok.com/v2/auth/authorize/",
    ):
        self.client_key = client_key
        self.redirect_uri = redirect_uri
        self.scopes = list(scopes)
        self.authorize_url = authorize_url

    def get_authorize_url(self, state: str) -> str:
        """Construct the authorize URL

        Args:
            state: Opaque state token issued for this login attempt

        Returns:
            Full authorization URL
        """
        params = {
            "client_key": self.client_key,
            "response_type": "code",
            # TikTok expects scopes comma-separated, not space-separated
            "scope": ",".join(self.scopes),
            "redirect_uri": self.redirect_uri,
            "state": state,
        }
        return f"{self.authorize_url}?{urlencode(params)}"
