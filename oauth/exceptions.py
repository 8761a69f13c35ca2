"""OAuth flow errors, mapped to HTTP responses by the proxy layer"""


class OAuthNotConfiguredError(Exception):
    """Client key, client secret or redirect URI is missing"""

    def __init__(self):
        super().__init__(
            "TikTok env missing. Set TIKTOK_CLIENT_KEY, TIKTOK_CLIENT_SECRET, TIKTOK_REDIRECT_URI."
        )


class OAuthStateError(Exception):
    """Callback without code/state, or with a state that fails validation"""

    def __init__(self, message: str = "Invalid or expired OAuth state."):
        super().__init__(message)
