from dataclasses import dataclass, field
from typing import List, Optional

from config.loader import get_config_loader

# Get the config loader instance
config = get_config_loader()

# Server configuration
PORT = config.get("PORT", 3000)
BIND_ADDRESS = config.get("HOST", "0.0.0.0")
LOG_LEVEL = config.get("LOG_LEVEL", "info")

# OpenAI Realtime configuration
# The API key is read once here and only ever sent upstream as a bearer header
OPENAI_API_KEY = config.get_optional("OPENAI_API_KEY")
OPENAI_API_BASE = "https://api.openai.com"
DEFAULT_REALTIME_MODEL = "gpt-4o-realtime-preview"
DEFAULT_REALTIME_VOICE = "alloy"

# Persona configuration
# Spice (0..3): 0=no cussing, 1=minimal (default), 2=occasional, 3=spicy
KIRA_SPICE = config.get("KIRA_SPICE", "1")
KIRA_STATIC_PERSONA = config.get("KIRA_STATIC_PERSONA", "")

# TikTok OAuth configuration (optional; login degrades to a fixed error without it)
TIKTOK_CLIENT_KEY = config.get_optional("TIKTOK_CLIENT_KEY")
TIKTOK_CLIENT_SECRET = config.get_optional("TIKTOK_CLIENT_SECRET")
TIKTOK_REDIRECT_URI = config.get_optional("TIKTOK_REDIRECT_URI")
TIKTOK_SCOPES = config.get_list("TIKTOK_SCOPES", "user.info.basic,video.list")
TIKTOK_AUTHORIZE_URL = "https://www.tiktok.com/v2/auth/authorize/"
TIKTOK_API_BASE = "https://open.tiktokapis.com"

# 0 keeps issued state tokens valid until consumed or process restart
OAUTH_STATE_TTL_SECONDS = config.get("OAUTH_STATE_TTL_SECONDS", 0)

# Outbound calls have no timeout unless one is configured (0 = wait forever)
UPSTREAM_TIMEOUT = config.get("UPSTREAM_TIMEOUT", 0.0)

# CORS
CORS_ORIGINS = config.get_list("CORS_ORIGIN", "*")


@dataclass
class Settings:
    """Runtime configuration handed to the application factory.

    Defaults come from the module-level constants above, so ``Settings()``
    reflects the process environment while tests can build isolated
    instances with explicit values.
    """

    openai_api_key: Optional[str] = OPENAI_API_KEY
    openai_api_base: str = OPENAI_API_BASE
    default_model: str = DEFAULT_REALTIME_MODEL
    default_voice: str = DEFAULT_REALTIME_VOICE

    default_spice: str = KIRA_SPICE
    static_persona: str = KIRA_STATIC_PERSONA

    tiktok_client_key: Optional[str] = TIKTOK_CLIENT_KEY
    tiktok_client_secret: Optional[str] = TIKTOK_CLIENT_SECRET
    tiktok_redirect_uri: Optional[str] = TIKTOK_REDIRECT_URI
    tiktok_scopes: List[str] = field(default_factory=lambda: list(TIKTOK_SCOPES))
    tiktok_authorize_url: str = TIKTOK_AUTHORIZE_URL
    tiktok_api_base: str = TIKTOK_API_BASE

    oauth_state_ttl_seconds: int = OAUTH_STATE_TTL_SECONDS
    upstream_timeout: float = UPSTREAM_TIMEOUT
    cors_origins: List[str] = field(default_factory=lambda: list(CORS_ORIGINS) or ["*"])

    @property
    def realtime_configured(self) -> bool:
        return bool(self.openai_api_key)

    @property
    def tiktok_configured(self) -> bool:
        return bool(self.tiktok_client_key and self.tiktok_client_secret and self.tiktok_redirect_uri)
