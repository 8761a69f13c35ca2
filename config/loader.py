"""Configuration loader for the Kira realtime server

Loads configuration from multiple sources with the following priority:
1. Environment variables (highest priority)
2. .env file
3. Hardcoded defaults (lowest priority)
"""

import logging
import os
from pathlib import Path
from typing import Any, List, Optional
from dotenv import load_dotenv

# Set up logger for config loader
logger = logging.getLogger(__name__)


class ConfigLoader:
    """Handles loading configuration from various sources"""

    def __init__(self, env_path: Optional[str] = None):
        """Initialize the config loader

        Args:
            env_path: Optional path to .env file.
                     Defaults to '.env' in the current directory.
        """
        self.env_path = Path(env_path) if env_path else Path(".env")
        self._load_env_file()

    def _load_env_file(self):
        """Load environment variables from .env file if it exists"""
        if self.env_path.exists():
            load_dotenv(dotenv_path=self.env_path)
            logger.debug(f"Loaded environment variables from {self.env_path}")
        else:
            logger.debug(f".env file not found at {self.env_path}, using environment variables and defaults only")

    def get(self, env_var: str, default: Any) -> Any:
        """Get a configuration value with priority: env > default

        Args:
            env_var: Environment variable name to check
            default: Default value if not found in environment

        Returns:
            The configuration value from environment or default
        """
        env_value = os.getenv(env_var)
        if env_value is None:
            return default

        # Try to parse as the type of the default
        if isinstance(default, bool):
            return env_value.lower() in ('true', '1', 'yes')
        elif isinstance(default, int):
            try:
                return int(env_value)
            except ValueError:
                logger.warning(f"Failed to parse {env_var}={env_value} as int, using default: {default}")
                return default
        elif isinstance(default, float):
            try:
                return float(env_value)
            except ValueError:
                logger.warning(f"Failed to parse {env_var}={env_value} as float, using default: {default}")
                return default
        return env_value

    def get_optional(self, env_var: str) -> Optional[str]:
        """Get a string value, treating blank values as unset

        Used for credentials: an empty ``OPENAI_API_KEY=`` line in a .env file
        must behave exactly like a missing key.
        """
        value = os.getenv(env_var)
        if value is None or not value.strip():
            return None
        return value.strip()

    def get_list(self, env_var: str, default: str) -> List[str]:
        """Get a comma-separated value as a list of non-empty items"""
        raw = self.get(env_var, default)
        return parse_csv(raw)


def parse_csv(raw: Optional[str]) -> List[str]:
    """Split a comma-separated string, dropping blanks"""
    if not raw:
        return []
    return [item.strip() for item in str(raw).split(",") if item.strip()]


# Create a global instance
_config_loader = None

def get_config_loader() -> ConfigLoader:
    """Get or create the global ConfigLoader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader
