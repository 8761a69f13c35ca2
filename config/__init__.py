"""Configuration management package for the Kira realtime server"""

from .loader import ConfigLoader, get_config_loader, parse_csv

__all__ = [
    "ConfigLoader",
    "get_config_loader",
    "parse_csv",
]
