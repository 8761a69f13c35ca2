"""Spice level: how much swearing Kira is allowed"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

MIN_SPICE = 0
MAX_SPICE = 3

SPICE_POLICIES: Dict[int, str] = {
    0: "Avoid cuss words entirely.",
    1: "Minimal light swearing only (e.g., 'damn', 'hell') and only for humor.",
    2: "Occasional casual swearing; keep it playful and PG-13.",
    3: "Spicy but playful swearing allowed; never mean-spirited or explicit.",
}

# Used for anything outside MIN_SPICE..MAX_SPICE or that is not a number
DEFAULT_SPICE_POLICY = "Minimal light swearing only."


def parse_spice(value: Any) -> Optional[int]:
    """Parse a spice level from a query/env value

    Returns:
        The integer level, or None if the value is missing or not an integer.
        Range is not checked here.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def resolve_spice(requested: Any, default: Any = 1) -> Optional[int]:
    """Pick the level for one request

    A missing (None or blank) request value falls back to the configured
    default; a present but unparseable one resolves to None, which maps to
    the default policy.
    """
    if requested is None or (isinstance(requested, str) and not requested.strip()):
        return parse_spice(default)
    return parse_spice(requested)


def spice_policy(level: Optional[int]) -> str:
    """Map a level to its tone policy, falling back for out-of-range levels"""
    policy = SPICE_POLICIES.get(level) if level is not None else None
    if policy is None:
        logger.debug(f"Spice level {level!r} outside {MIN_SPICE}..{MAX_SPICE}, using default policy")
        return DEFAULT_SPICE_POLICY
    return policy
