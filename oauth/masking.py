"""Token masking for human-facing pages"""

from typing import Optional

MASK_SEPARATOR = "..."
MASK_ABSENT = "<none>"
MASK_PREFIX_CHARS = 6
MASK_SUFFIX_CHARS = 4


def mask_token(token: Optional[str]) -> str:
    """Render a token as ``abcdef...wxyz``

    Only the first 6 and last 4 characters are ever shown. Tokens too short
    to hide anything between those are rendered as the bare separator, and
    absent tokens as ``<none>``.

    Args:
        token: The token string to mask

    Returns:
        Masked representation safe to show on a page
    """
    if not token:
        return MASK_ABSENT
    token = str(token)
    if len(token) < MASK_PREFIX_CHARS + MASK_SUFFIX_CHARS:
        return MASK_SEPARATOR
    return f"{token[:MASK_PREFIX_CHARS]}{MASK_SEPARATOR}{token[-MASK_SUFFIX_CHARS:]}"
