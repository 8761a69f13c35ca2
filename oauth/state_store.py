"""Single-use OAuth state tokens (CSRF protection for the callback)"""

import base64
import logging
import secrets
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)


def generate_state() -> str:
    """Generate a high-entropy, URL-safe state token"""
    return base64.urlsafe_b64encode(secrets.token_bytes(32)).decode('utf-8').rstrip('=')


@dataclass(frozen=True)
class OAuthState:
    token: str
    created_at: float


class OAuthStateStore:
    """In-process map of outstanding state tokens

    A token present in the store was issued by this process and has not been
    consumed yet. ``consume`` deletes on read, so every token validates at
    most once and a replayed callback fails.

    Args:
        ttl_seconds: Maximum age of a consumable token. ``0`` (or ``None``)
            disables expiry, so abandoned tokens stay valid until restart.
        clock: Returns the current time in seconds.
    """

    def __init__(self, ttl_seconds: Optional[float] = 0, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds or 0
        self._clock = clock
        self._states: Dict[str, OAuthState] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._states)

    def __contains__(self, token: str) -> bool:
        with self._lock:
            return token in self._states

    def _is_expired(self, state: OAuthState, now: float) -> bool:
        return bool(self.ttl_seconds) and now - state.created_at > self.ttl_seconds

    def issue(self) -> str:
        """Create, store and return a fresh state token"""
        with self._lock:
            self._purge_expired_locked()
            token = generate_state()
            self._states[token] = OAuthState(token=token, created_at=self._clock())
            outstanding = len(self._states)
        logger.debug(f"Issued OAuth state ({outstanding} outstanding)")
        return token

    def consume(self, token: Optional[str]) -> bool:
        """Validate and delete a state token

        Returns:
            True exactly once per issued token. False for empty, unknown,
            already consumed or expired tokens; an unknown token causes no
            state change.
        """
        if not token:
            return False

        with self._lock:
            state = self._states.pop(token, None)
            if state is None:
                return False
            if self._is_expired(state, self._clock()):
                logger.info("Rejected expired OAuth state")
                return False
            return True

    def get(self, token: str) -> Optional[OAuthState]:
        """Look at an outstanding state without consuming it"""
        with self._lock:
            return self._states.get(token)

    def purge_expired(self) -> int:
        """Drop every expired token and return how many were removed"""
        with self._lock:
            return self._purge_expired_locked()

    def _purge_expired_locked(self) -> int:
        if not self.ttl_seconds:
            return 0
        now = self._clock()
        expired = [token for token, state in self._states.items() if self._is_expired(state, now)]
        for token in expired:
            del self._states[token]
        if expired:
            logger.debug(f"Purged {len(expired)} expired OAuth state(s)")
        return len(expired)
