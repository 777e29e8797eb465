"""
User identity for Aptitude Arena.

The remote store is keyed by an anonymous user id. Instead of keeping the
id in module state, every progress and stats call receives a
``SessionContext`` that carries it.
"""

import logging
import uuid
from dataclasses import dataclass

from aptitude_arena.storage import LocalCache

logger = logging.getLogger(__name__)

STORAGE_KEY_IDENTITY = "aptitude_arena_identity"


@dataclass(frozen=True)
class SessionContext:
    """
    Per-session context passed into every progress and stats operation.

    A context without a user id means the identity is not available yet;
    remote reads and writes are skipped and the local cache is
    authoritative.
    """

    user_id: str | None = None

    @property
    def is_signed_in(self) -> bool:
        return bool(self.user_id)


class AnonymousIdentityProvider:
    """Hands out a stable anonymous user id, remembered in the local cache."""

    def __init__(self, cache: LocalCache):
        self._cache = cache

    def sign_in(self) -> SessionContext:
        """
        Sign in anonymously.

        Returns the id stored by an earlier sign-in on this machine, or
        creates and stores a new one.
        """
        stored = self._cache.read_json(STORAGE_KEY_IDENTITY)
        if isinstance(stored, dict) and isinstance(stored.get("userId"), str) and stored["userId"]:
            return SessionContext(user_id=stored["userId"])

        user_id = str(uuid.uuid4())
        self._cache.write_json(STORAGE_KEY_IDENTITY, {"userId": user_id})
        logger.info(f"Created anonymous identity {user_id}")
        return SessionContext(user_id=user_id)

    def sign_out(self) -> SessionContext:
        """Forget the stored identity; the next sign-in creates a new one."""
        self._cache.delete(STORAGE_KEY_IDENTITY)
        return SessionContext()
