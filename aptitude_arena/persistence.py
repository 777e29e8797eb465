"""
Persistence layer for Aptitude Arena.

This module hides the two storage backends behind one interface. It
handles:
- Category progress (one GameProgress record per category)
- User statistics (totals, accuracy, daily streak)

Reads prefer the remote store and fall back to the local cache; writes
always go to the local cache first and then to the remote store. Remote
failures are logged and never reach the caller. Every document is
validated on the way in and malformed records are replaced by defaults.
"""

import logging

from aptitude_arena.errors import MalformedDocumentError, RemoteStoreError
from aptitude_arena.identity import SessionContext
from aptitude_arena.models import GameProgress, UserStats, initialize_progress
from aptitude_arena.storage import DocumentStore, LocalCache

logger = logging.getLogger(__name__)


# Sub-keys in the remote store
ATTR_PROGRESS = "progress"
ATTR_STATS = "stats"

# Keys in the local cache
STORAGE_KEY_PROGRESS = "aptitude_arena_progress"
STORAGE_KEY_STATS = "aptitude_arena_stats"


def parse_progress(document) -> dict[str, GameProgress]:
    """
    Validate a stored progress mapping.

    Malformed category records are replaced by zeroed ones and every known
    category is guaranteed to be present.
    """
    progress = initialize_progress()
    if not isinstance(document, dict):
        logger.warning(f"Discarding malformed progress document: {document!r}")
        return progress

    for game_id, record in document.items():
        try:
            game_progress = GameProgress.from_dict(record, game_id=game_id)
        except MalformedDocumentError as exc:
            logger.warning(f"Resetting malformed progress record {game_id}: {exc}")
            game_progress = GameProgress(game_id=game_id)
        # The mapping key wins over a stale gameId inside the record
        game_progress.game_id = game_id
        progress[game_id] = game_progress

    return progress


def parse_stats(document) -> UserStats:
    """Validate a stored stats record, falling back to defaults."""
    try:
        return UserStats.from_dict(document)
    except MalformedDocumentError as exc:
        logger.warning(f"Resetting malformed stats record: {exc}")
        return UserStats()


class PersistenceManager:
    """
    Manages persistence of user data for Aptitude Arena.

    This class provides a clean interface for loading and saving user
    data, abstracting away the local cache and the remote store.
    """

    def __init__(self, cache: LocalCache, remote: DocumentStore | None = None):
        """
        Initialize the persistence manager.

        Args:
            cache: Local cache, always written and used as fallback.
            remote: Optional remote document store.
        """
        self._cache = cache
        self._remote = remote

    def _read_remote(self, context: SessionContext, key: str):
        """Read from the remote store; None when signed out, absent or failing."""
        if self._remote is None or not context.is_signed_in:
            return None
        try:
            return self._remote.read(context.user_id, key)
        except RemoteStoreError as exc:
            logger.error(f"Error fetching {key} from remote store: {exc}", exc_info=True)
            return None

    def _write_remote(self, context: SessionContext, key: str, document: dict) -> None:
        """Write to the remote store; failures are logged and swallowed."""
        if self._remote is None or not context.is_signed_in:
            return
        try:
            self._remote.write(context.user_id, key, document)
        except RemoteStoreError as exc:
            logger.error(f"Error saving {key} to remote store: {exc}", exc_info=True)

    def _load(self, context: SessionContext, remote_key: str, cache_key: str):
        document = self._read_remote(context, remote_key)
        if document is None:
            document = self._cache.read_json(cache_key)
        return document

    def get_game_progress(self, context: SessionContext) -> dict[str, GameProgress]:
        """
        Load progress for every category.

        Returns:
            Mapping of category id to GameProgress; a zeroed mapping with all
            known categories when nothing is stored.
        """
        document = self._load(context, ATTR_PROGRESS, STORAGE_KEY_PROGRESS)
        if document is None:
            return initialize_progress()
        return parse_progress(document)

    def save_game_progress(
        self, context: SessionContext, progress: dict[str, GameProgress]
    ) -> None:
        """
        Save progress to the local cache, then to the remote store.

        Args:
            context: Session context carrying the user id.
            progress: Mapping of category id to GameProgress.
        """
        document = {game_id: record.to_dict() for game_id, record in progress.items()}
        self._cache.write_json(STORAGE_KEY_PROGRESS, document)
        self._write_remote(context, ATTR_PROGRESS, document)

    def get_user_stats(self, context: SessionContext) -> UserStats:
        """
        Load the global user statistics.

        Returns:
            The stored UserStats, or a zero-valued record.
        """
        document = self._load(context, ATTR_STATS, STORAGE_KEY_STATS)
        if document is None:
            return UserStats()
        return parse_stats(document)

    def save_user_stats(self, context: SessionContext, stats: UserStats) -> None:
        """Save stats to the local cache, then to the remote store."""
        document = stats.to_dict()
        self._cache.write_json(STORAGE_KEY_STATS, document)
        self._write_remote(context, ATTR_STATS, document)
