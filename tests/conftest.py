"""Shared fixtures for the Aptitude Arena tests."""

import copy
from datetime import date
from unittest.mock import MagicMock

import pytest

from aptitude_arena.errors import RemoteStoreError
from aptitude_arena.identity import SessionContext
from aptitude_arena.persistence import PersistenceManager
from aptitude_arena.progress import ProgressStore
from aptitude_arena.stats import StatsEngine
from aptitude_arena.storage import DocumentStore, LocalCache


class InMemoryDocumentStore(DocumentStore):
    """Remote store stand-in keeping documents in a dict."""

    def __init__(self):
        self.documents: dict[tuple[str, str], dict] = {}

    def read(self, user_id, key):
        document = self.documents.get((user_id, key))
        return copy.deepcopy(document)

    def write(self, user_id, key, document):
        self.documents[(user_id, key)] = copy.deepcopy(document)


class FakeClock:
    """Callable clock whose day can be moved by the test."""

    def __init__(self, today: date):
        self.today = today

    def __call__(self) -> date:
        return self.today


@pytest.fixture
def cache(tmp_path):
    """A local cache in a fresh temporary directory."""
    return LocalCache(tmp_path / "cache")


@pytest.fixture
def remote():
    return InMemoryDocumentStore()


@pytest.fixture
def failing_remote():
    """A remote store that fails every read and write."""
    store = MagicMock(spec=DocumentStore)
    store.read.side_effect = RemoteStoreError("unreachable")
    store.write.side_effect = RemoteStoreError("unreachable")
    return store


@pytest.fixture
def context():
    return SessionContext(user_id="test-user-123")


@pytest.fixture
def signed_out():
    return SessionContext()


@pytest.fixture
def clock():
    return FakeClock(date(2025, 3, 10))


@pytest.fixture
def persistence(cache, remote):
    return PersistenceManager(cache, remote)


@pytest.fixture
def stats_engine(persistence, clock):
    return StatsEngine(persistence, today=clock)


@pytest.fixture
def store(persistence, stats_engine):
    return ProgressStore(persistence, stats_engine)
