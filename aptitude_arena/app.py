"""
Aptitude Arena service wiring.

This module builds the storage backends, the stats engine and the
progress store from the environment configuration. The presentation
layer calls ``create_services`` once and then uses the returned bundle.
"""

import logging
from dataclasses import dataclass

import boto3

from aptitude_arena.config import Settings
from aptitude_arena.identity import AnonymousIdentityProvider
from aptitude_arena.persistence import PersistenceManager
from aptitude_arena.progress import ProgressStore
from aptitude_arena.stats import StatsEngine
from aptitude_arena.storage import DocumentStore, DynamoDbDocumentStore, LocalCache

# Configure logging
logger = logging.getLogger("aptitude_arena")
logger.setLevel(logging.INFO)


@dataclass
class ArenaServices:
    """Everything the presentation layer needs."""

    settings: Settings
    identity: AnonymousIdentityProvider
    progress_store: ProgressStore


def create_remote_store(settings: Settings) -> DocumentStore:
    """DynamoDB document store for the configured table."""
    dynamodb = boto3.resource(
        "dynamodb",
        region_name=settings.region_name,
        endpoint_url=settings.endpoint_url,
    )
    return DynamoDbDocumentStore(dynamodb.Table(settings.table_name))


def create_services(settings: Settings | None = None) -> ArenaServices:
    """
    Wire up the progress store and identity provider.

    Args:
        settings: Explicit settings; read from the environment if omitted.
    """
    settings = settings or Settings.from_env()
    cache = LocalCache(settings.cache_dir)
    remote = create_remote_store(settings) if settings.remote_enabled else None
    logger.info(
        f"Aptitude Arena storage: cache={cache.directory}, "
        f"remote={'dynamodb:' + settings.table_name if remote else 'disabled'}"
    )

    persistence = PersistenceManager(cache, remote)
    progress_store = ProgressStore(persistence, StatsEngine(persistence))
    return ArenaServices(
        settings=settings,
        identity=AnonymousIdentityProvider(cache),
        progress_store=progress_store,
    )
