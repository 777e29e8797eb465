"""
Document storage backends for Aptitude Arena.

Two kinds of storage sit behind the persistence layer:

- A remote document store addressed by user id plus a fixed sub-key
  ("progress" or "stats"). ``DynamoDbDocumentStore`` keeps all documents
  of a user in a single DynamoDB item, one attribute per sub-key.
- A local cache of JSON blobs on disk (``LocalCache``), used as backup
  and as the fallback when the remote store is unavailable.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from aptitude_arena.errors import RemoteStoreError

logger = logging.getLogger(__name__)

# DynamoDB partition key holding the user id
PARTITION_KEY = "id"


class DocumentStore(ABC):
    """A remote key-value document store namespaced per user."""

    @abstractmethod
    def read(self, user_id: str, key: str) -> dict | None:
        """
        Read a document.

        Returns:
            The document, or None if it does not exist.

        Raises:
            RemoteStoreError: If the store cannot be reached.
        """

    @abstractmethod
    def write(self, user_id: str, key: str, document: dict) -> None:
        """
        Write (replace) a document.

        Raises:
            RemoteStoreError: If the store cannot be reached.
        """


class DynamoDbDocumentStore(DocumentStore):
    """
    DynamoDB-backed document store.

    Uses a single-table design with the user id as partition key. Each
    sub-key is a separate attribute of the user's item, so writing
    progress never overwrites stats and vice versa.
    """

    def __init__(self, table, partition_key_name: str = PARTITION_KEY):
        """
        Args:
            table: A boto3 DynamoDB Table resource.
            partition_key_name: Name of the table's hash key.
        """
        self._table = table
        self._partition_key_name = partition_key_name

    def read(self, user_id: str, key: str) -> dict | None:
        try:
            response = self._table.get_item(
                Key={self._partition_key_name: user_id},
                ProjectionExpression="#doc",
                ExpressionAttributeNames={"#doc": key},
            )
        except (BotoCoreError, ClientError) as exc:
            raise RemoteStoreError(f"Failed to read {key} for {user_id}") from exc
        return response.get("Item", {}).get(key)

    def write(self, user_id: str, key: str, document: dict) -> None:
        try:
            self._table.update_item(
                Key={self._partition_key_name: user_id},
                UpdateExpression="SET #doc = :doc",
                ExpressionAttributeNames={"#doc": key},
                ExpressionAttributeValues={":doc": document},
            )
        except (BotoCoreError, ClientError) as exc:
            raise RemoteStoreError(f"Failed to write {key} for {user_id}") from exc


class LocalCache:
    """
    Durable local cache of JSON blobs, one file per key.

    This is the durability floor: it is written on every save, before the
    remote store is attempted.
    """

    def __init__(self, directory: str | Path):
        self._directory = Path(directory).expanduser()

    @property
    def directory(self) -> Path:
        return self._directory

    def _path(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def read_json(self, key: str) -> Any | None:
        """
        Load and parse the blob stored under ``key``.

        Returns:
            The parsed value, or None if nothing is stored or the stored
            text is not valid JSON.
        """
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning(f"Ignoring unreadable cache entry {key}: {exc}")
            return None

    def write_json(self, key: str, value: Any) -> None:
        """Serialize ``value`` and store it under ``key``, replacing any previous blob."""
        self._directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp_path = path.with_suffix(".tmp")
        tmp_path.write_text(json.dumps(value), encoding="utf-8")
        os.replace(tmp_path, path)

    def delete(self, key: str) -> None:
        """Remove the blob stored under ``key`` if there is one."""
        self._path(key).unlink(missing_ok=True)
