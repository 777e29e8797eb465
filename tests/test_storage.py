"""
Tests for the storage backends.

The DynamoDB tests at the bottom use testcontainers with LocalStack to
run against a real DynamoDB instance in a container. They are skipped
when no Docker daemon is available.
"""

from decimal import Decimal
from unittest.mock import MagicMock

import boto3
import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from aptitude_arena.errors import RemoteStoreError
from aptitude_arena.storage import PARTITION_KEY, DynamoDbDocumentStore, LocalCache

# DynamoDB table configuration
TABLE_NAME = "AptitudeArenaUserData"


class TestLocalCache:
    """Tests for the JSON file cache."""

    def test_missing_key_returns_none(self, cache):
        assert cache.read_json("nothing") is None

    def test_write_then_read(self, cache):
        cache.write_json("progress", {"logical": {"totalScore": 10}})
        assert cache.read_json("progress") == {"logical": {"totalScore": 10}}

    def test_write_replaces_previous_value(self, cache):
        cache.write_json("stats", {"gamesPlayed": 1})
        cache.write_json("stats", {"gamesPlayed": 2})
        assert cache.read_json("stats") == {"gamesPlayed": 2}

    def test_creates_directory(self, tmp_path):
        cache = LocalCache(tmp_path / "nested" / "dir")
        cache.write_json("key", [1, 2])
        assert (tmp_path / "nested" / "dir" / "key.json").exists()

    def test_no_temp_file_left_behind(self, cache):
        cache.write_json("key", {"a": 1})
        assert [p.name for p in cache.directory.iterdir()] == ["key.json"]

    def test_unparsable_entry_returns_none(self, cache):
        cache.write_json("progress", {})
        (cache.directory / "progress.json").write_text("{not json", encoding="utf-8")
        assert cache.read_json("progress") is None

    def test_delete(self, cache):
        cache.write_json("identity", {"userId": "abc"})
        cache.delete("identity")
        assert cache.read_json("identity") is None

    def test_delete_missing_key(self, cache):
        cache.delete("never-written")

    def test_expands_home_directory(self):
        cache = LocalCache("~/some-cache")
        assert "~" not in str(cache.directory)


class TestDynamoDbDocumentStoreErrors:
    """botocore failures surface as RemoteStoreError."""

    def test_read_client_error(self):
        table = MagicMock()
        table.get_item.side_effect = ClientError(
            {"Error": {"Code": "ResourceNotFoundException", "Message": "no table"}}, "GetItem"
        )
        store = DynamoDbDocumentStore(table)
        with pytest.raises(RemoteStoreError):
            store.read("user", "progress")

    def test_write_connection_error(self):
        table = MagicMock()
        table.update_item.side_effect = EndpointConnectionError(endpoint_url="http://localhost:1")
        store = DynamoDbDocumentStore(table)
        with pytest.raises(RemoteStoreError):
            store.write("user", "stats", {"gamesPlayed": 1})

    def test_read_missing_item(self):
        table = MagicMock()
        table.get_item.return_value = {}
        assert DynamoDbDocumentStore(table).read("user", "progress") is None

    def test_write_sets_single_attribute(self):
        table = MagicMock()
        DynamoDbDocumentStore(table).write("user-1", "stats", {"gamesPlayed": 1})
        table.update_item.assert_called_once_with(
            Key={PARTITION_KEY: "user-1"},
            UpdateExpression="SET #doc = :doc",
            ExpressionAttributeNames={"#doc": "stats"},
            ExpressionAttributeValues={":doc": {"gamesPlayed": 1}},
        )


@pytest.fixture(scope="module")
def localstack_container():
    """Start a LocalStack container for the test module."""
    localstack = pytest.importorskip("testcontainers.localstack")
    try:
        container = localstack.LocalStackContainer(image="localstack/localstack:3.0")
        container.start()
    except Exception as exc:  # docker missing or not running
        pytest.skip(f"LocalStack container unavailable: {exc}")
    yield container
    container.stop()


@pytest.fixture(scope="module")
def dynamodb_resource(localstack_container):
    """Create a DynamoDB resource connected to LocalStack."""
    dynamodb = boto3.resource(
        "dynamodb",
        endpoint_url=localstack_container.get_url(),
        region_name="us-east-1",
        aws_access_key_id="test",
        aws_secret_access_key="test",
    )

    dynamodb.create_table(
        TableName=TABLE_NAME,
        KeySchema=[{"AttributeName": PARTITION_KEY, "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": PARTITION_KEY, "AttributeType": "S"}],
        BillingMode="PAY_PER_REQUEST",
    )
    dynamodb.Table(TABLE_NAME).wait_until_exists()

    yield dynamodb


@pytest.fixture
def dynamodb_table(dynamodb_resource):
    """Get the DynamoDB table and clean it before each test."""
    table = dynamodb_resource.Table(TABLE_NAME)

    scan = table.scan()
    with table.batch_writer() as batch:
        for item in scan.get("Items", []):
            batch.delete_item(Key={PARTITION_KEY: item[PARTITION_KEY]})

    return table


@pytest.mark.integration
class TestDynamoDbDocumentStore:
    """Tests against DynamoDB running in LocalStack."""

    def test_read_missing_user(self, dynamodb_table):
        store = DynamoDbDocumentStore(dynamodb_table)
        assert store.read("nobody", "progress") is None

    def test_write_then_read(self, dynamodb_table):
        store = DynamoDbDocumentStore(dynamodb_table)
        store.write("user-1", "stats", {"gamesPlayed": 3, "lastPlayedDate": "2025-03-10"})

        document = store.read("user-1", "stats")

        assert document == {"gamesPlayed": Decimal("3"), "lastPlayedDate": "2025-03-10"}

    def test_sub_keys_are_independent(self, dynamodb_table):
        """Writing progress leaves stats of the same user untouched."""
        store = DynamoDbDocumentStore(dynamodb_table)
        store.write("user-1", "stats", {"gamesPlayed": 1})
        store.write("user-1", "progress", {"logical": {"totalScore": 50}})

        assert store.read("user-1", "stats") == {"gamesPlayed": 1}
        item = dynamodb_table.get_item(Key={PARTITION_KEY: "user-1"})["Item"]
        assert set(item) == {PARTITION_KEY, "stats", "progress"}

    def test_users_are_isolated(self, dynamodb_table):
        store = DynamoDbDocumentStore(dynamodb_table)
        store.write("user-1", "stats", {"gamesPlayed": 1})
        assert store.read("user-2", "stats") is None

    def test_missing_table_raises_remote_store_error(self, dynamodb_resource):
        store = DynamoDbDocumentStore(dynamodb_resource.Table("NoSuchTable"))
        with pytest.raises(RemoteStoreError):
            store.read("user-1", "stats")
