"""Runtime configuration read from environment variables."""

import os
from dataclasses import dataclass

DEFAULT_TABLE_NAME = "AptitudeArenaUserData"
DEFAULT_REGION = "us-east-1"
DEFAULT_CACHE_DIR = "~/.aptitude_arena"


@dataclass(frozen=True)
class Settings:
    """Storage settings for the progress and stats records."""

    table_name: str = DEFAULT_TABLE_NAME
    region_name: str = DEFAULT_REGION
    endpoint_url: str | None = None  # e.g. LocalStack
    cache_dir: str = DEFAULT_CACHE_DIR
    remote_enabled: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment, falling back to defaults."""
        return cls(
            table_name=os.environ.get("DYNAMODB_TABLE_NAME", DEFAULT_TABLE_NAME),
            region_name=os.environ.get("AWS_REGION", DEFAULT_REGION),
            endpoint_url=os.environ.get("DYNAMODB_ENDPOINT_URL") or None,
            cache_dir=os.environ.get("APTITUDE_ARENA_CACHE_DIR", DEFAULT_CACHE_DIR),
            remote_enabled=os.environ.get("APTITUDE_ARENA_REMOTE", "1") != "0",
        )
