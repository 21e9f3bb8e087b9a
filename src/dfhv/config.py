"""Viewer configuration."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlsplit

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class ViewerConfig(BaseSettings):
    """Configuration for the history viewer.

    Environment variables:
        DFHV_NOTIFICATION_URL: Base notification URL (authority + path + optional
            query carrying the system key) used to build detail links
        DFHV_TASK_HUB: Task hub name, prefix of the Instances/History tables
        DFHV_DATA_DIR: Directory containing <Table>.jsonl files
        DFHV_HOST: Host to bind (127.0.0.1 for security)
        DFHV_PORT: Port to bind
        DFHV_DEBUG: Enable debug logging
    """

    notification_url: str = Field(
        default="http://localhost:7071/runtime/webhooks/durabletask",
        validation_alias="DFHV_NOTIFICATION_URL",
        description="Base notification URL used to build detail links",
    )
    task_hub_name: str = Field(
        default="DurableFunctionsHub",
        validation_alias="DFHV_TASK_HUB",
        description="Task hub name (table prefix)",
    )
    data_dir: Path = Field(
        default_factory=lambda: Path.cwd() / "data",
        validation_alias="DFHV_DATA_DIR",
        description="Directory containing <Table>.jsonl files",
    )

    # Server
    host: str = Field(
        default="127.0.0.1",
        validation_alias="DFHV_HOST",
        description="Host to bind (127.0.0.1 for security)",
    )
    port: int = Field(
        default=7072,
        validation_alias="DFHV_PORT",
        description="Port to bind",
    )
    debug: bool = Field(
        default=False,
        validation_alias="DFHV_DEBUG",
        description="Enable debug logging",
    )

    model_config = {
        "env_prefix": "",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    @field_validator("notification_url")
    @classmethod
    def _check_absolute_url(cls, value: str) -> str:
        parts = urlsplit(value)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"notification_url must be an absolute http(s) URL: {value!r}")
        return value

    @property
    def instances_table(self) -> str:
        """Name of the table holding one row per orchestration instance."""
        return f"{self.task_hub_name}Instances"

    @property
    def history_table(self) -> str:
        """Name of the table holding history events, partitioned by instance id."""
        return f"{self.task_hub_name}History"
