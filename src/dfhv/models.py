"""Typed records and view models.

Table rows are schema-less key/value bags. ``from_row()`` maps a bag onto a
fixed field set and fails closed: a missing or mistyped property becomes
None instead of raising.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from dfhv.timeutil import parse_timestamp

PARTITION_KEY = "PartitionKey"
ROW_KEY = "RowKey"


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "false"):
            return lowered == "true"
    return None


class InstanceRecord(BaseModel):
    """Latest known state of one orchestration instance."""

    instance_id: str
    name: str | None = None
    created_time: datetime | None = None
    last_updated_time: datetime | None = None
    execution_id: str | None = None
    input: str | None = None
    runtime_status: str | None = None
    version: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> InstanceRecord:
        """Map an Instances table row.

        Args:
            row: Raw entity; the partition key is the instance id.

        Returns:
            InstanceRecord with unusable properties set to None.
        """
        return cls(
            instance_id=_as_str(row.get(PARTITION_KEY)) or "",
            name=_as_str(row.get("Name")),
            created_time=parse_timestamp(row.get("CreatedTime")),
            last_updated_time=parse_timestamp(row.get("LastUpdatedTime")),
            execution_id=_as_str(row.get("ExecutionId")),
            input=_as_str(row.get("Input")),
            runtime_status=_as_str(row.get("RuntimeStatus")),
            version=_as_str(row.get("Version")),
        )


class HistoryEvent(BaseModel):
    """One event in an instance's history, keyed by its row key."""

    instance_id: str
    row: str
    event_id: int | None = None
    event_type: str | None = None
    name: str | None = None
    reason: str | None = None
    detail: str | None = None
    input: str | None = None
    result: str | None = None
    is_played: bool | None = None
    execution_id: str | None = None
    task_scheduled_id: int | None = None
    orchestration_instance: str | None = None
    orchestration_status: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> HistoryEvent:
        """Map a History table row.

        Args:
            row: Raw entity; partition key is the instance id, row key the
                event order.

        Returns:
            HistoryEvent with unusable properties set to None.
        """
        return cls(
            instance_id=_as_str(row.get(PARTITION_KEY)) or "",
            row=_as_str(row.get(ROW_KEY)) or "",
            event_id=_as_int(row.get("EventId")),
            event_type=_as_str(row.get("EventType")),
            name=_as_str(row.get("Name")),
            reason=_as_str(row.get("Reason")),
            detail=_as_str(row.get("Detail")),
            input=_as_str(row.get("Input")),
            result=_as_str(row.get("Result")),
            is_played=_as_bool(row.get("IsPlayed")),
            execution_id=_as_str(row.get("ExecutionId")),
            task_scheduled_id=_as_int(row.get("TaskScheduledId")),
            orchestration_instance=_as_str(row.get("OrchestrationInstance")),
            orchestration_status=_as_str(row.get("OrchestrationStatus")),
        )


class IndexItem(InstanceRecord):
    """Instance row on the index page, with a link to its history."""

    detail_url: str


class IndexViewModel(BaseModel):
    """Everything the index page renders."""

    code: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    orchestrator_name: str | None = None
    items: list[IndexItem] = Field(default_factory=list)


class HistoryItem(HistoryEvent):
    """Event row on the detail page."""

    pass


class DetailViewModel(BaseModel):
    """Everything the detail page renders."""

    instance_id: str
    code: str | None = None
    items: list[HistoryItem] = Field(default_factory=list)
