"""Pytest fixtures for dfhv tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

import pytest

from dfhv.store.memory import MemoryTableStore

TASK_HUB = "TestHub"
INSTANCES_TABLE = f"{TASK_HUB}Instances"
HISTORY_TABLE = f"{TASK_HUB}History"


@pytest.fixture
def instance_rows() -> list[dict[str, Any]]:
    """Instances table rows for three orchestrations."""
    return [
        {
            "PartitionKey": "order-001",
            "RowKey": "",
            "Timestamp": "2025-01-15T10:00:00Z",
            "Name": "ProcessOrder",
            "CreatedTime": "2025-01-15T09:59:58Z",
            "LastUpdatedTime": "2025-01-15T10:00:00Z",
            "ExecutionId": "exec-a",
            "Input": '{"orderId": 1}',
            "RuntimeStatus": "Completed",
            "Version": "",
        },
        {
            "PartitionKey": "order-002",
            "RowKey": "",
            "Timestamp": "2025-01-15T12:00:00Z",
            "Name": "ProcessOrder",
            "CreatedTime": "2025-01-15T11:59:00Z",
            "LastUpdatedTime": "2025-01-15T12:00:00Z",
            "ExecutionId": "exec-b",
            "Input": '{"orderId": 2}',
            "RuntimeStatus": "Running",
            "Version": "",
        },
        {
            "PartitionKey": "refund 003",
            "RowKey": "",
            "Timestamp": "2025-01-16T08:30:00Z",
            "Name": "IssueRefund",
            "CreatedTime": "2025-01-16T08:29:00Z",
            "LastUpdatedTime": "2025-01-16T08:30:00Z",
            "ExecutionId": "exec-c",
            "Input": None,
            "RuntimeStatus": "Failed",
            "Version": "2",
        },
    ]


@pytest.fixture
def history_rows() -> list[dict[str, Any]]:
    """History table rows, stored out of row-key order."""
    return [
        {
            "PartitionKey": "order-001",
            "RowKey": "10",
            "EventId": -1,
            "EventType": "ExecutionCompleted",
            "OrchestrationStatus": "Completed",
            "Result": '"done"',
            "IsPlayed": False,
            "ExecutionId": "exec-a",
        },
        {
            "PartitionKey": "order-001",
            "RowKey": "0",
            "EventId": -1,
            "EventType": "OrchestratorStarted",
            "IsPlayed": True,
            "ExecutionId": "exec-a",
        },
        {
            "PartitionKey": "order-002",
            "RowKey": "0",
            "EventId": -1,
            "EventType": "OrchestratorStarted",
            "IsPlayed": False,
            "ExecutionId": "exec-b",
        },
        {
            "PartitionKey": "order-001",
            "RowKey": "2",
            "EventId": 0,
            "EventType": "TaskScheduled",
            "Name": "ChargeCard",
            "IsPlayed": True,
            "ExecutionId": "exec-a",
        },
        {
            "PartitionKey": "order-001",
            "RowKey": "1",
            "EventId": -1,
            "EventType": "ExecutionStarted",
            "Name": "ProcessOrder",
            "Input": '{"orderId": 1}',
            "OrchestrationInstance": '{"InstanceId": "order-001", "ExecutionId": "exec-a"}',
            "IsPlayed": True,
            "ExecutionId": "exec-a",
        },
    ]


@pytest.fixture
def memory_store(
    instance_rows: list[dict[str, Any]], history_rows: list[dict[str, Any]]
) -> MemoryTableStore:
    """Store holding both tables of the test hub."""
    return MemoryTableStore({INSTANCES_TABLE: instance_rows, HISTORY_TABLE: history_rows})

