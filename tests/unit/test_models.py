"""Tests for row-to-record mapping."""

from datetime import UTC, datetime

from dfhv.models import HistoryEvent, InstanceRecord


class TestInstanceRecord:
    """Tests for InstanceRecord.from_row."""

    def test_full_row(self, instance_rows) -> None:
        """Test that every property maps onto its field."""
        record = InstanceRecord.from_row(instance_rows[0])
        assert record.instance_id == "order-001"
        assert record.name == "ProcessOrder"
        assert record.created_time == datetime(2025, 1, 15, 9, 59, 58, tzinfo=UTC)
        assert record.last_updated_time == datetime(2025, 1, 15, 10, 0, tzinfo=UTC)
        assert record.execution_id == "exec-a"
        assert record.input == '{"orderId": 1}'
        assert record.runtime_status == "Completed"
        assert record.version == ""

    def test_empty_row(self) -> None:
        """Test that an empty bag yields an all-empty record."""
        record = InstanceRecord.from_row({})
        assert record.instance_id == ""
        assert record.name is None
        assert record.created_time is None

    def test_mistyped_properties_become_none(self) -> None:
        """Test that wrong types are dropped instead of raising."""
        record = InstanceRecord.from_row(
            {
                "PartitionKey": "i-1",
                "Name": 42,
                "CreatedTime": "not a time",
                "LastUpdatedTime": 1700000000,
                "Input": {"nested": True},
            }
        )
        assert record.instance_id == "i-1"
        assert record.name is None
        assert record.created_time is None
        assert record.last_updated_time is None
        assert record.input is None

    def test_extra_properties_ignored(self) -> None:
        """Test that unknown properties are ignored."""
        record = InstanceRecord.from_row({"PartitionKey": "i-1", "CustomStatus": "x"})
        assert record.instance_id == "i-1"


class TestHistoryEvent:
    """Tests for HistoryEvent.from_row."""

    def test_full_row(self) -> None:
        """Test that every property maps onto its field."""
        event = HistoryEvent.from_row(
            {
                "PartitionKey": "i-1",
                "RowKey": "3",
                "EventId": 5,
                "EventType": "TaskCompleted",
                "Name": "Charge",
                "Reason": "r",
                "Detail": "d",
                "Input": "in",
                "Result": "out",
                "IsPlayed": True,
                "ExecutionId": "e",
                "TaskScheduledId": 4,
                "OrchestrationInstance": "oi",
                "OrchestrationStatus": "Running",
            }
        )
        assert event.instance_id == "i-1"
        assert event.row == "3"
        assert event.event_id == 5
        assert event.event_type == "TaskCompleted"
        assert event.name == "Charge"
        assert event.reason == "r"
        assert event.detail == "d"
        assert event.input == "in"
        assert event.result == "out"
        assert event.is_played is True
        assert event.execution_id == "e"
        assert event.task_scheduled_id == 4
        assert event.orchestration_instance == "oi"
        assert event.orchestration_status == "Running"

    def test_string_encoded_numbers_and_bools(self) -> None:
        """Test that integers and booleans stored as strings are accepted."""
        event = HistoryEvent.from_row(
            {"RowKey": "0", "EventId": "-1", "TaskScheduledId": " 7 ", "IsPlayed": "False"}
        )
        assert event.event_id == -1
        assert event.task_scheduled_id == 7
        assert event.is_played is False

    def test_mistyped_properties_become_none(self) -> None:
        """Test that wrong types are dropped instead of raising."""
        event = HistoryEvent.from_row(
            {
                "RowKey": 3,
                "EventId": True,
                "TaskScheduledId": "seven",
                "IsPlayed": "yes",
                "Result": ["x"],
            }
        )
        assert event.row == ""
        assert event.event_id is None
        assert event.task_scheduled_id is None
        assert event.is_played is None
        assert event.result is None
