"""dfhv - read-only web viewer for durable orchestration history.

Lists orchestration instances of a task hub (optionally filtered by time
range and orchestrator name) and shows the full event history of one
instance.

Usage:
    # Start the viewer
    python -m dfhv serve

Environment variables:
    DFHV_NOTIFICATION_URL: Base URL used to build detail links
    DFHV_TASK_HUB: Task hub name (table prefix)
    DFHV_DATA_DIR: Directory holding <Table>.jsonl files
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
