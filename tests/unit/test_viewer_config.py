"""Tests for viewer configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from dfhv.config import ViewerConfig


class TestViewerConfig:
    """Tests for ViewerConfig."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test default values without environment overrides."""
        monkeypatch.chdir(tmp_path)
        for name in ("DFHV_NOTIFICATION_URL", "DFHV_TASK_HUB", "DFHV_DATA_DIR", "DFHV_PORT"):
            monkeypatch.delenv(name, raising=False)

        config = ViewerConfig()
        assert config.task_hub_name == "DurableFunctionsHub"
        assert config.instances_table == "DurableFunctionsHubInstances"
        assert config.history_table == "DurableFunctionsHubHistory"
        assert config.port == 7072
        assert config.data_dir.resolve() == (tmp_path / "data").resolve()

    def test_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test that environment variables are honoured."""
        monkeypatch.setenv("DFHV_NOTIFICATION_URL", "https://h/api/x?code=ABC")
        monkeypatch.setenv("DFHV_TASK_HUB", "Orders")
        monkeypatch.setenv("DFHV_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("DFHV_PORT", "9000")

        config = ViewerConfig()
        assert config.notification_url == "https://h/api/x?code=ABC"
        assert config.instances_table == "OrdersInstances"
        assert config.history_table == "OrdersHistory"
        assert config.data_dir == tmp_path
        assert config.port == 9000

    def test_field_names_accepted(self, tmp_path: Path) -> None:
        """Test construction by field name, as the CLI does."""
        config = ViewerConfig(task_hub_name="Hub", data_dir=tmp_path)
        assert config.history_table == "HubHistory"

    @pytest.mark.parametrize("url", ["/api/x", "ftp://h/x", "not a url"])
    def test_notification_url_must_be_absolute(self, url: str) -> None:
        """Test that relative or non-http URLs are rejected."""
        with pytest.raises(ValidationError):
            ViewerConfig(notification_url=url)
