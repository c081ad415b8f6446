"""Tests for configuration loading."""

import pytest
import pydantic

from journal_query.application.config import Config


def test_config_creation():
    """Test configuration defaults."""
    config = Config()

    assert config.default_interval == "boot"
    assert config.range_lookback_hours == 24
    assert config.journalctl_binary == "journalctl"
    assert config.log_level == "INFO"


def test_config_from_environment(monkeypatch):
    """Test reading settings from prefixed environment variables."""
    monkeypatch.setenv("JOURNAL_QUERY_DEFAULT_INTERVAL", "yesterday")
    monkeypatch.setenv("JOURNAL_QUERY_RANGE_LOOKBACK_HOURS", "6")

    config = Config()

    assert config.default_interval == "yesterday"
    assert config.range_lookback_hours == 6


def test_unknown_default_interval():
    """Test that the default interval must exist in the catalog."""
    with pytest.raises(pydantic.ValidationError):
        Config(default_interval="forever")


@pytest.mark.parametrize("name", ["config.json", "config.yaml"])
def test_save_and_load(tmp_path, name):
    """Test saving and loading configuration files."""
    path = tmp_path / "nested" / name
    Config(default_interval="today", timestamp_format="%Y-%m-%d").save_to_file(path)

    loaded = Config.load_from_file(path)

    assert loaded.default_interval == "today"
    assert loaded.timestamp_format == "%Y-%m-%d"


def test_unsupported_format(tmp_path):
    """Test rejecting unknown file types."""
    with pytest.raises(ValueError):
        Config().save_to_file(tmp_path / "config.toml")

    path = tmp_path / "config.ini"
    path.write_text("[journal]\n")
    with pytest.raises(ValueError):
        Config.load_from_file(path)
