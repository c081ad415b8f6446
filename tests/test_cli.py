"""Tests for the command line interface."""

import json

import pytest
from click.testing import CliRunner

from journal_query.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_intervals_command(runner):
    """Test listing the interval catalog."""
    result = runner.invoke(cli, ["intervals"])

    assert result.exit_code == 0
    assert "previous-boot" in result.output


def test_filters_command(runner):
    """Test listing the filter catalog."""
    result = runner.invoke(cli, ["filters"])

    assert result.exit_code == 0
    assert "priority" in result.output


def test_build_json(runner):
    """Test building a query and printing it as JSON."""
    result = runner.invoke(cli, [
        "build", "--interval", "today",
        "-f", "unit=sshd.service", "-f", "unit=nginx.service",
        "-f", "priority=err",
        "--format", "json",
    ])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "interval": "today",
        "filters": {"unit": ["sshd.service", "nginx.service"], "priority": "err"},
    }


def test_build_disabled_and_blank(runner):
    """Test that disabled and blank filters are left out."""
    result = runner.invoke(cli, [
        "build", "-f", "unit=sshd.service", "-f", "boot-id=  ",
        "--disable", "unit", "--format", "json",
    ])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"interval": "boot", "filters": {}}


def test_build_journalctl(runner):
    """Test rendering a range query as a journalctl command."""
    result = runner.invoke(cli, [
        "build", "--since", "2024-01-01T00:00:00", "-f", "priority=crit",
        "--format", "journalctl",
    ])

    assert result.exit_code == 0
    assert result.stdout.strip() == "journalctl '--since=2024-01-01 00:00:00' --priority=crit"


def test_build_inverted_range(runner):
    """Test that an inverted range exits with an error."""
    result = runner.invoke(cli, [
        "build", "--since", "2024-01-02", "--until", "2024-01-01",
    ])

    assert result.exit_code == 1
    assert "Invalid query" in result.output


def test_build_unknown_filter(runner):
    """Test that unknown filters exit with an error."""
    result = runner.invoke(cli, ["build", "-f", "colour=blue"])

    assert result.exit_code == 1


def test_build_malformed_filter(runner):
    """Test that filters must be NAME=VALUE."""
    result = runner.invoke(cli, ["build", "-f", "unit"])

    assert result.exit_code == 2


def test_build_rich(runner):
    """Test the default rich output."""
    result = runner.invoke(cli, ["build", "-i", "yesterday", "-f", "unit=cron.service"])

    assert result.exit_code == 0
    assert "Yesterday" in result.output
    assert "cron.service" in result.output


def test_config_save_and_show(runner, tmp_path):
    """Test saving configuration and loading it back."""
    path = tmp_path / "config.json"

    result = runner.invoke(cli, ["config-save", "--output", str(path)])
    assert result.exit_code == 0
    assert path.exists()

    result = runner.invoke(cli, ["--config", str(path), "config-show"])
    assert result.exit_code == 0
    assert "journalctl_binary" in result.output
