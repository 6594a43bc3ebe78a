"""Pytest configuration and shared fixtures."""

import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore default structlog configuration after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create CLI runner for testing Click commands."""
    return CliRunner()


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temporary directory on a Unix-like platform."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def clasprc_file(fake_home: Path) -> Path:
    """Write a sample .clasprc.json into the fake home directory."""
    path = fake_home / ".clasprc.json"
    path.write_text('{"token": {"access_token": "token", "expiry_date": 123456}}', encoding="utf-8")
    return path


def _completed(
    stdout: str = "",
    stderr: str = "",
    returncode: int = 0,
) -> subprocess.CompletedProcess:
    """Build a CompletedProcess as returned by subprocess.run."""
    return subprocess.CompletedProcess(args=["gh"], returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def completed():
    """Factory fixture for CompletedProcess results."""
    return _completed


@pytest.fixture
def mock_run():
    """Patch subprocess.run as used by the process executor."""
    with patch("clasp_secrets.utils.process.subprocess.run") as mock:
        mock.return_value = _completed()
        yield mock
