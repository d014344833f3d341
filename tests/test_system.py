"""Tests for system checks."""

import subprocess

import pytest

from gitswitch.exceptions import MissingDependency
from gitswitch.system import SystemType, check_git_installation, credential_helper_for


@pytest.fixture
def mock_subprocess(monkeypatch) -> None:
    """Mock subprocess calls."""
    def mock_run(cmd, *args, **kwargs):
        return subprocess.CompletedProcess(
            cmd,
            returncode=0,
            stdout="git version 2.43.0\n",
            stderr="",
        )

    monkeypatch.setattr("subprocess.run", mock_run)


def test_check_git_installation(mock_subprocess) -> None:
    """Test Git installation check."""
    installed, version = check_git_installation()
    assert installed
    assert version == "git version 2.43.0"


def test_check_git_installation_not_found(monkeypatch) -> None:
    """Test Git installation check when Git is not installed."""
    def mock_run(*args, **kwargs):
        raise FileNotFoundError()

    monkeypatch.setattr("subprocess.run", mock_run)

    with pytest.raises(MissingDependency, match="Git is not installed"):
        check_git_installation()


def test_check_git_installation_broken(monkeypatch) -> None:
    """A git binary that fails to run is reported as missing."""
    def mock_run(cmd, *args, **kwargs):
        raise subprocess.CalledProcessError(1, cmd, stderr="boom")

    monkeypatch.setattr("subprocess.run", mock_run)

    with pytest.raises(MissingDependency, match="not accessible"):
        check_git_installation()


@pytest.mark.parametrize(
    "platform_name,expected",
    [
        ("Windows", SystemType.WINDOWS),
        ("Darwin", SystemType.MACOS),
        ("Linux", SystemType.LINUX),
        ("SunOS", SystemType.UNKNOWN),
    ],
)
def test_system_type_detect(monkeypatch, platform_name: str, expected: SystemType) -> None:
    monkeypatch.setattr("platform.system", lambda: platform_name)
    assert SystemType.detect() == expected


def test_credential_helper_for() -> None:
    assert credential_helper_for(SystemType.WINDOWS) == "manager"
    assert credential_helper_for(SystemType.LINUX) == "manager"
    assert credential_helper_for(SystemType.MACOS) == "osxkeychain"
