"""Test configuration and fixtures."""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from gitswitch.exceptions import ExternalCommandFailure


class FakeGitClient:
    """In-memory stand-in for GitClient."""

    def __init__(self, probe_ok: bool = True, failing_keys: tuple[str, ...] = ()) -> None:
        self.config: dict[str, str] = {}
        self.calls: list[tuple[str, ...]] = []
        self.probe_ok = probe_ok
        self.failing_keys = failing_keys

    def get_config(self, key: str) -> str | None:
        return self.config.get(key)

    def unset_config(self, key: str) -> bool:
        self.calls.append(("unset", key))
        self.config.pop(key, None)
        return True

    def set_config(self, key: str, value: str) -> bool:
        self.calls.append(("set", key, value))
        if key in self.failing_keys:
            return False
        self.config[key] = value
        return True

    def ls_remote(self, url: str) -> bool:
        self.calls.append(("ls-remote", url))
        return self.probe_ok


class FakeCredentialStore:
    """In-memory stand-in for the OS credential store."""

    def __init__(self, targets: list[str] | None = None, undeletable: tuple[str, ...] = ()) -> None:
        self.targets = list(targets or [])
        self.undeletable = undeletable
        self.deleted: list[str] = []
        self.list_calls = 0

    def list_credentials(self) -> list[str]:
        self.list_calls += 1
        return list(self.targets)

    def delete_credential(self, target: str) -> bool:
        if target in self.undeletable or target not in self.targets:
            return False
        self.targets.remove(target)
        self.deleted.append(target)
        return True


class BrokenCredentialStore(FakeCredentialStore):
    """Credential store whose CLI is not available."""

    def list_credentials(self) -> list[str]:
        raise ExternalCommandFailure(["cmdkey", "/list"], details="not found")


@pytest.fixture(autouse=True)
def no_pause(monkeypatch) -> None:
    """Skip the cosmetic pause after status messages."""
    monkeypatch.setattr("gitswitch.ui_common.PAUSE_SECONDS", 0)


@pytest.fixture(autouse=True)
def no_git_credential_reject(monkeypatch) -> None:
    """Never touch the real git credential helper from tests."""
    monkeypatch.setattr("gitswitch.credentials.reject_cached_credential", lambda host="github.com": True)


@pytest.fixture
def profiles_file(tmp_path: Path, monkeypatch) -> Path:
    """Point the profiles file at a temporary location."""
    path = tmp_path / "config" / "gitswitch" / "profiles.json"
    monkeypatch.setattr("gitswitch.profile.PROFILES_FILE", path)
    return path


@pytest.fixture
def git_client() -> FakeGitClient:
    return FakeGitClient()


@pytest.fixture
def credential_store() -> FakeCredentialStore:
    return FakeCredentialStore(
        targets=[
            "LegacyGeneric:target=git:https://github.com",
            "LegacyGeneric:target=GitHub - https://api.github.com/bob",
            "Domain:target=MicrosoftAccount:user=bob",
        ]
    )


@pytest.fixture
def scripted_input(monkeypatch) -> Callable[..., None]:
    """Feed answers to the menu prompts in order."""
    def install(*answers: str) -> None:
        queue: Iterator[str] = iter(answers)

        def next_answer(*args, **kwargs) -> str:
            try:
                return next(queue)
            except StopIteration:
                raise EOFError from None

        def next_confirm(*args, **kwargs) -> bool:
            return next_answer().lower().startswith("y")

        monkeypatch.setattr("gitswitch.menu.prompt_menu_choice", next_answer)
        monkeypatch.setattr("gitswitch.menu.prompt_field", next_answer)
        monkeypatch.setattr("gitswitch.menu.prompt_selection", next_answer)
        monkeypatch.setattr("gitswitch.menu.confirm_action", next_confirm)

    return install
