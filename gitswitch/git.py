"""Git configuration management."""

import logging
import os
from dataclasses import dataclass, field

# GitPython refuses to import without a git executable; the installation
# check reports that case to the user instead.
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

import git  # noqa: E402
from git.exc import CommandError, GitCommandError  # noqa: E402

from .exceptions import ExternalCommandFailure  # noqa: E402
from .system import credential_helper_for  # noqa: E402
from .ui_common import print_success, print_warning  # noqa: E402

logger = logging.getLogger(__name__)

# Exit status of `git config --unset` when the key is not set
GIT_CONFIG_KEY_NOT_SET = 5

IDENTITY_KEYS = ("user.name", "user.email")


class GitClient:
    """Runs the git commands gitswitch needs against the global config."""

    def __init__(self, runner: git.Git | None = None) -> None:
        self.git = runner or git.Git()

    def _run(self, *args: str) -> str:
        command = ["git", *args]
        logger.debug(f"Running: {' '.join(command)}")
        try:
            return self.git.execute(command)
        except GitCommandError as e:
            raise ExternalCommandFailure(command, e.status, details=str(e.stderr).strip()) from e
        except CommandError as e:
            raise ExternalCommandFailure(command, details=str(e)) from e

    def get_config(self, key: str) -> str | None:
        """Read a global config value, ``None`` if unset."""
        try:
            return self._run("config", "--global", "--get", key).strip() or None
        except ExternalCommandFailure:
            return None

    def unset_config(self, key: str) -> bool:
        """Remove a global config key. A key that is not set counts as success."""
        try:
            self._run("config", "--global", "--unset-all", key)
        except ExternalCommandFailure as e:
            if e.returncode == GIT_CONFIG_KEY_NOT_SET:
                logger.debug(f"{key} was not set")
                return True
            logger.warning(f"Failed to unset {key}: {e}")
            return False
        return True

    def set_config(self, key: str, value: str) -> bool:
        """Set a global config key."""
        try:
            self._run("config", "--global", key, value)
        except ExternalCommandFailure as e:
            logger.warning(f"Failed to set {key}: {e}")
            return False
        return True

    def ls_remote(self, url: str) -> bool:
        """List remote heads; used to trigger authentication."""
        try:
            self._run("ls-remote", "--heads", url)
        except ExternalCommandFailure as e:
            logger.warning(f"ls-remote against {url} failed: {e}")
            return False
        return True


@dataclass
class ApplyResult:
    """Outcome of each step of applying an identity."""
    unset: dict[str, bool] = field(default_factory=dict)
    applied: dict[str, bool] = field(default_factory=dict)
    credential_helper: bool = False

    @property
    def ok(self) -> bool:
        return (
            all(self.unset.values())
            and all(self.applied.values())
            and self.credential_helper
        )


def apply_identity(client: GitClient, user: str, email: str) -> ApplyResult:
    """Make ``user``/``email`` the global Git identity.

    Every step runs even if an earlier one failed. Nothing is rolled back;
    running it again converges on the same configuration.
    """
    result = ApplyResult()

    for key in IDENTITY_KEYS:
        result.unset[key] = client.unset_config(key)
        if not result.unset[key]:
            print_warning(f"Could not clear the existing {key}")

    for key, value in zip(IDENTITY_KEYS, (user, email)):
        result.applied[key] = client.set_config(key, value)
        if result.applied[key]:
            print_success(f"Set {key} to {value}")
        else:
            print_warning(f"Could not set {key}")

    helper = credential_helper_for()
    result.credential_helper = client.set_config("credential.helper", helper)
    if result.credential_helper:
        print_success(f"Credential helper set to {helper}")
    else:
        print_warning(f"Could not set credential.helper to {helper}")

    return result
