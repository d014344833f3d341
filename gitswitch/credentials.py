"""Clearing of cached Git host credentials."""

import logging
import re
import subprocess
from dataclasses import dataclass, field
from typing import Iterable

from .exceptions import ExternalCommandFailure
from .git import GitClient
from .ui_common import print_info, print_success, print_warning

logger = logging.getLogger(__name__)

SERVICE_HOST = "github.com"
SERVICE_PATTERNS = ("github",)

# Read-only remote used to make git authenticate again
PROBE_TARGET = "https://github.com/github/gitignore.git"

# Identifiers older Git Credential Manager releases stored credentials under
LEGACY_TARGETS = (
    "git:https://github.com",
    "LegacyGeneric:target=git:https://github.com",
    "gh:github.com",
    "LegacyGeneric:target=gh:github.com",
    "LegacyGeneric:target=GitHub - https://api.github.com/",
)

TARGET_LINE = re.compile(r"^\s*Target:\s*(?P<target>.+?)\s*$", re.MULTILINE)


def parse_targets(output: str) -> list[str]:
    """Extract credential identifiers from ``cmdkey /list`` output."""
    return [match.group("target") for match in TARGET_LINE.finditer(output)]


def matching_targets(targets: Iterable[str], patterns: Iterable[str] = SERVICE_PATTERNS) -> list[str]:
    """Keep the targets that belong to the service (case-insensitive)."""
    patterns = [p.lower() for p in patterns]
    return [t for t in targets if any(p in t.lower() for p in patterns)]


class CredentialStore:
    """Windows Credential Manager, driven through ``cmdkey``."""

    def __init__(self, executable: str = "cmdkey") -> None:
        self.executable = executable

    def _run(self, *args: str) -> str:
        command = [self.executable, *args]
        logger.debug(f"Running: {' '.join(command)}")
        try:
            result = subprocess.run(command, capture_output=True, text=True, errors="replace")
        except OSError as e:
            raise ExternalCommandFailure(command, details=str(e)) from e
        if result.returncode != 0:
            raise ExternalCommandFailure(
                command, result.returncode, details=(result.stderr or result.stdout).strip()
            )
        return result.stdout

    def list_credentials(self) -> list[str]:
        """All stored credential identifiers.

        Raises:
            ExternalCommandFailure: If the store cannot be listed
        """
        return parse_targets(self._run("/list"))

    def delete_credential(self, target: str) -> bool:
        """Delete one credential by its exact identifier."""
        try:
            self._run(f"/delete:{target}")
        except ExternalCommandFailure as e:
            logger.debug(f"Could not delete {target}: {e}")
            return False
        return True


def reject_cached_credential(host: str = SERVICE_HOST) -> bool:
    """Ask git's configured credential helper to forget ``host``."""
    command = ["git", "credential", "reject"]
    try:
        result = subprocess.run(
            command,
            input=f"protocol=https\nhost={host}\n\n",
            capture_output=True,
            text=True,
            errors="replace",
        )
    except OSError as e:
        logger.warning(f"git credential reject failed: {e}")
        return False
    if result.returncode != 0:
        logger.warning(f"git credential reject exited with {result.returncode}: {result.stderr.strip()}")
        return False
    return True


@dataclass
class InvalidationResult:
    """What clearing credentials managed to do."""
    deleted: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    rejected: bool = False
    probe_ok: bool = False


def clear_and_reauth(
    probe_target: str,
    store: CredentialStore,
    client: GitClient,
) -> InvalidationResult:
    """Remove cached credentials for the service and trigger a fresh login.

    Individual failures are reported and skipped; the sequence always runs
    to the end.
    """
    result = InvalidationResult()

    try:
        targets = matching_targets(store.list_credentials())
    except ExternalCommandFailure as e:
        logger.warning(f"Could not list stored credentials: {e}")
        print_warning("Could not read the system credential store, skipping stored credentials")
        targets = []

    for target in targets:
        if store.delete_credential(target):
            result.deleted.append(target)
            print_success(f"Removed stored credential: {target}")
        else:
            result.failed.append(target)
            print_warning(f"Could not remove stored credential: {target}")

    for target in LEGACY_TARGETS:
        if target in result.deleted or target in result.failed:
            continue
        if store.delete_credential(target):
            result.deleted.append(target)
            print_success(f"Removed legacy credential: {target}")

    if not result.deleted and not result.failed:
        print_info("No stored credentials found")

    result.rejected = reject_cached_credential()

    print_info("Contacting the remote, a login prompt may open")
    result.probe_ok = client.ls_remote(probe_target)
    if result.probe_ok:
        print_success("Remote reachable")
        print_info(
            f"{probe_target} may be public and not ask for a login. "
            "If no prompt appeared, run 'git fetch' in one of your private repositories."
        )
    else:
        print_warning(
            "Could not trigger re-authentication. "
            "Run a git network operation such as 'git fetch' to sign in again."
        )

    return result
