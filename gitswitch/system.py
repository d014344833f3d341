"""System compatibility checks."""

import logging
import platform
import subprocess
from enum import Enum, auto

from .exceptions import MissingDependency

logger = logging.getLogger(__name__)


class SystemType(Enum):
    """Supported system types."""
    WINDOWS = auto()
    LINUX = auto()
    MACOS = auto()
    UNKNOWN = auto()

    @classmethod
    def detect(cls) -> "SystemType":
        """Detect the current system type."""
        system = platform.system().lower()

        if system == "windows":
            return cls.WINDOWS
        elif system == "darwin":
            return cls.MACOS
        elif system == "linux":
            return cls.LINUX

        return cls.UNKNOWN


def credential_helper_for(system: SystemType | None = None) -> str:
    """Name of the credential helper git should use on this platform."""
    system = system or SystemType.detect()
    if system == SystemType.MACOS:
        return "osxkeychain"
    return "manager"


def check_git_installation() -> tuple[bool, str]:
    """Check if Git is installed and get its version.

    Returns:
        Tuple of (is_installed, version_string)

    Raises:
        MissingDependency: If git cannot be executed
    """
    logger.debug("Checking Git installation")
    try:
        result = subprocess.run(
            ["git", "--version"],
            check=True,
            capture_output=True,
            text=True,
        )
        logger.debug(f"Git version: {result.stdout.strip()}")
        return True, result.stdout.strip()
    except subprocess.CalledProcessError as e:
        logger.error(f"Git check failed: {e.stderr}")
        raise MissingDependency(
            "Git is not installed or not accessible",
            details=f"Error: {e.stderr}",
        )
    except FileNotFoundError:
        logger.error("Git not found")
        raise MissingDependency(
            "Git is not installed",
            details="Please install Git and make sure it is on your PATH",
        )
