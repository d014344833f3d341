"""Custom exceptions for gitswitch."""


class GitswitchError(Exception):
    """Base exception for gitswitch."""

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConfigLoadError(GitswitchError):
    """The profiles file could not be read or parsed."""
    pass


class InvalidInput(GitswitchError):
    """User input failed validation."""
    pass


class DuplicateAlias(GitswitchError):
    """A profile with the same alias already exists."""

    def __init__(self, alias: str) -> None:
        self.alias = alias
        super().__init__(
            f"Profile '{alias}' already exists",
            details="Choose a different alias for the new profile",
        )


class MissingDependency(GitswitchError):
    """A required external program is not installed."""
    pass


class ExternalCommandFailure(GitswitchError):
    """An external command exited with a non-zero status."""

    def __init__(
        self,
        command: list[str],
        returncode: int | None = None,
        details: str | None = None,
    ) -> None:
        self.command = command
        self.returncode = returncode
        status = f" ({returncode})" if returncode is not None else ""
        super().__init__(
            f"Command failed{status}: {' '.join(command)}",
            details=details,
        )
