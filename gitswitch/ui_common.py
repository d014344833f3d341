"""Common UI utilities shared across modules."""

import time

from rich.console import Console
from rich.prompt import Confirm
from rich.theme import Theme

# Create a custom theme for consistent styling
theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red",
        "success": "green",
        "title": "bold cyan",
        "highlight": "bold yellow",
        "path": "blue",
        "command": "green",
    }
)

console = Console(theme=theme)

# Seconds to wait after status messages so they can be read
PAUSE_SECONDS = 1.0


def print_error(message: str) -> None:
    """Print error message."""
    console.print(f"[error]Error:[/error] {message}")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[warning]Warning:[/warning] {message}")


def print_info(message: str) -> None:
    """Print info message."""
    console.print(f"[info]Info:[/info] {message}")


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[success]Success:[/success] {message}")


def pause() -> None:
    """Give the user a moment to read the last status message."""
    if PAUSE_SECONDS > 0:
        time.sleep(PAUSE_SECONDS)


def confirm_action(prompt: str, default: bool = True) -> bool:
    """Confirm an action with the user."""
    return Confirm.ask(prompt, default=default, console=console)
