"""Command-line interface."""

import logging
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Any, TypeVar, cast

import click
from rich.logging import RichHandler

from .credentials import PROBE_TARGET, CredentialStore
from .exceptions import GitswitchError
from .git import GitClient
from .menu import Menu
from .profile import get_profiles_file, load_profiles
from .system import check_git_installation
from .ui import print_welcome
from .ui_common import console
from .version import __version__

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])


def handle_errors(f: F) -> F:
    """Decorator to handle errors in CLI commands."""
    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except GitswitchError as e:
            logger.error(f"{e.message}: {e.details}")
            console.print(f"\n[bold red]Error:[/bold red] {str(e)}")
            if e.details:
                console.print(f"[dim]{e.details}[/dim]")
            raise click.Abort()
        except Exception as e:
            logger.error(f"Unexpected error: {str(e)}", exc_info=True)
            console.print(f"\n[bold red]Unexpected error:[/bold red] {str(e)}")
            raise click.Abort()
    return cast(F, wrapper)


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(log_dir: Path, debug: bool = False) -> None:
    """Log to a file next to the profiles file."""
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_dir / "gitswitch.log", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)


def enable_debug_logging() -> None:
    """Send debug output to the console as well as the log file."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.addHandler(RichHandler(console=console, show_path=False))
    logger.debug("Debug mode enabled")


@click.command()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.version_option(__version__, prog_name="gitswitch")
@handle_errors
def cli(debug: bool) -> None:
    """Switch the global Git identity between stored profiles."""
    if debug:
        enable_debug_logging()

    # Nothing else runs without git, not even the log file
    _, git_version = check_git_installation()

    profiles_file = get_profiles_file()
    configure_logging(profiles_file.parent, debug)
    logger.debug("Starting gitswitch")

    print_welcome(git_version)
    menu = Menu(
        profiles_file=profiles_file,
        git_client=GitClient(),
        credential_store=CredentialStore(),
        probe_target=PROBE_TARGET,
    )
    menu.run(load_profiles(profiles_file))
