"""UI module for gitswitch."""

from rich import box
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from .profile import ProfileStore
from .ui_common import (
    confirm_action,
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from .version import __version__

MENU_OPTIONS = (
    ("1", "Add a profile"),
    ("2", "Switch profile"),
    ("3", "List profiles"),
    ("4", "Exit"),
)


def print_welcome(git_version: str) -> None:
    """Print welcome banner."""
    welcome_panel = Panel(
        Text.assemble(
            Text("gitswitch\n", style="bold cyan"),
            Text("Switch your global Git identity between stored profiles.\n", style="white"),
            Text(git_version, style="dim"),
        ),
        title=f"[bold cyan]v{__version__}[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print(welcome_panel)


def print_main_menu() -> None:
    """Print the main menu."""
    menu = Table(box=box.ROUNDED, show_header=False, border_style="blue")
    menu.add_column("Option", style="bold yellow", justify="right")
    menu.add_column("Action", style="white")
    for key, label in MENU_OPTIONS:
        menu.add_row(key, label)
    console.print("\n[title]Main menu[/title]")
    console.print(menu)


def print_profile_table(store: ProfileStore, title: str = "Git Profiles") -> None:
    """Print profiles as a numbered table in display order."""
    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        border_style="blue",
    )

    table.add_column("#", justify="right", style="bold yellow")
    table.add_column("Alias", style="cyan")
    table.add_column("User", style="blue")
    table.add_column("Email", style="green")

    for number, profile in enumerate(store, start=1):
        table.add_row(str(number), profile.alias, profile.user, profile.email)

    console.print(table)


def print_current_identity(user: str | None, email: str | None) -> None:
    """Print the global identity Git currently uses."""
    console.print("\n[title]Current global identity[/title]")
    console.print(f"[dim]user.name:[/dim]  {user or '[warning]not set[/warning]'}")
    console.print(f"[dim]user.email:[/dim] {email or '[warning]not set[/warning]'}")


def print_farewell() -> None:
    console.print("\n[bold cyan]Goodbye![/bold cyan]")


def prompt_menu_choice() -> str:
    """Ask for a main menu option."""
    return Prompt.ask("[cyan]Choose an option[/cyan]", console=console).strip()


def prompt_field(label: str) -> str:
    """Ask for one profile field."""
    return Prompt.ask(f"[cyan]{label}[/cyan]", console=console)


def prompt_selection(count: int) -> str:
    """Ask for a profile number between 1 and ``count``."""
    return Prompt.ask(f"[cyan]Profile number (1-{count})[/cyan]", console=console)
