"""Interactive menu driving profile creation and switching."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Callable

from .credentials import PROBE_TARGET, CredentialStore, clear_and_reauth
from .exceptions import DuplicateAlias, InvalidInput
from .git import GitClient, apply_identity
from .profile import ProfileStore, add_profile, parse_selection, save_profiles, select_alias
from .ui import (
    confirm_action,
    console,
    print_current_identity,
    print_error,
    print_farewell,
    print_info,
    print_main_menu,
    print_profile_table,
    print_success,
    print_warning,
    prompt_field,
    prompt_menu_choice,
    prompt_selection,
)
from .ui_common import pause

logger = logging.getLogger(__name__)


class MenuState(Enum):
    """States of the interactive menu."""
    MAIN_MENU = auto()
    ADDING = auto()
    SELECTING = auto()
    LISTING = auto()
    EXIT = auto()


@dataclass(frozen=True)
class Transition:
    """Next state together with the profile snapshot to carry into it."""
    state: MenuState
    store: ProfileStore


MAIN_MENU_CHOICES = {
    "1": MenuState.ADDING,
    "2": MenuState.SELECTING,
    "3": MenuState.LISTING,
    "4": MenuState.EXIT,
}


class Menu:
    """Runs the menu loop against the given collaborators."""

    def __init__(
        self,
        profiles_file: Path,
        git_client: GitClient,
        credential_store: CredentialStore,
        probe_target: str = PROBE_TARGET,
    ) -> None:
        self.profiles_file = profiles_file
        self.git_client = git_client
        self.credential_store = credential_store
        self.probe_target = probe_target
        self.handlers: dict[MenuState, Callable[[ProfileStore], Transition]] = {
            MenuState.MAIN_MENU: self.main_menu,
            MenuState.ADDING: self.adding,
            MenuState.SELECTING: self.selecting,
            MenuState.LISTING: self.listing,
        }

    def run(self, store: ProfileStore) -> ProfileStore:
        """Drive the menu until the user exits and return the final snapshot."""
        transition = Transition(MenuState.MAIN_MENU, store)
        try:
            while transition.state is not MenuState.EXIT:
                logger.debug(f"Entering {transition.state.name}")
                transition = self.handlers[transition.state](transition.store)
        except (KeyboardInterrupt, EOFError):
            console.print()
            logger.debug("Input closed, leaving menu")
        print_farewell()
        return transition.store

    def main_menu(self, store: ProfileStore) -> Transition:
        print_main_menu()
        choice = prompt_menu_choice()
        state = MAIN_MENU_CHOICES.get(choice)
        if state is None:
            print_warning(f"Invalid option '{choice}', choose 1-{len(MAIN_MENU_CHOICES)}")
            pause()
            return Transition(MenuState.MAIN_MENU, store)
        return Transition(state, store)

    def adding(self, store: ProfileStore) -> Transition:
        """Ask for one profile, persist it, and offer to add another."""
        alias = prompt_field("Alias")
        user = prompt_field("User name")
        email = prompt_field("Email")

        try:
            updated = add_profile(store, alias, user, email)
        except DuplicateAlias as e:
            print_error(f"{e}. {e.details}")
            return Transition(MenuState.ADDING, store)
        except InvalidInput as e:
            print_error(str(e))
            return Transition(MenuState.ADDING, store)

        try:
            save_profiles(updated, self.profiles_file)
        except OSError as e:
            logger.error(f"Failed to save profiles to {self.profiles_file}: {e}")
            print_error(f"Could not save profiles to {self.profiles_file}: {e}")
            return Transition(MenuState.MAIN_MENU, store)
        store = updated
        logger.info(f"Added profile {alias.strip()}")
        print_success(f"Profile '{alias.strip()}' saved")

        if confirm_action("Add another profile?", default=False):
            return Transition(MenuState.ADDING, store)
        return Transition(MenuState.MAIN_MENU, store)

    def selecting(self, store: ProfileStore) -> Transition:
        """Pick a profile and switch the global identity to it."""
        if not len(store):
            print_info("No profiles stored yet. Choose 'Add a profile' first.")
            pause()
            return Transition(MenuState.MAIN_MENU, store)

        print_profile_table(store)
        try:
            alias = select_alias(store, parse_selection(prompt_selection(len(store))))
        except InvalidInput as e:
            print_warning(str(e))
            pause()
            return Transition(MenuState.MAIN_MENU, store)

        self.switch_to(store, alias)
        return Transition(MenuState.EXIT, store)

    def switch_to(self, store: ProfileStore, alias: str) -> None:
        profile = store.get(alias)
        logger.info(f"Switching to profile {alias}")
        print_info(f"Switching to '{alias}' ({profile.user} <{profile.email}>)")

        applied = apply_identity(self.git_client, profile.user, profile.email)
        if not applied.ok:
            print_warning("Some Git settings could not be applied, see messages above")

        clear_and_reauth(self.probe_target, self.credential_store, self.git_client)
        print_success(f"Now using profile '{alias}'")
        pause()

    def listing(self, store: ProfileStore) -> Transition:
        if len(store):
            print_profile_table(store)
        else:
            print_info("No profiles stored yet")
        print_current_identity(
            self.git_client.get_config("user.name"),
            self.git_client.get_config("user.email"),
        )
        pause()
        return Transition(MenuState.MAIN_MENU, store)
