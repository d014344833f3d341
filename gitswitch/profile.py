"""Profile storage for gitswitch."""

import json
import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Mapping

from platformdirs import user_config_dir

from .exceptions import ConfigLoadError, DuplicateAlias, InvalidInput
from .ui_common import print_warning

logger = logging.getLogger(__name__)

GITSWITCH_DIR = Path(user_config_dir("gitswitch", appauthor=False))
PROFILES_FILE = GITSWITCH_DIR / "profiles.json"


def get_profiles_file() -> Path:
    """Return the path of the profiles file for the current user."""
    return PROFILES_FILE


@dataclass(frozen=True)
class Profile:
    """A stored Git identity."""
    alias: str
    user: str
    email: str

    def to_dict(self) -> dict[str, str]:
        """Convert profile to dictionary for serialization."""
        return {"user": self.user, "email": self.email}

    @classmethod
    def from_dict(cls, alias: str, data: Any) -> "Profile":
        """Create profile from a stored entry.

        Raises:
            InvalidInput: If the entry does not have the expected shape
        """
        if not isinstance(data, dict):
            raise InvalidInput(f"Entry '{alias}' is not an object")
        user = data.get("user")
        email = data.get("email")
        if not isinstance(user, str) or not isinstance(email, str):
            raise InvalidInput(f"Entry '{alias}' must have string 'user' and 'email'")
        return make_profile(alias, user, email)


def make_profile(alias: str, user: str, email: str) -> Profile:
    """Build a profile from raw input, stripping surrounding whitespace.

    Raises:
        InvalidInput: If any field is empty or whitespace-only
    """
    values = {"alias": alias, "user": user, "email": email}
    for name, value in values.items():
        if not value or not value.strip():
            raise InvalidInput(f"{name.capitalize()} cannot be empty")
    return Profile(alias=alias.strip(), user=user.strip(), email=email.strip())


@dataclass(frozen=True)
class ProfileStore:
    """Immutable snapshot of the stored profiles, keyed by alias."""
    profiles: Mapping[str, Profile] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.profiles)

    def __contains__(self, alias: object) -> bool:
        return alias in self.profiles

    def __iter__(self) -> Iterator[Profile]:
        for alias in self.aliases():
            yield self.profiles[alias]

    def get(self, alias: str) -> Profile | None:
        return self.profiles.get(alias)

    def aliases(self) -> list[str]:
        """Aliases in display order."""
        return sorted(self.profiles)

    def with_profile(self, profile: Profile) -> "ProfileStore":
        """Return a new store that also contains ``profile``."""
        profiles = dict(self.profiles)
        profiles[profile.alias] = profile
        return ProfileStore(profiles=profiles)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {alias: self.profiles[alias].to_dict() for alias in self.aliases()}


def _read_profiles_file(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigLoadError(f"Failed to load profiles from {path}", details=str(e)) from e


def load_profiles(path: Path | None = None) -> ProfileStore:
    """Load profiles from disk.

    A missing file yields an empty store. A corrupt file is reported as a
    warning and also yields an empty store. Entries with the wrong shape are
    dropped individually.
    """
    path = path or get_profiles_file()
    if not path.exists():
        logger.debug(f"No profiles file at {path}")
        return ProfileStore()

    try:
        data = _read_profiles_file(path)
        if not isinstance(data, dict):
            raise ConfigLoadError(
                f"Failed to load profiles from {path}",
                details="Top-level JSON value is not an object",
            )
    except ConfigLoadError as e:
        logger.warning(f"{e.message}: {e.details}")
        print_warning(f"{e.message}, starting with no profiles")
        return ProfileStore()

    profiles: dict[str, Profile] = {}
    for alias, entry in data.items():
        try:
            profile = Profile.from_dict(alias, entry)
        except InvalidInput as e:
            logger.warning(f"Skipping malformed profile: {e}")
            print_warning(f"Skipping malformed profile: {e}")
            continue
        if profile.alias in profiles:
            logger.warning(f"Duplicate alias '{profile.alias}' in {path}, keeping the later entry")
            print_warning(f"Duplicate alias '{profile.alias}' in profiles file, keeping the later entry")
        profiles[profile.alias] = profile

    logger.debug(f"Loaded {len(profiles)} profiles from {path}")
    return ProfileStore(profiles=profiles)


def save_profiles(store: ProfileStore, path: Path | None = None) -> None:
    """Save the whole store to disk, replacing the previous file."""
    path = path or get_profiles_file()
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".profiles-", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(store.to_dict(), f, indent=2, sort_keys=True)
            f.write("\n")
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.debug(f"Saved {len(store)} profiles to {path}")


def add_profile(store: ProfileStore, alias: str, user: str, email: str) -> ProfileStore:
    """Add a profile and return the updated store.

    The caller is responsible for persisting the result.

    Raises:
        InvalidInput: If alias, user or email is empty
        DuplicateAlias: If the alias is already taken
    """
    profile = make_profile(alias, user, email)
    if profile.alias in store:
        raise DuplicateAlias(profile.alias)
    return store.with_profile(profile)


def parse_selection(raw: str) -> int:
    """Parse a numeric menu selection."""
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidInput(f"'{raw}' is not a number") from None


def select_alias(store: ProfileStore, choice: int) -> str:
    """Return the alias at 1-based position ``choice`` in display order."""
    aliases = store.aliases()
    if not 1 <= choice <= len(aliases):
        raise InvalidInput(f"Choose a number between 1 and {len(aliases)}")
    return aliases[choice - 1]
