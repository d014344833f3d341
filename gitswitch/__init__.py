"""gitswitch - switch the global Git identity between stored profiles."""

from gitswitch.cli import cli
from gitswitch.profile import Profile, ProfileStore, add_profile, load_profiles, save_profiles
from gitswitch.version import __version__

__all__ = [
    "Profile",
    "ProfileStore",
    "__version__",
    "add_profile",
    "cli",
    "load_profiles",
    "save_profiles",
]
