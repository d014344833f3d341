"""Main entry point for direct module execution."""

import logging
import sys

from .cli import cli
from .exceptions import GitswitchError
from .ui_common import print_error

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point."""
    try:
        cli()
    except GitswitchError as e:
        print_error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.error("Fatal error", exc_info=True)
        print_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
