#!/usr/bin/env python3
"""Desktop application entry point.

Run with: python -m nifty_ticker.main_desktop
"""

import sys
import logging

from nifty_ticker.config.logging_config import setup_logging
from nifty_ticker.core.exceptions import ConfigurationError


def main() -> None:
    """Launch the desktop ticker."""
    setup_logging()
    logger = logging.getLogger(__name__)

    logger.info("Starting Nifty 50 Tracker (Desktop)")

    try:
        from nifty_ticker.ui.app import DesktopApp

        app = DesktopApp()
        app.run()

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e.message}")
        sys.exit(2)

    except ImportError as e:
        # Handle missing dependencies
        logger.error(f"Missing dependency: {e}")
        print(f"\nError: Missing required dependency.")
        print(f"Please ensure all dependencies are installed:")
        print(f"  pip install -e '.[desktop]'\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
