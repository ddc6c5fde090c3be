#!/usr/bin/env python3
"""
Run a single pipeline tick and log the result.
Usage: from project root:
  python scripts/tick_once.py
"""
import logging
import sys

from nifty_ticker.app_context import AppContext
from nifty_ticker.config.logging_config import setup_logging
from nifty_ticker.core.exceptions import ConfigurationError

logger = logging.getLogger("tick_once")


def main() -> int:
    setup_logging()
    ctx = AppContext()
    try:
        ctx.initialize()
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e.message)
        return 2
    ctx.enable_log_output()
    try:
        quote, history = ctx.pipeline.tick()
        logger.info("Origin %s, stale=%s, history=%s", quote.origin.value, quote.is_stale, list(history))
    finally:
        ctx.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
