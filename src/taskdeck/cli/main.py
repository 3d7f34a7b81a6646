# src/taskdeck/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs one console session.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_session
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    added = run_console_session(state)

    logger.info("Bye. added=%d", added)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
