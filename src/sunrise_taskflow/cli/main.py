# src/sunrise_taskflow/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState and serves the Flask app with the
werkzeug development server.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..logging_setup import setup_logging
from ..web.app import create_app
from .bootstrap import create_initial_state

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s on %s:%s...", settings.app_name, settings.host, settings.port)

    state = create_initial_state(settings=settings)
    app = create_app(state)

    try:
        app.run(host=settings.host, port=settings.port, debug=settings.debug, threaded=True)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
