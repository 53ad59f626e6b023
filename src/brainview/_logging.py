"""Logging configuration for brainview.

Usage in other modules:
    import logging
    log = logging.getLogger(__name__)

The log level can be configured via the BRAINVIEW_LOG_LEVEL environment variable
(DEBUG, INFO, WARNING, ERROR). Defaults to INFO.
"""

import logging
import os
import sys


def configure_logging() -> None:
    """Configure logging for the brainview package.

    Call this once at application startup (cli.py or the web server entry point).
    Subsequent calls are no-ops.
    """
    root_logger = logging.getLogger("brainview")

    if root_logger.handlers:
        return

    level_name = os.environ.get("BRAINVIEW_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            fmt="[%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    # Avoid duplicate messages through the root logger
    root_logger.propagate = False
