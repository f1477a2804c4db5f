"""
Logging setup for the VideoTube backend.

Configures the root logger once so every module can log through
``logging.getLogger(__name__)``.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str = "INFO") -> None:
    """Attach a single stdout handler to the root logger"""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Clear existing handlers so reloads don't duplicate output
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    # Driver heartbeat chatter
    logging.getLogger("pymongo").setLevel(logging.WARNING)
