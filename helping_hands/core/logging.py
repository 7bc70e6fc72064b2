"""Logging setup.

The package itself never configures handlers. Applications embedding it call
``configure_logging()`` once at startup, before serving requests.
"""

import logging

from helping_hands.core.config import SETTINGS

LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> None:
    """Configure the root logger from the application settings."""
    logging.basicConfig(
        level=logging.DEBUG if SETTINGS.debug else logging.INFO,
        format=LOG_FORMAT,
    )
