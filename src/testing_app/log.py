"""Process-wide logging setup."""

import logging

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Configure the root logger once for the entire application."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
