from __future__ import annotations

import logging
import sys

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(level: str = "WARNING") -> None:
    """Configure the ``excel_records`` logger with a concise stderr handler.

    Calling it again only changes the level.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger("excel_records")
    logger.setLevel(numeric_level)
    if logger.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%H:%M:%S")
    )
    logger.addHandler(handler)
