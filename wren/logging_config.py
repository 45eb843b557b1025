"""
Logging Configuration
Routes the viewer's diagnostics to stdout.
"""

import logging
import sys


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configures the logger for the 'wren' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
    """
    logger = logging.getLogger("wren")
    logger.setLevel(level)

    # main() may run more than once per process
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter("%(levelname)s %(name)s: %(message)s")
    )
    logger.addHandler(handler)
