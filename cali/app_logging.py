"""Logging configuration helpers."""

import logging


def configure_logging(verbosity: int = 0) -> None:
    """Configure the cali logger with a single stderr handler."""
    logger = logging.getLogger("cali")
    if verbosity >= 2:
        logger.setLevel(logging.DEBUG)
    elif verbosity == 1:
        logger.setLevel(logging.INFO)
    else:
        logger.setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
