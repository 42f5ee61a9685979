"""
Logging Setup
=============

Console logging for applications embedding the kernel.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a console handler to the ``satsim`` logger.

    Calling this more than once only changes the level.

    Args:
        level: Logging level

    Returns:
        The package logger
    """
    logger = logging.getLogger('satsim')
    logger.setLevel(level)

    if not any(getattr(h, '_satsim_handler', False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._satsim_handler = True
        logger.addHandler(handler)

    return logger
