import logging

from satsim.core.log import LOG_FORMAT, configure_logging


def _satsim_handlers(logger):
    return [h for h in logger.handlers if getattr(h, '_satsim_handler', False)]


def test_configure_logging_installs_one_handler():
    logger = configure_logging(logging.DEBUG)
    try:
        assert logger.name == 'satsim'
        assert logger.level == logging.DEBUG

        configure_logging(logging.WARNING)
        handlers = _satsim_handlers(logger)
        assert len(handlers) == 1
        assert handlers[0].formatter._fmt == LOG_FORMAT
        assert logger.level == logging.WARNING
    finally:
        for handler in _satsim_handlers(logger):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
