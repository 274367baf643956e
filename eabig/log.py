import logging

_logger = logging.getLogger("eabig")
_logger.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    return _logger
