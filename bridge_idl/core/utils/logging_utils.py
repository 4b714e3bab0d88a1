import logging
from typing import Optional

ROOT_LOGGER_NAME = "bridge_idl"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


def setup_logging(log_level: str, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach a single console or file handler to the `bridge_idl` logger.

    Every module logger of the package propagates to it. Calling this again
    replaces the previous handler.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.propagate = False
    logger.setLevel(log_level.upper())
    logger.handlers.clear()

    handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
