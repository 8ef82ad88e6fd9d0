"""
Provides support for logging
"""

import logging
import time
from typing import Any


def configure_logging(
    level: int = logging.WARNING,
    handlers: list[logging.Handler] | None = None,
):
    """
    Configures logging format and log level.

    :param level: default = logging.WARNING
    :return: None

    - log format: %(asctime)s [%(levelname)s] [%(name)s] %(message)s
    - timestamps are UTC
    - pytezos is chatty at DEBUG level, thus its loggers are capped at INFO

    >>> configure_logging(level=logging.DEBUG)
    >>> logger = logging.getLogger('tezpack.apps.auction_app.balances')
    >>> logger.debug('balance before=0') # doctest: +SKIP
    2024-03-02 10:12:41,087 [DEBUG] [tezpack.apps.auction_app.balances] balance before=0

    """
    logging.Formatter.converter = time.gmtime
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
        level=level,
        handlers=handlers,
        force=True,
    )
    logging.getLogger("pytezos").setLevel(max(level, logging.INFO))
    logging.captureWarnings(True)


def get_logger(obj: Any, name: str | None = None) -> logging.Logger:
    """
    Returns a logger using the class name as the logger name.
    If `name` is specifed, then it is appended to the class name: `{self.__class__.__name__}.{name}`
    """
    logger = logging.getLogger(obj.__class__.__name__)
    if name is None:
        return logger

    return logger.getChild(name)
