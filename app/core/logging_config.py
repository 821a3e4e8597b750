import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attaches a single stream handler to the "app" logger.
    Safe to call more than once (e.g. one call per create_app in tests).
    """
    global _handler
    logger = logging.getLogger("app")
    logger.setLevel(level.upper())
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
    return logger
