import logging

from app.core.logging_config import LOG_FORMAT, configure_logging


def test_configure_logging_is_idempotent():
    configure_logging("INFO")
    logger = configure_logging("DEBUG")

    ours = [h for h in logger.handlers if h.formatter is not None and h.formatter._fmt == LOG_FORMAT]
    assert len(ours) == 1
    assert logger is logging.getLogger("app")
    assert logger.level == logging.DEBUG
    configure_logging("INFO")
