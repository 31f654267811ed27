"""Logging setup for the engine package."""

import logging

from nutrition_engine.config import Settings, parse_log_level

ENGINE_LOGGER = "nutrition_engine"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach a single stream handler to the engine logger and set its level.

    Debug settings force DEBUG whatever level name is configured.
    """
    resolved = settings or Settings()
    if resolved.debug:
        level = logging.DEBUG
    else:
        level = parse_log_level(resolved.log_level)

    logger = logging.getLogger(ENGINE_LOGGER)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
