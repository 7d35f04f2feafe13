# app/core/logging.py
import logging
from typing import Optional
from app.config import settings

ROOT_LOGGER = "product_api"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach the one stream handler to the app's parent logger and set its
    level. Safe to call repeatedly; create_app() calls it with LOG_LEVEL.
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel((level or settings.log_level).upper())
    return root


def get_logger(name: str) -> logging.Logger:
    # children inherit handler and level from the app logger
    if not logging.getLogger(ROOT_LOGGER).handlers:
        configure_logging()
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
