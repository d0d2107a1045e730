import logging
from logging import Logger
from typing import Optional

from .config import get_settings

ROOT_LOGGER = "stamplayout"


def configure_logging(name: Optional[str] = None) -> Logger:
    """Attach the package handler once and return the logger for ``name``.

    Module loggers are children of the ``stamplayout`` logger, so they share its
    handler and level.
    """
    settings = get_settings()

    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings.log_format))

        root.addHandler(handler)
        root.propagate = False

    if not name or name == ROOT_LOGGER:
        return root
    return logging.getLogger(name if name.startswith(ROOT_LOGGER + ".") else f"{ROOT_LOGGER}.{name}")
