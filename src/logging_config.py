"""Logging setup for scripts and services embedding the kinship engine.

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers
are attached here, once, by whoever owns the process.
"""

import logging
from typing import Optional

from src.config import LoggingSettings, settings

_configured = False


def setup_logging(config: Optional[LoggingSettings] = None, force: bool = False) -> logging.Logger:
    """Attach a stderr handler to the ``src`` logger tree.

    Args:
        config: Logging settings, defaults to ``settings.logging``
        force: Reconfigure even if already set up

    Returns:
        The package root logger
    """
    global _configured

    config = config or settings.logging
    root = logging.getLogger("src")

    if _configured and not force:
        return root

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.format))
    root.addHandler(handler)
    root.setLevel(config.level.upper())
    root.propagate = False

    _configured = True
    return root
