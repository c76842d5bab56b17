# logging_utils.py
"""Logger setup shared by every event-repeater module.

The game console shows whatever the mod logs, so all modules log through
children of one package logger that is configured exactly once.
"""

import logging
import os
from typing import Dict, Optional

from .config import LOG_FILE, LOG_LEVEL

ROOT_LOGGER_NAME = "event_repeater"

_LOGGER_CACHE: Dict[str, logging.Logger] = {}


def _configure_root(level: str, log_file: str) -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)

    # Guard against double-adding handlers if the interpreter reloads modules
    if root.handlers:
        return root

    root.setLevel(getattr(logging, level, logging.DEBUG))
    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter("[event-repeater] %(levelname)s %(message)s"))
    root.addHandler(ch)

    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s")
        )
        root.addHandler(fh)
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the package root, configuring the root on first use.

    ``name`` is usually ``__name__``; names outside the package are nested
    under it so they share the console handler.
    """
    key = name or ROOT_LOGGER_NAME
    if key in _LOGGER_CACHE:
        return _LOGGER_CACHE[key]

    _configure_root(LOG_LEVEL, LOG_FILE)
    if key == ROOT_LOGGER_NAME or key.startswith(ROOT_LOGGER_NAME + "."):
        logger = logging.getLogger(key)
    else:
        logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{key}")

    _LOGGER_CACHE[key] = logger
    return logger
