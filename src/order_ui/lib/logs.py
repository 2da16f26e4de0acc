"""
Logger factory for the order_ui package.

All module loggers are children of the ``order_ui`` logger. Only that
parent gets a handler, so LOG_LEVEL and the output format are set in one
place and records still propagate to the root logger.
"""

import logging
import os
from pathlib import Path

ROOT_NAME = "order_ui"

# Level applied to the order_ui parent logger
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _root() -> logging.Logger:
    root = logging.getLogger(ROOT_NAME)
    if not root.handlers:
        root.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
    return root


def logger(name: str) -> logging.Logger:
    """
    Return the order_ui child logger for a module.

    Args:
        name: Module __file__ path or a dotted name. Paths are reduced to
            the file stem, e.g. ".../services/order_service_http.py"
            becomes "order_ui.order_service_http".

    Returns:
        Logger that inherits level and handler from the order_ui logger.
    """
    if "/" in name or "\\" in name:
        name = Path(name).stem
    _root()
    if name == ROOT_NAME or name.startswith(f"{ROOT_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_NAME}.{name}")
