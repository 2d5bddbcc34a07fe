"""
Logging helpers.
"""

import logging
import sys
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False


def configure_logging(level: str = "INFO", stream=None) -> None:
    """Install a single stream handler on the ``sparkle`` logger tree."""
    global _configured
    root = logging.getLogger("sparkle")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if _configured:
        return
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    root.propagate = False
    _configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger below the ``sparkle`` namespace."""
    if not name:
        return logging.getLogger("sparkle")
    if name == "sparkle" or name.startswith("sparkle."):
        return logging.getLogger(name)
    return logging.getLogger(f"sparkle.{name}")
