from __future__ import annotations

import logging
import sys
from typing import Optional


def configure_logging(level: str = "WARNING") -> None:
    """
    Configure standard logging once for the whole program.

    Log lines go to stderr; stdout belongs to the menu.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        stream=sys.stderr,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or __name__)
