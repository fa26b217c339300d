from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "INFO", console: Console | None = None) -> None:
    """Route the ``pertcpm`` loggers through a rich handler.

    Safe to call more than once; the previous handler is replaced.
    """
    logger = logging.getLogger("pertcpm")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    handler = RichHandler(console=console or Console(stderr=True), show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
