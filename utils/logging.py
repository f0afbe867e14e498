"""Logging setup for the blackjack CLI."""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

# BLACKJACK_LOG_LEVEL=DEBUG / INFO / WARNING / ERROR overrides the configured level
LOG_LEVEL_ENV = "BLACKJACK_LOG_LEVEL"


def resolve_level(level: str | None = None) -> int:
    """Pick the effective level: environment first, then ``level``, then WARNING."""
    name = (os.getenv(LOG_LEVEL_ENV) or level or "WARNING").upper()
    return getattr(logging, name, logging.WARNING)


def setup_logging(level: str | None = None, console: Console | None = None) -> None:
    """Call once at program start."""
    logging.basicConfig(
        level=resolve_level(level),
        format="%(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
        force=True,
    )
