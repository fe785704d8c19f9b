"""Logging setup for entry points.

Library modules only do ``logger = logging.getLogger(__name__)``; the CLI
calls ``setup_logging`` once. Level precedence:
CLI flag > DPP_HTTP_LOG_LEVEL > WARNING.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "DPP_HTTP_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"

_handler: logging.Handler | None = None


def resolve_level(level: str | None = None) -> int:
    """Resolve a level name, falling back to the environment then WARNING."""
    name = (level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LEVEL).upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(level: str | None = None) -> int:
    """Route log records to stderr through Rich.

    Calling it again replaces the handler installed by the previous call.

    Returns:
        The numeric level in effect
    """
    global _handler
    numeric_level = resolve_level(level)
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=numeric_level <= logging.DEBUG,
        show_path=numeric_level <= logging.DEBUG,
    )
    handler.setLevel(numeric_level)

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    root.setLevel(numeric_level)
    _handler = handler
    return numeric_level
