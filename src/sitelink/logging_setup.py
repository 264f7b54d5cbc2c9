"""Rich logging for the sitelink CLI.

The resolvers only emit records through module loggers; this module is the
single place that attaches a handler, and only entry points call it.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "SITELINK_LOG_LEVEL"

console = Console(stderr=True)


def _level(debug: bool) -> int:
    if debug:
        return logging.DEBUG
    name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, debug: bool = False) -> RichHandler:
    """Attach the sitelink handler to the root logger (once) and set its level.

    Calling it again only updates the level. Handlers installed by others,
    such as pytest's capture handler, are left in place.
    """
    root = logging.getLogger()
    handler = next((h for h in root.handlers if getattr(h, "sitelink_managed", False)), None)
    if handler is None:
        handler = RichHandler(console=console, show_path=False, markup=False, rich_tracebacks=debug)
        handler.sitelink_managed = True
        root.addHandler(handler)
    root.setLevel(_level(debug))
    return handler
