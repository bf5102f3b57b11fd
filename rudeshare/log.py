"""Logging setup for the ``rudeshare`` logger tree."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

_configured = False


def configure_logging(level: int | str = "INFO") -> None:
    """Attach a single rich handler to the ``rudeshare`` logger.

    Idempotent, so the CLI and the web app can both call it.
    """
    global _configured
    logger = logging.getLogger("rudeshare")
    resolved = level if isinstance(level, int) else getattr(logging, str(level).upper(), logging.INFO)
    logger.setLevel(resolved)
    if _configured:
        return

    handler = RichHandler(show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    _configured = True
