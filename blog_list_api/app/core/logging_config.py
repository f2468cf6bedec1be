"""
Logging configuration for the Blog List API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it is called.  Each
request is logged once by the middleware in ``main``, so uvicorn's own
access log is lowered to warnings to avoid duplicate lines.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to append log records to.  If omitted, records
        only go to the console.
    """
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. by pytest or a repeated ``create_app``.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
