"""
Logging configuration for the announcement service.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Every module obtains its own logger via
``logging.getLogger(__name__)`` so records carry the module name,
e.g. ``announcement_board.app.core.storage``.

uvicorn writes one ``uvicorn.access`` record per request.  The public
list is polled by the landing page, so these lines are only kept when
the service runs at ``DEBUG``; otherwise the access logger is raised
to ``WARNING`` and the log shows the announcement changes themselves.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ACCESS_LOGGER = "uvicorn.access"


def _level_from_name(level: str) -> int:
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def configure_access_log(level: int) -> None:
    """Silence per‑request access records unless ``level`` is ``DEBUG``."""
    access_level = logging.INFO if level <= logging.DEBUG else logging.WARNING
    logging.getLogger(ACCESS_LOGGER).setLevel(access_level)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging for the service.

    The access logger level is applied on every call so it also takes
    effect when uvicorn or pytest installed the root handlers first.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to append log records to.  Parent directories
        are created when missing.  If omitted, only the console
        handler is attached.
    """
    numeric_level = _level_from_name(level)
    configure_access_log(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
