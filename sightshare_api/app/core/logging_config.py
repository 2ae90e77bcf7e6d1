"""
Logging configuration for the SightShare API.

``setup_logging`` attaches a console handler (and a file handler when
``LOG_FILE`` is set) to the root logger once per process.  The
per-request lines of ``uvicorn.access`` are tuned separately through
``ACCESS_LOG_LEVEL``: the dashboard polls the API, and at ``INFO`` every
poll would be logged.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ACCESS_LOGGER = "uvicorn.access"


def _level(name: Optional[str], default: int = logging.INFO) -> int:
    if not name:
        return default
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else default


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    access_level: Optional[str] = None,
) -> None:
    """Configure the root logger and the uvicorn access logger.

    Parameters
    ----------
    level : str
        Root level name, case insensitive; unknown names mean ``INFO``.
    logfile : Optional[str]
        Also write records to this file when given.
    access_level : Optional[str]
        Level for ``uvicorn.access``.  Applied on every call, even when
        the root logger was already configured (uvicorn configures its
        own loggers before the application is created).
    """
    if access_level:
        logging.getLogger(ACCESS_LOGGER).setLevel(_level(access_level))

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(_level(level))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
