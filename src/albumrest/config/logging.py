"""Logging setup shared by the CLI and the HTTP server."""

from __future__ import annotations

import logging
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
SERVER_LOGGERS: Final[tuple[str, ...]] = ("uvicorn", "uvicorn.error", "uvicorn.access")


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger and route the server's loggers through it.

    uvicorn normally installs its own handlers; those are dropped here so access
    and error lines come out in the same format as the album logs. Pass
    ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
    for name in SERVER_LOGGERS:
        server_log = logging.getLogger(name)
        server_log.handlers.clear()
        server_log.propagate = True
