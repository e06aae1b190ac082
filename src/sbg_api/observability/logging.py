from __future__ import annotations

import logging
from typing import Sequence

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO", *, extra_handlers: Sequence[logging.Handler] | None = None) -> None:
    """Configure root logging for the client and the command line entry point.

    Additional handlers (file, streaming, etc.) can be supplied via ``extra_handlers``.
    """

    logging.basicConfig(level=level.upper(), format=DEFAULT_FORMAT)
    # httpx logs every request at INFO; keep it quiet unless we are debugging
    if level.upper() != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)
    if extra_handlers:
        root = logging.getLogger()
        for handler in extra_handlers:
            root.addHandler(handler)


__all__ = ["DEFAULT_FORMAT", "configure_logging"]
