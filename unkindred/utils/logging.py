"""Process-wide logging setup for the server and the headless CLI.

Game output (the composed frame) goes to stdout, so log records go to
stderr unless another stream is passed in.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-28s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# Per-request chatter from the HTTP stack
_NOISY_LOGGERS = ("uvicorn.access", "httpx")


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Install a single handler on the root logger at *level*.

    Unknown level names fall back to INFO. Calling this again replaces the
    previous handler instead of stacking a second one.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
