"""Logging setup for command-line use.

Library modules only create ``logging.getLogger(__name__)`` loggers; this
module attaches a handler when xorscope runs as a program.
"""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    root = logging.getLogger("xorscope")
    lvl = logging.getLevelName(level.upper())
    if not isinstance(lvl, int):
        lvl = logging.WARNING
    root.setLevel(lvl)
    if not any(getattr(h, "_xorscope", False) for h in root.handlers):
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter(_FORMAT))
        h._xorscope = True  # type: ignore[attr-defined]
        root.addHandler(h)
