"""Application log file."""

from __future__ import annotations

import os

TOMB_LOG = "~/.tomb.log"


def default_log_filename() -> str:
    """Return the log path from ``TOMB_LOG``, or the builtin default."""
    filename = os.environ.get("TOMB_LOG")
    if filename is None:
        return TOMB_LOG
    return os.path.expanduser(filename)


def log_error(message: str) -> None:
    """Append a line to the log file, ignoring any failure to write it."""
    filename = os.path.expanduser(default_log_filename())
    try:
        with open(filename, "a", encoding="utf-8") as fh:
            fh.write(f"{message}\n")
    except OSError:
        pass