"""Send log output to a file while the terminal is in use."""

from __future__ import annotations

import os
import sys
import threading
from typing import Any, Optional, Protocol, TextIO, runtime_checkable

__all__ = [
    "LogOptionsSetter",
    "DefaultLogger",
    "default_logger",
    "log_to_file",
    "log_to_file_with",
]


@runtime_checkable
class LogOptionsSetter(Protocol):
    """A logger whose output stream and prefix can be set."""

    def set_output(self, stream: TextIO) -> None:
        ...

    def set_prefix(self, prefix: str) -> None:
        ...


class DefaultLogger:
    """A minimal line logger writing ``prefix + message`` lines."""

    def __init__(self, stream: Optional[TextIO] = None, prefix: str = "") -> None:
        self._stream = stream
        self._prefix = prefix
        self._lock = threading.Lock()

    def set_output(self, stream: TextIO) -> None:
        """Write subsequent lines to ``stream``."""
        with self._lock:
            self._stream = stream

    def set_prefix(self, prefix: str) -> None:
        """Start every subsequent line with ``prefix``."""
        with self._lock:
            self._prefix = prefix

    def println(self, *args: Any) -> None:
        """Log the args, separated by spaces, as one line."""
        line = self._prefix + " ".join(str(arg) for arg in args) + "\n"
        with self._lock:
            stream = self._stream if self._stream is not None else sys.stderr
            stream.write(line)
            stream.flush()


default_logger = DefaultLogger()


def log_to_file(path: str, prefix: str) -> TextIO:
    """Log through the default logger to ``path``; close the file when done."""
    return log_to_file_with(path, prefix, default_logger)


def log_to_file_with(path: str, prefix: str, log: LogOptionsSetter) -> TextIO:
    """Point ``log`` at ``path`` (created if missing, appended to) with ``prefix``.

    A space is added after a non-empty prefix that does not end in whitespace.
    """
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_APPEND, 0o600)
    except OSError as exc:
        raise OSError(exc.errno, f"error opening file for logging: {exc.strerror}", path) from exc
    f = os.fdopen(fd, "a", encoding="utf-8")
    log.set_output(f)

    if prefix and not prefix[-1].isspace():
        prefix += " "
    log.set_prefix(prefix)
    return f