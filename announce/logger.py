"""Console logger that writes timestamped, category-tagged lines."""

from __future__ import annotations

import sys
import traceback
from datetime import datetime
from typing import Any, TextIO

_TIME_FORMAT = "%Y/%m/%d %H:%M:%S"


class LoggerPanic(Exception):
    """Raised by :meth:`Logger.panic` after the message has been written."""


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    return str(value)


def _sprint(args: tuple[Any, ...]) -> str:
    """Join values, putting a space between two neighbours only when neither is a string."""
    parts: list[str] = []
    previous_is_str = True
    for position, value in enumerate(args):
        is_str = isinstance(value, str)
        if position and not is_str and not previous_is_str:
            parts.append(" ")
        parts.append(_format_value(value))
        previous_is_str = is_str
    return "".join(parts)


def _prefixed(prefix: str, args: tuple[Any, ...]) -> tuple[Any, ...]:
    if not args:
        return args
    return (f"{prefix}{_format_value(args[0])}", *args[1:])


class Logger:
    """Writes one line per call: ``[time] [flag] message``."""

    def __init__(self, flag: str, stream: TextIO | None = None) -> None:
        self.flag = flag
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _emit(self, message: str) -> None:
        timestamp = datetime.now().strftime(_TIME_FORMAT)
        parts = [f"[{timestamp}]"]
        if self.flag:
            parts.append(f"[{self.flag}]")
        if message:
            parts.append(message)
        self.stream.write(" ".join(parts) + "\n")
        self.stream.flush()

    def log(self, *args: Any) -> None:
        """Write an informational message."""
        self._emit(_sprint(_prefixed("[INFO] ", args)))

    def error(self, *args: Any) -> None:
        """Write an error message followed by the current stack."""
        if args:
            stack = "".join(traceback.format_stack())
            args = (*_prefixed("[ERROR] ", args), "\n\n", stack)
        self._emit(_sprint(args))

    def error_without_trace(self, *args: Any) -> None:
        """Write an error message without a stack."""
        self._emit(_sprint(_prefixed("[ERROR] ", args)))

    def fatal(self, *args: Any) -> None:
        """Write the message, then exit with status 1."""
        self._emit(_sprint(_prefixed("[FATAL] ", args)))
        raise SystemExit(1)

    def panic(self, *args: Any) -> None:
        """Write the message, then raise :class:`LoggerPanic` carrying it."""
        message = _sprint(_prefixed("[PANIC] ", args))
        self._emit(message)
        raise LoggerPanic(message)

    def printf(self, label: str, *args: Any) -> None:
        """Write the label on its own line, then the message marked with a megaphone."""
        self.stream.write("HEHEHEHE : " + label + "\n")
        self._emit(_sprint(_prefixed("📢 ", args)))