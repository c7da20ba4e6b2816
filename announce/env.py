"""Reading required settings from a ``.env`` file and the environment."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from announce.logger import Logger, LoggerPanic

_log = Logger("UTILS")

DEFAULT_DOTENV = ".env"


class MissingEnvError(LoggerPanic):
    """A required setting is absent or empty."""

    def __init__(self, message: str, key: str) -> None:
        super().__init__(message)
        self.key = key


def _dotenv_value(key: str, dotenv_path: str | os.PathLike[str] | None) -> str | None:
    path = Path(dotenv_path if dotenv_path is not None else DEFAULT_DOTENV)
    if not path.is_file():
        return None
    load_dotenv(path, override=False)
    return os.environ.get(key)


def must_get_env(key: str, dotenv_path: str | os.PathLike[str] | None = None) -> str:
    """Return the non-empty value of ``key`` after loading the dotenv file.

    Raises :class:`MissingEnvError` when the dotenv file cannot be read or the
    value is missing or empty.
    """
    debug = os.environ.get("LOG_LEVEL") == "DEBUG"
    value = _dotenv_value(key, dotenv_path)
    if value:
        if debug:
            _log.log(f"found environment variable {key}: {value}")
        return value

    try:
        _log.panic(f"missing environment variable {key}")
    except LoggerPanic as exc:
        raise MissingEnvError(str(exc), key) from None
    raise AssertionError("unreachable")