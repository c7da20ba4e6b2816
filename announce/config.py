"""Application settings."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from announce.env import must_get_env

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str) -> int:
    """Parse a decimal integer, giving 0 when the text is not one."""
    return int(text) if _INTEGER.fullmatch(text) else 0


@dataclass(frozen=True)
class Config:
    """Every setting the announcer needs."""

    mode: str
    space_notif: str
    grc_notif: str
    time_schedule_notif: int
    ninja_api_base_url: str
    ninja_api_key: str
    ninja_api_quotes_url: str
    ninja_api_jokes_url: str
    ninja_api_riddle_url: str
    ninja_api_trivia_url: str
    ninja_api_advice_url: str
    ninja_api_fact_url: str
    ky_attendance_url: str


def load_config(dotenv_path: str | os.PathLike[str] | None = None) -> Config:
    """Read all settings; any missing one raises :class:`MissingEnvError`."""

    def get(key: str) -> str:
        return must_get_env(key, dotenv_path)

    return Config(
        mode=get("MODE"),
        space_notif=get("SPACE_NOTIF"),
        grc_notif=get("GRC_NOTIF"),
        time_schedule_notif=_atoi(get("TIME_SCHEDULE_NOTIF")),
        ninja_api_base_url=get("NINJA_API_BASE_URL"),
        ninja_api_key=get("NINJA_API_KEY"),
        ninja_api_quotes_url=get("NINJA_API_QUOTES_URL"),
        ninja_api_jokes_url=get("NINJA_API_JOKES_URL"),
        ninja_api_riddle_url=get("NINJA_API_RIDDLE_URL"),
        ninja_api_trivia_url=get("NINJA_API_TRIVIA_URL"),
        ninja_api_advice_url=get("NINJA_API_ADVICE_URL"),
        ninja_api_fact_url=get("NINJA_API_FACT_URL"),
        ky_attendance_url=get("KY_ATTENDANCE_URL"),
    )