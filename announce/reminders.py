"""Uniform reminder on Thursdays and the progress reminder."""

from __future__ import annotations

from datetime import date as Date
from datetime import datetime, timedelta

import requests

from announce.config import Config
from announce.constants import NotifType
from announce.logger import Logger
from announce.notify import send_to_space

_log = Logger("SERVICE")

THURSDAY = 3
BLACK_UNIFORM = "HITAM"
WHITE_UNIFORM = "PUTIH"

GRC_FLAG = "🔔 [REMINDER] 🔔 \n"
GRC_MESSAGE = "JANGAN LUPA UPDATE PROGRESS !!"


def week_number_in_month(date: Date) -> int:
    """Return which Thursday of its month ``date`` is.

    For a day that is not a Thursday this is the number of Thursdays in
    the month.
    """
    _log.log("Date: ", date)

    first_day = date.replace(day=1)
    offset = (THURSDAY - first_day.weekday()) % 7
    thursday = first_day + timedelta(days=offset)

    count = 0
    while thursday.month == date.month:
        count += 1
        if thursday.day == date.day:
            break
        thursday += timedelta(days=7)

    _log.log("thursday : ", count)
    return count


def uniform_colour(thursday_number: int) -> str:
    """Return the uniform colour for the given Thursday of the month."""
    return WHITE_UNIFORM if thursday_number % 2 == 0 else BLACK_UNIFORM


def notif(config: Config, now: datetime | None = None) -> None:
    """Announce which uniform colour to wear today."""
    now = now if now is not None else datetime.now()
    _log.log("Now : ", now)

    thursday_number = week_number_in_month(now)
    uniform = uniform_colour(thursday_number)

    flag = f"🔔 [SERAGAM-KAMIS KE-{thursday_number}] 🔔 \n"
    message = f"Moshi², jangan lupa hari ini pakai seragam warna <b>{uniform}</b> ya"
    try:
        send_to_space(config, NotifType.UNIFORM, flag, message)
    except (requests.RequestException, ValueError) as exc:
        _log.log(str(exc))


def grc(config: Config) -> None:
    """Remind the team to update their progress."""
    try:
        send_to_space(config, NotifType.GRC, GRC_FLAG, GRC_MESSAGE)
    except (requests.RequestException, ValueError) as exc:
        _log.log(str(exc))