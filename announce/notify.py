"""Building chat cards and posting them to the configured spaces."""

from __future__ import annotations

import json
from typing import Any

import requests

from announce.client import REQUEST_TIMEOUT
from announce.config import Config
from announce.constants import NotifType
from announce.logger import Logger

_log = Logger("HELPER")

ATTENDANCE_BUTTON_TEXT = "Absence Here"

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _marshal(document: Any) -> bytes:
    """Encode compact JSON with HTML-sensitive characters escaped."""
    text = json.dumps(document, ensure_ascii=False, separators=(",", ":"))
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return text.encode("utf-8")


def _header(flag: str) -> dict[str, str]:
    return {"title": flag, "subtitle": ""}


def _text_section(msg: str) -> dict[str, Any]:
    return {"widgets": [{"textParagraph": {"text": msg}}]}


def create_card(flag: str, msg: str) -> dict[str, Any]:
    """Return a plain card with ``flag`` as title and ``msg`` as its text."""
    return {
        "cards": [
            {
                "header": _header(flag),
                "sections": [_text_section(msg)],
            }
        ]
    }


def create_card_with_button(flag: str, msg: str, attendance_url: str) -> dict[str, Any]:
    """Return a card whose second section holds a button opening ``attendance_url``."""
    button = {
        "text": ATTENDANCE_BUTTON_TEXT,
        "onClick": {"openLink": {"url": attendance_url}},
    }
    return {
        "cardsV2": [
            {
                "card": {
                    "header": _header(flag),
                    "sections": [
                        _text_section(msg),
                        {"widgets": [{"buttonList": {"buttons": [button]}}]},
                    ],
                }
            }
        ]
    }


def _build_payload(config: Config, notif_type: NotifType, flag: str, msg: str) -> tuple[str, bytes]:
    if notif_type is NotifType.ATTENDANCE:
        return config.space_notif, _marshal(
            create_card_with_button(flag, msg, config.ky_attendance_url)
        )
    if notif_type is NotifType.UNIFORM:
        return config.space_notif, _marshal(create_card(flag, msg))
    return config.grc_notif, _marshal({"text": flag + " " + msg})


def send_to_space(config: Config, notif_type: int, flag: str, msg: str) -> None:
    """Post a notification of ``notif_type`` to its space.

    Raises ValueError for an unknown type and
    :class:`requests.RequestException` when the post cannot be made.
    A reply with a non-2xx status is logged, not raised.
    """
    try:
        kind = NotifType(notif_type)
    except ValueError:
        _log.error("Invalid notif type: ", notif_type)
        raise ValueError(f"invalid notif type: {notif_type}") from None

    url, payload = _build_payload(config, kind, flag, msg)
    _log.log("Payload : ", payload.decode("utf-8"))

    try:
        response = requests.post(
            url,
            data=payload,
            headers={"Content-Type": "application/json"},
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as exc:
        _log.error("Error send notif : ", str(exc))
        raise

    with response:
        _log.log("Code send notif : ", response.status_code)
        if 200 <= response.status_code <= 299:
            _log.log("Success send notif : ", response.text)
        else:
            _log.log("Error send notif :", response.text)