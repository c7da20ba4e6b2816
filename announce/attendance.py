"""Fetching a random text and announcing it for attendance."""

from __future__ import annotations

import json
import random
from typing import Any, Protocol

import requests

from announce.client import create_http_request
from announce.config import Config
from announce.constants import NotifType, TextType
from announce.logger import Logger
from announce.notify import send_to_space

_log = Logger("SERVICE")

NO_WORDS_FLAG = "🔔 [ATTENDANCE] 🔔 \n"
NO_WORDS_MESSAGE = "No Words Today"

_EMOTES = {
    TextType.QUOTES: "💬",
    TextType.JOKES: "🤡",
    TextType.RIDDLE: "🧩",
    TextType.TRIVIA: "🧠",
    TextType.ADVISE: "💡",
    TextType.FUN_FACT: "🧪",
}


class WordsError(Exception):
    """The text for the day could not be fetched."""


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def _endpoint(config: Config, text_type: TextType) -> str:
    return {
        TextType.QUOTES: config.ninja_api_quotes_url,
        TextType.JOKES: config.ninja_api_jokes_url,
        TextType.RIDDLE: config.ninja_api_riddle_url,
        TextType.TRIVIA: config.ninja_api_trivia_url,
        TextType.ADVISE: config.ninja_api_advice_url,
        TextType.FUN_FACT: config.ninja_api_fact_url,
    }[text_type]


def _string_field(record: dict[str, Any], key: str, what: str) -> str:
    value = record.get(key)
    if not isinstance(value, str):
        _log.error(f"Error get {what} : ", record)
        raise WordsError(f"error get {what}")
    return value


def _first_record(document: Any) -> dict[str, Any]:
    if not isinstance(document, list) or not all(isinstance(item, dict) for item in document):
        _log.error("Error unmarshal ninja API: ", document)
        raise WordsError("error unmarshal ninja API")
    if not document:
        _log.error("Error get ninja API: ", document)
        raise WordsError("error get ninja API")
    return document[0]


def fetch_words(config: Config, text_type: TextType) -> str:
    """Fetch and format one text of ``text_type``; raise :class:`WordsError` on failure."""
    url = config.ninja_api_base_url + _endpoint(config, text_type)
    try:
        code, body = create_http_request(url, "GET", "", config.ninja_api_key, "")
    except requests.RequestException as exc:
        _log.error("Error get ninja API: ", str(exc))
        raise WordsError(str(exc)) from exc

    if not 200 <= code <= 299:
        _log.error("Error get ninja API: ", body.decode("utf-8", errors="replace"))
        raise WordsError("error get ninja API")

    try:
        document = json.loads(body)
    except ValueError as exc:
        _log.error("Error unmarshal ninja API: ", str(exc))
        raise WordsError(str(exc)) from exc

    if text_type is TextType.ADVISE:
        if not isinstance(document, dict):
            _log.error("Error unmarshal ninja API: ", document)
            raise WordsError("error unmarshal ninja API")
        return _string_field(document, "advice", "advice")

    record = _first_record(document)
    if text_type is TextType.QUOTES:
        quote = _string_field(record, "quote", "quote")
        author = _string_field(record, "author", "author quote")
        return f"{author} - {quote}"
    if text_type is TextType.JOKES:
        return _string_field(record, "joke", "joke")
    if text_type is TextType.RIDDLE:
        question = _string_field(record, "question", "riddle question")
        answer = _string_field(record, "answer", "riddle answer")
        return f"{question} {answer}"
    if text_type is TextType.TRIVIA:
        question = _string_field(record, "question", "riddle question")
        answer = _string_field(record, "answer", "riddle answer")
        return f"{question}, {answer}"
    return _string_field(record, "fact", "fact")


def pick_text_type(rng: _RandomSource | None = None) -> TextType:
    """Choose a kind of text uniformly at random."""
    source = rng if rng is not None else random
    number = source.randrange(len(TextType)) + 1
    _log.log("Random number: ", number)
    text_type = TextType(number)
    _log.log("Random text type: ", text_type.label())
    return text_type


def attendance(config: Config, rng: _RandomSource | None = None) -> tuple[str, TextType]:
    """Pick a kind of text and fetch it; return the words and the kind."""
    text_type = pick_text_type(rng)
    return fetch_words(config, text_type), text_type


def handle_attendance(config: Config, rng: _RandomSource | None = None) -> None:
    """Announce the attendance message, or a fallback when no text could be fetched."""
    try:
        words, text_type = attendance(config, rng)
    except WordsError:
        flag, message = NO_WORDS_FLAG, NO_WORDS_MESSAGE
    else:
        emote = _EMOTES[text_type]
        flag = f"{emote} [ATTENDANCE] - [{text_type.label().upper()}] {emote}\n"
        message = words

    try:
        send_to_space(config, NotifType.ATTENDANCE, flag, message)
    except (requests.RequestException, ValueError) as exc:
        _log.error("Error send notif : ", str(exc))