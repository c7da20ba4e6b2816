import json
import random

import pytest
import requests
import responses

from announce.attendance import (
    WordsError,
    attendance,
    fetch_words,
    handle_attendance,
    pick_text_type,
)
from announce.config import Config
from announce.constants import TextType

BASE = "https://api.example.com"
SPACE_URL = "https://chat.example.com/space"


def make_config() -> Config:
    return Config(
        mode="test",
        space_notif=SPACE_URL,
        grc_notif="https://chat.example.com/grc",
        time_schedule_notif=5,
        ninja_api_base_url=BASE,
        ninja_api_key="placeholder",
        ninja_api_quotes_url="/quotes",
        ninja_api_jokes_url="/jokes",
        ninja_api_riddle_url="/riddles",
        ninja_api_trivia_url="/trivia",
        ninja_api_advice_url="/advice",
        ninja_api_fact_url="/facts",
        ky_attendance_url="https://attend.example.com/",
    )


class FixedRandom:
    def __init__(self, value):
        self.value = value
        self.stops = []

    def randrange(self, stop):
        self.stops.append(stop)
        return self.value


@pytest.fixture
def mock_http():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_fetch_quote_formats_author_first_and_sends_key(mock_http):
    mock_http.add(responses.GET, BASE + "/quotes", json=[{"quote": "Q", "author": "A"}])
    assert fetch_words(make_config(), TextType.QUOTES) == "A - Q"
    assert mock_http.calls[0].request.headers["X-Api-Key"] == "placeholder"


@pytest.mark.parametrize(
    "text_type, path, payload, expected",
    [
        (TextType.JOKES, "/jokes", [{"joke": "J"}], "J"),
        (TextType.RIDDLE, "/riddles", [{"question": "Q", "answer": "A"}], "Q A"),
        (TextType.TRIVIA, "/trivia", [{"question": "Q", "answer": "A"}], "Q, A"),
        (TextType.ADVISE, "/advice", {"advice": "Adv"}, "Adv"),
        (TextType.FUN_FACT, "/facts", [{"fact": "F"}], "F"),
    ],
)
def test_fetch_each_kind(mock_http, text_type, path, payload, expected):
    mock_http.add(responses.GET, BASE + path, json=payload)
    assert fetch_words(make_config(), text_type) == expected


def test_fetch_error_status_raises(mock_http):
    mock_http.add(responses.GET, BASE + "/jokes", body="nope", status=500)
    with pytest.raises(WordsError, match="error get ninja API"):
        fetch_words(make_config(), TextType.JOKES)


def test_fetch_missing_field_raises(mock_http):
    mock_http.add(responses.GET, BASE + "/quotes", json=[{"quote": "Q"}])
    with pytest.raises(WordsError, match="error get author quote"):
        fetch_words(make_config(), TextType.QUOTES)


def test_fetch_non_string_field_raises(mock_http):
    mock_http.add(responses.GET, BASE + "/facts", json=[{"fact": 3}])
    with pytest.raises(WordsError, match="error get fact"):
        fetch_words(make_config(), TextType.FUN_FACT)


def test_fetch_empty_list_raises(mock_http):
    mock_http.add(responses.GET, BASE + "/jokes", json=[])
    with pytest.raises(WordsError):
        fetch_words(make_config(), TextType.JOKES)


def test_fetch_invalid_json_raises(mock_http):
    mock_http.add(responses.GET, BASE + "/jokes", body="not json")
    with pytest.raises(WordsError):
        fetch_words(make_config(), TextType.JOKES)


def test_fetch_network_error_raises(mock_http):
    mock_http.add(responses.GET, BASE + "/jokes", body=requests.ConnectionError("down"))
    with pytest.raises(WordsError):
        fetch_words(make_config(), TextType.JOKES)


def test_pick_text_type_maps_offset_and_uses_count():
    rng = FixedRandom(0)
    assert pick_text_type(rng) is TextType.QUOTES
    assert rng.stops == [len(TextType)]
    assert pick_text_type(FixedRandom(5)) is TextType.FUN_FACT


def test_pick_text_type_always_valid():
    rng = random.Random(7)
    picks = {pick_text_type(rng) for _ in range(200)}
    assert picks <= set(TextType)
    assert len(picks) == len(TextType)


def test_attendance_returns_words_and_type(mock_http):
    mock_http.add(responses.GET, BASE + "/jokes", json=[{"joke": "J"}])
    assert attendance(make_config(), FixedRandom(1)) == ("J", TextType.JOKES)


def test_handle_attendance_posts_words_with_emote_header(mock_http):
    mock_http.add(responses.GET, BASE + "/jokes", json=[{"joke": "J"}])
    mock_http.add(responses.POST, SPACE_URL, body="ok")
    assert handle_attendance(make_config(), FixedRandom(1)) is None
    body = json.loads(mock_http.calls[1].request.body)
    card = body["cardsV2"][0]["card"]
    assert card["header"]["title"] == "🤡 [ATTENDANCE] - [JOKES] 🤡\n"
    assert card["sections"][0]["widgets"][0]["textParagraph"]["text"] == "J"


def test_handle_attendance_falls_back_when_fetch_fails(mock_http):
    mock_http.add(responses.GET, BASE + "/facts", body="x", status=503)
    mock_http.add(responses.POST, SPACE_URL, body="ok")
    assert handle_attendance(make_config(), FixedRandom(5)) is None
    card = json.loads(mock_http.calls[1].request.body)["cardsV2"][0]["card"]
    assert card["header"]["title"] == "🔔 [ATTENDANCE] 🔔 \n"
    assert card["sections"][0]["widgets"][0]["textParagraph"]["text"] == "No Words Today"


def test_handle_attendance_swallows_send_failure(mock_http):
    mock_http.add(responses.GET, BASE + "/jokes", json=[{"joke": "J"}])
    mock_http.add(responses.POST, SPACE_URL, body=requests.ConnectionError("down"))
    assert handle_attendance(make_config(), FixedRandom(1)) is None
    assert len(mock_http.calls) == 2