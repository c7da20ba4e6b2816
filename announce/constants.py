"""Kinds of text and kinds of notification."""

from __future__ import annotations

from enum import IntEnum


class TextType(IntEnum):
    """Kind of text fetched for the attendance message."""

    QUOTES = 1
    JOKES = 2
    RIDDLE = 3
    TRIVIA = 4
    ADVISE = 5
    FUN_FACT = 6

    def label(self) -> str:
        """Human-readable name of the kind."""
        return _TEXT_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "TextType":
        """Return the kind whose label is ``label``; raise ValueError otherwise."""
        for member, text in _TEXT_LABELS.items():
            if text == label:
                return member
        raise ValueError(f"invalid text type: {label}")


_TEXT_LABELS = {
    TextType.QUOTES: "Quotes",
    TextType.JOKES: "Jokes",
    TextType.RIDDLE: "Riddle",
    TextType.TRIVIA: "Trivia",
    TextType.ADVISE: "Advise",
    TextType.FUN_FACT: "Fun Fact",
}


class NotifType(IntEnum):
    """Destination and shape of a chat notification."""

    ATTENDANCE = 1
    UNIFORM = 2
    GRC = 3