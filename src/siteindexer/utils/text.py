"""Text helpers for turning page text into index terms."""

from __future__ import annotations

from typing import Iterator

PUNCTUATION = ".\"\\/'-:;!?|()[]{}$=+*^~©,"

_CLEAN_TABLE = str.maketrans({char: " " for char in PUNCTUATION})


def clean(text: str) -> str:
    """Replace each punctuation or symbol character with a single space.

    Runs of spaces are left for the tokenizer.
    """
    return text.translate(_CLEAN_TABLE)


def tokenize(text: str) -> Iterator[str]:
    """Yield whitespace separated terms of the cleaned text."""
    yield from clean(text).split()
