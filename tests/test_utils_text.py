"""Tests for text normalization helpers."""

from __future__ import annotations

import pytest

from siteindexer.utils.text import PUNCTUATION, clean, tokenize


class TestClean:
    """Test clean function."""

    def test_replaces_punctuation_with_spaces(self) -> None:
        """Should replace each symbol with exactly one space."""
        assert clean("Hello, World!") == "Hello  World "

    def test_every_symbol_removed(self) -> None:
        """Should leave none of the listed characters behind."""
        text = "a" + "b".join(PUNCTUATION) + "z"
        result = clean(text)

        assert not any(char in result for char in PUNCTUATION)
        assert len(result) == len(text)

    @pytest.mark.parametrize(
        "text",
        ["", "plain words", "C:\\path/to|file", "(x+y)*z = {a[0]}", "© 2024 ~ $5 ^ 'q'"],
    )
    def test_idempotent(self, text: str) -> None:
        """Should give the same result when applied twice."""
        assert clean(clean(text)) == clean(text)

    def test_keeps_other_characters(self) -> None:
        """Should not touch letters, digits, case or other symbols."""
        assert clean("Ünïcode 42 #tag @home") == "Ünïcode 42 #tag @home"

    def test_does_not_collapse_spaces(self) -> None:
        """Should leave runs of spaces for the tokenizer."""
        assert clean("a--b") == "a  b"


class TestTokenize:
    """Test tokenize function."""

    def test_simple_sentence(self) -> None:
        """Should split cleaned text on whitespace."""
        assert list(tokenize("Hello, World!")) == ["Hello", "World"]

    def test_no_empty_or_whitespace_tokens(self) -> None:
        """Should drop empty fragments and split on any whitespace."""
        tokens = list(tokenize("  one\t\ttwo\n\nthree -- (four)  "))

        assert tokens == ["one", "two", "three", "four"]
        assert all(token and not any(c.isspace() for c in token) for token in tokens)

    def test_rejoin_is_stable(self) -> None:
        """Re-tokenizing the space-joined tokens should give the same tokens."""
        tokens = list(tokenize("Maven: site/index.html [v1.0] -- done?"))

        assert list(tokenize(" ".join(tokens))) == tokens

    def test_restartable(self) -> None:
        """Should produce the same sequence each time it is derived."""
        text = "Deep page, again"

        assert list(tokenize(text)) == list(tokenize(text))

    def test_no_case_folding(self) -> None:
        """Should keep the original case."""
        assert list(tokenize("Deep DEEP deep")) == ["Deep", "DEEP", "deep"]

    def test_empty_text(self) -> None:
        """Should produce no tokens."""
        assert list(tokenize("")) == []
