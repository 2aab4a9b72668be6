"""Tests for the default syllable counter and sentence splitter.

These exercise the real collaborators (pyphen, NLTK Punkt), so they only
assert properties that hold across library releases.
"""

from __future__ import annotations

from typing import Any

import nltk
import pytest

from textfathom.core.session import AnalysisSession
from textfathom.lingua import (
    DEFAULT_ABBREVIATIONS,
    build_tokenizer,
    count_syllables,
    split_sentences,
)
from textfathom.lingua.syllables import _cached_count

from conftest import REFERENCE_TEXT


def test_count_syllables_basics() -> None:
    assert count_syllables("") == 0
    assert count_syllables("cat") == 1
    assert count_syllables("Cat") == count_syllables("cat")
    assert count_syllables("readability") >= 3


@pytest.mark.parametrize(  # type: ignore[misc]
    ("word", "expected"),
    [("analysed", 3), ("optionally", 4), ("apostrophe", 3), ("abbreviations", 5), ("number", 2)],
)
def test_count_syllables_known_words(word: str, expected: int) -> None:
    assert count_syllables(word) == expected


def test_count_syllables_needs_no_downloads(monkeypatch: Any) -> None:
    """Counting works with every corpus download blocked."""

    def refuse(*args: Any, **kwargs: Any) -> bool:
        raise AssertionError("syllable counting tried to download data")

    monkeypatch.setattr(nltk, "download", refuse)
    _cached_count.cache_clear()

    assert count_syllables("hyphenation") == 3
    session = AnalysisSession()
    session.analyse_block("The cat sat on the mat.")
    assert session.num_words() == 6
    assert session.num_syllables() == 6


def test_split_sentences_blank_input() -> None:
    assert split_sentences("") == []
    assert split_sentences("  \n\n ") == []


def test_split_sentences_keeps_abbreviations_and_numbers() -> None:
    """`U.S.` and `1.23` do not end the sentence."""
    assert len(split_sentences(REFERENCE_TEXT)) == 4


def test_split_sentences_title_before_name() -> None:
    sentences = split_sentences("Mr. Smith went to Washington. He liked it.")
    assert sentences == ["Mr. Smith went to Washington.", "He liked it."]


def test_default_abbreviations_are_bare_lowercase() -> None:
    assert "mr" in DEFAULT_ABBREVIATIONS
    assert "u.s" in DEFAULT_ABBREVIATIONS
    assert all(a == a.lower() and not a.endswith(".") for a in DEFAULT_ABBREVIATIONS)


def test_build_tokenizer_with_custom_table() -> None:
    """Entries are case-insensitive and may carry a final full stop."""
    text = "We met Dr. Jones at noon. It was fine."

    plain = build_tokenizer([])
    custom = build_tokenizer(["DR."])

    assert len(custom.tokenize(text)) == 2
    assert len(plain.tokenize(text)) >= len(custom.tokenize(text))
