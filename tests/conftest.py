"""Shared fixtures: the reference text block and deterministic collaborators.

The default collaborators (pyphen, Punkt) are heuristics whose exact output
may shift between library releases. Most scenario tests that assert exact numbers
inject the stubs below instead; `test_lingua.py` covers the real ones.
"""

from __future__ import annotations

import re
from collections.abc import Callable

import pytest

from textfathom.core.session import AnalysisSession

REFERENCE_LINES = [
    "Returns the number of words in the analysed text file or block. A word must",
    "consist of letters a-z with at least one vowel sound, and optionally an",
    'apostrophe or hyphen. Items such as "&, K108, NSW" are not counted as words.',
    "Common abbreviations such a U.S. or numbers like 1.23 will not denote the end of",
    "a sentence.",
]

# Four leading blank lines, five text lines, trailing terminators.
REFERENCE_TEXT = "\n\n\n\n" + "\n".join(REFERENCE_LINES) + "\n\n\n"

_KNOWN_SYLLABLES = {
    "analysed": 3,
    "optionally": 4,
    "apostrophe": 4,
    "abbreviations": 5,
}

_SENTENCE_END = re.compile(r"(?<=[a-z])[.!?]\s+")


def stub_syllables(word: str) -> int:
    """One syllable per word except for a handful of known long words."""
    return _KNOWN_SYLLABLES.get(word.lower(), 1)


def stub_sentences(text: str) -> list[str]:
    """Split after a full stop preceded by a lower-case letter and followed by space."""
    stripped = text.strip()
    if not stripped:
        return []
    return [part for part in _SENTENCE_END.split(stripped) if part.strip()]


@pytest.fixture  # type: ignore[misc]
def make_session() -> Callable[[], AnalysisSession]:
    """Factory for sessions wired to the deterministic stub collaborators."""

    def _make() -> AnalysisSession:
        return AnalysisSession(syllable_counter=stub_syllables, sentence_splitter=stub_sentences)

    return _make


@pytest.fixture  # type: ignore[misc]
def session(make_session: Callable[[], AnalysisSession]) -> AnalysisSession:
    """A fresh stub-wired session."""
    return make_session()


@pytest.fixture  # type: ignore[misc]
def reference_text() -> str:
    """The reference block used by the readability scenario tests."""
    return REFERENCE_TEXT
