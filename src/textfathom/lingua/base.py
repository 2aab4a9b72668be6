"""Call signatures of the language collaborators used by the analysis session.

Both collaborators are plain callables so tests (and callers with better
tools) can pass a function, a lambda or a configured object.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class SyllableCounter(Protocol):
    """Return the number of syllables of a single word (``>= 0``)."""

    def __call__(self, word: str) -> int: ...


class SentenceSplitter(Protocol):
    """Split raw text into sentences.

    Returns ``None`` when the splitter has no opinion; the session then keeps
    the previous sentence count.
    """

    def __call__(self, text: str) -> Sequence[str] | None: ...


__all__ = ["SyllableCounter", "SentenceSplitter"]
