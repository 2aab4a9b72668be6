"""Default syllable counter backed by ``pyphen`` hyphenation patterns.

A word has one syllable more than it has hyphenation points in the en_US
TeX patterns bundled with pyphen. The patterns ship inside the package, so
counting is deterministic and never touches the network or ``~/nltk_data``.

Like any pattern-based estimate this undercounts some words: pyphen never
hyphenates within two characters of either end, so short words such as
``idea`` come out low. The analysis treats the result as authoritative.
"""

from __future__ import annotations

from functools import lru_cache

from pyphen import Pyphen  # type: ignore[import-untyped]

HYPHENATION_LANG = "en_US"


@lru_cache(maxsize=1)
def _dictionary() -> Pyphen:
    return Pyphen(lang=HYPHENATION_LANG)


@lru_cache(maxsize=8192)
def _cached_count(word: str) -> int:
    return len(_dictionary().positions(word)) + 1


def count_syllables(word: str) -> int:
    """Return the estimated number of syllables of ``word``.

    Lookups are case-insensitive and memoised. The empty string has no
    syllables; any other word has at least one.
    """
    if not word:
        return 0
    return _cached_count(word.lower())


__all__ = ["HYPHENATION_LANG", "count_syllables"]
