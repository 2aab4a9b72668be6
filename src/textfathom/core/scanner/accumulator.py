"""Fold the words of a TEXT line into the running totals."""

from __future__ import annotations

from textfathom.core.contracts.state import AnalysisState
from textfathom.core.scanner.words import iter_words
from textfathom.lingua.base import SyllableCounter

# Words with more syllables than this are complex (Fog index).
COMPLEX_SYLLABLE_THRESHOLD = 2


def is_complex(word: str, syllables: int) -> bool:
    """Return True for a non-hyphenated word of three or more syllables.

    Hyphenated compounds are never complex, however long their parts.
    """
    return syllables > COMPLEX_SYLLABLE_THRESHOLD and "-" not in word


def accumulate_line(state: AnalysisState, line: str, count_syllables: SyllableCounter) -> int:
    """Add the characters and accepted words of ``line`` to ``state``.

    Parameters
    ----------
    state : AnalysisState
        Totals to update in place.
    line : str
        A TEXT line without its terminator. Its full length counts towards
        ``char_count``, internal whitespace included.
    count_syllables : SyllableCounter
        Collaborator returning the syllable count of one word.

    Returns
    -------
    int
        Number of words folded into ``state``.
    """
    state.char_count += len(line)

    added = 0
    for word in iter_words(line):
        syllables = count_syllables(word)
        state.word_frequencies[word.lower()] += 1
        state.word_count += 1
        state.syllable_count += syllables
        if is_complex(word, syllables):
            state.complex_word_count += 1
        added += 1
    return added


__all__ = ["COMPLEX_SYLLABLE_THRESHOLD", "is_complex", "accumulate_line"]
