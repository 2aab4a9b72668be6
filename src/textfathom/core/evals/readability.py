"""
Readability indices derived from the aggregated text totals.

Three classic formulas are computed, all from the same two averages:

- ``words_per_sentence``  (WPS) = words / sentences
- ``syllables_per_word``  (SPW) = syllables / words
- ``percent_complex_words`` (PCW) = complex words / words * 100

Formulas
--------
Fog (Robert Gunning)::

    (WPS + PCW) * 0.4

Roughly the years of formal education a reader needs to understand the
text on first reading: 8 childish, 10 acceptable, 12 ideal, 14 difficult,
18 unreadable.

Flesch reading ease::

    206.835 - 1.015 * WPS - 84.6 * SPW

A 100 point scale where higher is easier; 60 to 70 is considered optimal.

Flesch-Kincaid grade level::

    11.8 * SPW + 0.39 * WPS - 15.59

A U.S. school grade; 7.0 to 8.0 is considered optimal.

All indices assume well formed text. Nonsense made of short words in short
sentences scores as very readable.

No rounding is applied here; presentation is the report formatter's job.
When there are no words or no sentences every field is 0.0.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ReadabilityIndices:
    """Averages and indices computed from one set of totals."""

    words_per_sentence: float = 0.0
    syllables_per_word: float = 0.0
    percent_complex_words: float = 0.0
    fog: float = 0.0
    flesch: float = 0.0
    kincaid: float = 0.0


EMPTY_INDICES = ReadabilityIndices()


def calculate_readability(
    word_count: int,
    sentence_count: int,
    syllable_count: int,
    complex_word_count: int,
) -> ReadabilityIndices:
    """Compute the averages and the three indices for the given totals.

    Parameters
    ----------
    word_count, sentence_count, syllable_count, complex_word_count : int
        Running totals of an analysis.

    Returns
    -------
    ReadabilityIndices
        :data:`EMPTY_INDICES` when ``word_count`` or ``sentence_count`` is 0.
    """
    if sentence_count == 0 or word_count == 0:
        return EMPTY_INDICES

    words_per_sentence = word_count / sentence_count
    syllables_per_word = syllable_count / word_count
    percent_complex_words = (complex_word_count / word_count) * 100

    return ReadabilityIndices(
        words_per_sentence=words_per_sentence,
        syllables_per_word=syllables_per_word,
        percent_complex_words=percent_complex_words,
        fog=(words_per_sentence + percent_complex_words) * 0.4,
        flesch=206.835 - (1.015 * words_per_sentence) - (84.6 * syllables_per_word),
        kincaid=(11.8 * syllables_per_word) + (0.39 * words_per_sentence) - 15.59,
    )


def interpret_fog(fog: float) -> str:
    """Map a Fog index onto the descriptive bands of the Gunning scale."""
    if fog <= 0.0:
        return "n/a"
    if fog < 9.0:
        return "childish"
    if fog < 11.0:
        return "acceptable"
    if fog < 13.0:
        return "ideal"
    if fog < 16.0:
        return "difficult"
    return "unreadable"


def interpret_flesch(flesch: float, *, has_words: bool = True) -> str:
    """Map a Flesch reading ease score onto a short description."""
    if not has_words:
        return "n/a"
    if flesch >= 70.0:
        return "easy"
    if flesch >= 60.0:
        return "optimal"
    if flesch >= 30.0:
        return "difficult"
    return "very difficult"


__all__ = [
    "ReadabilityIndices",
    "EMPTY_INDICES",
    "calculate_readability",
    "interpret_fog",
    "interpret_flesch",
]
