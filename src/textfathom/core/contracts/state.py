"""
Analysis state: the running totals owned by one analysis session.

The state is a plain mutable dataclass. Counters are only ever increased by
the scanner (or reset by the session); ``sentence_count`` is the exception
and is assigned after every analysis call.

Derived values (averages and readability indices) are *not* fields. They are
properties that run :func:`calculate_readability` over the current totals on
every read, so they cannot fall out of step with the counters.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from textfathom.core.evals.readability import ReadabilityIndices, calculate_readability


@dataclass
class AnalysisState:
    """Running totals of one analysis session.

    Attributes
    ----------
    char_count : int
        Characters on TEXT lines, spaces and punctuation included.
    word_count, syllable_count, complex_word_count : int
        Word level totals; complex words have more than two syllables and no
        hyphen.
    text_line_count, non_text_line_count, blank_line_count : int
        Line totals per category.
    paragraph_count : int
        Number of runs of consecutive TEXT lines.
    sentence_count : int
        Sentences found in the most recent input.
    word_frequencies : Counter[str]
        Occurrences per lower-cased word.
    source_label : str
        File name of the last analysed file; empty for block input.
    """

    char_count: int = 0
    word_count: int = 0
    syllable_count: int = 0
    complex_word_count: int = 0
    text_line_count: int = 0
    non_text_line_count: int = 0
    blank_line_count: int = 0
    paragraph_count: int = 0
    sentence_count: int = 0
    word_frequencies: Counter[str] = field(default_factory=Counter)
    source_label: str = ""

    def reset(self) -> None:
        """Return every total to its initial empty value."""
        self.char_count = 0
        self.word_count = 0
        self.syllable_count = 0
        self.complex_word_count = 0
        self.text_line_count = 0
        self.non_text_line_count = 0
        self.blank_line_count = 0
        self.paragraph_count = 0
        self.sentence_count = 0
        self.word_frequencies = Counter()
        self.source_label = ""

    # ------------------------------ Derived ---------------------------------

    @property
    def indices(self) -> ReadabilityIndices:
        """Averages and indices for the current totals."""
        return calculate_readability(
            word_count=self.word_count,
            sentence_count=self.sentence_count,
            syllable_count=self.syllable_count,
            complex_word_count=self.complex_word_count,
        )

    @property
    def words_per_sentence(self) -> float:
        return self.indices.words_per_sentence

    @property
    def syllables_per_word(self) -> float:
        return self.indices.syllables_per_word

    @property
    def percent_complex_words(self) -> float:
        return self.indices.percent_complex_words

    @property
    def fog(self) -> float:
        return self.indices.fog

    @property
    def flesch(self) -> float:
        return self.indices.flesch

    @property
    def kincaid(self) -> float:
        return self.indices.kincaid


__all__ = ["AnalysisState"]
