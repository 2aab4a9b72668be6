"""
AnalysisSummary contract: a serialisable snapshot of an analysis.

The session state is a mutable working object; this Pydantic v2 model is
what leaves the process (CLI ``--json`` output, HTTP responses). It carries
the totals, the derived indices at the time of capture and, optionally, the
word frequency table.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, model_validator

from textfathom.core.contracts.state import AnalysisState
from textfathom.core.evals.readability import interpret_flesch, interpret_fog

Count = Annotated[int, Field(ge=0)]


class AnalysisSummary(BaseModel):
    """Totals and readability indices of one analysis."""

    source_label: str = Field(default="", description="File name; empty for block input.")

    char_count: Count = Field(default=0, description="Characters on text lines.")
    word_count: Count = Field(default=0, description="Accepted words.")
    syllable_count: Count = Field(default=0, description="Syllables over all words.")
    complex_word_count: Count = Field(
        default=0, description="Non-hyphenated words of three or more syllables."
    )
    sentence_count: Count = Field(default=0, description="Sentences in the latest input.")
    text_line_count: Count = 0
    non_text_line_count: Count = 0
    blank_line_count: Count = 0
    paragraph_count: Count = 0

    words_per_sentence: float = 0.0
    syllables_per_word: float = 0.0
    percent_complex_words: float = Field(default=0.0, ge=0.0, le=100.0)
    fog: float = 0.0
    flesch: float = 0.0
    kincaid: float = 0.0

    fog_band: str = Field(default="n/a", description="Gunning band for the Fog index.")
    flesch_band: str = Field(default="n/a", description="Description of the Flesch score.")

    unique_words: dict[str, int] | None = Field(
        default=None, description="Occurrences per lower-cased word, when requested."
    )

    @model_validator(mode="after")
    def _check_totals(self) -> AnalysisSummary:
        """Complex words are a subset of words; frequencies add up to the word count."""
        if self.complex_word_count > self.word_count:
            raise ValueError("complex_word_count cannot exceed word_count")
        if self.unique_words is not None and sum(self.unique_words.values()) != self.word_count:
            raise ValueError("unique_words occurrences must add up to word_count")
        return self

    @classmethod
    def from_state(cls, state: AnalysisState, *, include_words: bool = False) -> AnalysisSummary:
        """Capture ``state`` (and optionally its word table) as a summary."""
        indices = state.indices
        return cls(
            source_label=state.source_label,
            char_count=state.char_count,
            word_count=state.word_count,
            syllable_count=state.syllable_count,
            complex_word_count=state.complex_word_count,
            sentence_count=state.sentence_count,
            text_line_count=state.text_line_count,
            non_text_line_count=state.non_text_line_count,
            blank_line_count=state.blank_line_count,
            paragraph_count=state.paragraph_count,
            words_per_sentence=indices.words_per_sentence,
            syllables_per_word=indices.syllables_per_word,
            percent_complex_words=indices.percent_complex_words,
            fog=indices.fog,
            flesch=indices.flesch,
            kincaid=indices.kincaid,
            fog_band=interpret_fog(indices.fog),
            flesch_band=interpret_flesch(
                indices.flesch, has_words=state.word_count > 0 and state.sentence_count > 0
            ),
            unique_words=dict(state.word_frequencies) if include_words else None,
        )


__all__ = ["AnalysisSummary", "Count"]
