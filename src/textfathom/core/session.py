"""
Analysis session: scan text, keep the running totals, answer questions.

Overview
--------
This is the entry point of the library. A session owns exactly one
:class:`AnalysisState` and can be reused for any number of inputs.

Flow
----
1. ``accumulate=False`` resets the state (``accumulate=True`` keeps it).
2. The input is obtained: a block of text directly, or a file through the
   file provider. Unavailable or empty input stops here and the state is
   returned unchanged.
3. The text is split into lines; each line is classified and TEXT lines
   are folded into the totals by the accumulator.
4. The *whole* raw text goes through the sentence splitter and the number of
   sentences is **assigned** to ``sentence_count``.
5. Averages and indices are derived on demand from the totals.

Accumulation and sentences
--------------------------
With ``accumulate=True`` every counter is summed across calls except the
sentence count, which always reflects the latest input only. Call sites that
need combined sentence totals should concatenate the inputs instead.

Usage
-----
>>> session = AnalysisSession()
>>> _ = session.analyse_block("The cat sat on the mat. It was happy.")
>>> session.num_words(), session.num_sentences()
(9, 2)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from textfathom.core.contracts.state import AnalysisState
from textfathom.core.contracts.summary import AnalysisSummary
from textfathom.core.report import format_report
from textfathom.core.scanner.accumulator import accumulate_line
from textfathom.core.scanner.lines import LineCategory, classify_line, split_lines
from textfathom.core.settings import Settings, get_logger, load_settings
from textfathom.core.sources import read_text_file
from textfathom.lingua import count_syllables, split_sentences
from textfathom.lingua.base import SentenceSplitter, SyllableCounter

logger = get_logger(__name__)


class AnalysisSession:
    """Text statistics and readability indices for one or more inputs.

    Parameters
    ----------
    syllable_counter : SyllableCounter | None
        Syllables of one word; defaults to the pyphen-backed counter.
    sentence_splitter : SentenceSplitter | None
        Sentences of a text; defaults to the Punkt-backed splitter.
    settings : Settings | None
        Configuration (file encoding, sniff size); defaults to the cached
        process settings.
    """

    __slots__ = ("_state", "_count_syllables", "_split_sentences", "_settings")

    def __init__(
        self,
        syllable_counter: SyllableCounter | None = None,
        sentence_splitter: SentenceSplitter | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._state = AnalysisState()
        self._count_syllables: SyllableCounter = syllable_counter or count_syllables
        self._split_sentences: SentenceSplitter = sentence_splitter or split_sentences
        self._settings = settings or load_settings()

    @property
    def state(self) -> AnalysisState:
        """The live state object owned by this session."""
        return self._state

    # ------------------------------ Analysis --------------------------------

    def analyse(self, source: Any, accumulate: bool = False) -> AnalysisState:
        """Analyse a file path, a readable object or a block of text.

        ``pathlib.Path`` values are read as files, objects with a ``read()``
        method are drained and analysed as text, anything else is treated as
        a text block.
        """
        if isinstance(source, Path):
            return self.analyse_file(source, accumulate=accumulate)
        if hasattr(source, "read"):
            return self.analyse_block(source.read(), accumulate=accumulate)
        return self.analyse_block(source, accumulate=accumulate)

    def analyse_file(self, path: str | Path, accumulate: bool = False) -> AnalysisState:
        """Analyse the contents of a plain-text file.

        Missing, empty or binary files are not errors: the state is returned
        as it stands (reset first unless accumulating) with ``source_label``
        set to ``path``.
        """
        if not accumulate:
            self._state.reset()
        self._state.source_label = str(path)

        result = read_text_file(
            path,
            encoding=self._settings.file_encoding,
            sniff_bytes=self._settings.sniff_bytes,
        )
        if result.is_err():
            logger.debug("Skipping unavailable input: %s", result.unwrap_err())
            return self._state

        return self._scan(result.unwrap())

    def analyse_block(self, text: str | None, accumulate: bool = False) -> AnalysisState:
        """Analyse a block of text that may contain line feeds.

        Empty or ``None`` input is not scanned. Without ``accumulate`` the
        state is still reset first, so an empty call clears earlier totals.
        """
        if not accumulate:
            self._state.reset()
        if not text:
            logger.debug("Skipping empty text block")
            return self._state
        return self._scan(text)

    def _scan(self, text: str) -> AnalysisState:
        """Classify and fold every line of ``text``, then count its sentences."""
        state = self._state
        in_paragraph = False

        for line in split_lines(text):
            outcome = classify_line(line, in_paragraph)
            in_paragraph = outcome.in_paragraph

            if outcome.category is LineCategory.TEXT:
                accumulate_line(state, line, self._count_syllables)
                state.text_line_count += 1
                if outcome.starts_paragraph:
                    state.paragraph_count += 1
            elif outcome.category is LineCategory.BLANK:
                state.blank_line_count += 1
            else:
                state.non_text_line_count += 1

        sentences = self._split_sentences(text)
        if sentences is not None:
            state.sentence_count = len(sentences)

        logger.debug(
            "Analysed %d chars: %d words, %d sentences, %d paragraphs",
            len(text),
            state.word_count,
            state.sentence_count,
            state.paragraph_count,
        )
        return state

    # ------------------------------ Accessors -------------------------------

    def num_chars(self) -> int:
        """Characters on text lines, spaces and punctuation included."""
        return self._state.char_count

    def num_words(self) -> int:
        return self._state.word_count

    def num_syllables(self) -> int:
        return self._state.syllable_count

    def num_complex_words(self) -> int:
        return self._state.complex_word_count

    def num_sentences(self) -> int:
        """Sentences found in the most recently analysed input."""
        return self._state.sentence_count

    def num_text_lines(self) -> int:
        return self._state.text_line_count

    def num_non_text_lines(self) -> int:
        return self._state.non_text_line_count

    def num_blank_lines(self) -> int:
        """Empty lines; trailing line terminators are not counted."""
        return self._state.blank_line_count

    def num_paragraphs(self) -> int:
        return self._state.paragraph_count

    def percent_complex_words(self) -> float:
        return self._state.percent_complex_words

    def syllables_per_word(self) -> float:
        return self._state.syllables_per_word

    def words_per_sentence(self) -> float:
        return self._state.words_per_sentence

    def fog(self) -> float:
        return self._state.fog

    def flesch(self) -> float:
        return self._state.flesch

    def kincaid(self) -> float:
        return self._state.kincaid

    def file_name(self) -> str:
        return self._state.source_label

    def unique_words(self) -> dict[str, int]:
        """Return a copy of the word frequency table (lower-cased words)."""
        return dict(self._state.word_frequencies)

    # ------------------------------ Output ----------------------------------

    def report(self) -> str:
        """Render the fixed-layout text report for the current totals."""
        return format_report(self._state)

    def summary(self, *, include_words: bool = False) -> AnalysisSummary:
        """Capture the current totals as an :class:`AnalysisSummary`."""
        return AnalysisSummary.from_state(self._state, include_words=include_words)


__all__ = ["AnalysisSession"]
