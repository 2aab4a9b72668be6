"""Fixed-layout text rendering of an analysis state.

The layout is stable so that reports can be diffed and parsed by scripts::

    File name                  : sample.txt
    Number of characters       : 813
    Number of words            : 135
    Percent of complex words   : 20.00
    Average syllables per word : 1.7704
    Number of sentences        : 12
    Average words per sentence : 11.2500
    Number of text lines       : 13
    Number of non-text lines   : 0
    Number of blank lines      : 8
    Number of paragraphs       : 4


    READABILITY INDICES

    Fog                        : 12.5000
    Flesch                     : 45.6429
    Flesch-Kincaid             : 9.6879

The file name line is omitted for block input.
"""

from __future__ import annotations

from collections.abc import Mapping

from textfathom.core.contracts.state import AnalysisState

_LABEL_WIDTH = 27


def _line(label: str, value: str) -> str:
    return f"{label:<{_LABEL_WIDTH}}: {value}\n"


def format_report(state: AnalysisState) -> str:
    """Render every statistic of ``state`` in the fixed report layout."""
    indices = state.indices
    out: list[str] = []

    if state.source_label:
        out.append(_line("File name", state.source_label))
    out.append(_line("Number of characters", f"{state.char_count:d}"))
    out.append(_line("Number of words", f"{state.word_count:d}"))
    out.append(_line("Percent of complex words", f"{indices.percent_complex_words:.2f}"))
    out.append(_line("Average syllables per word", f"{indices.syllables_per_word:.4f}"))
    out.append(_line("Number of sentences", f"{state.sentence_count:d}"))
    out.append(_line("Average words per sentence", f"{indices.words_per_sentence:.4f}"))
    out.append(_line("Number of text lines", f"{state.text_line_count:d}"))
    out.append(_line("Number of non-text lines", f"{state.non_text_line_count:d}"))
    out.append(_line("Number of blank lines", f"{state.blank_line_count:d}"))
    out.append(_line("Number of paragraphs", f"{state.paragraph_count:d}"))

    out.append("\n\nREADABILITY INDICES\n\n")
    out.append(_line("Fog", f"{indices.fog:.4f}"))
    out.append(_line("Flesch", f"{indices.flesch:.4f}"))
    out.append(_line("Flesch-Kincaid", f"{indices.kincaid:.4f}"))

    return "".join(out)


def format_word_list(frequencies: Mapping[str, int]) -> str:
    """List unique words as ``"<count> :<word>"`` lines, sorted by word."""
    return "".join(f"{frequencies[word]} :{word}\n" for word in sorted(frequencies))


__all__ = ["format_report", "format_word_list"]
