"""Unit tests for the readability calculator."""

from __future__ import annotations

import pytest

from textfathom.core.evals.readability import (
    EMPTY_INDICES,
    ReadabilityIndices,
    calculate_readability,
    interpret_flesch,
    interpret_fog,
)


def test_formulas_on_known_totals() -> None:
    """54 words, 4 sentences, 66 syllables, 4 complex words."""
    r = calculate_readability(
        word_count=54, sentence_count=4, syllable_count=66, complex_word_count=4
    )
    wps = 13.5
    spw = 66 / 54
    pcw = 4 / 54 * 100

    assert r.words_per_sentence == pytest.approx(wps)
    assert r.syllables_per_word == pytest.approx(spw)
    assert r.percent_complex_words == pytest.approx(7.4074, abs=1e-4)
    assert r.fog == pytest.approx(8.3630, abs=1e-4)
    assert r.flesch == pytest.approx(206.835 - 1.015 * wps - 84.6 * spw)
    assert r.kincaid == pytest.approx(11.8 * spw + 0.39 * wps - 15.59)
    assert r.fog == pytest.approx((wps + pcw) * 0.4)


@pytest.mark.parametrize(  # type: ignore[misc]
    ("words", "sentences"),
    [(0, 0), (10, 0), (0, 3)],
)
def test_zero_guard(words: int, sentences: int) -> None:
    """No words or no sentences: every field is zero, nothing divides by zero."""
    r = calculate_readability(words, sentences, syllable_count=12, complex_word_count=0)
    assert r == EMPTY_INDICES
    assert r.fog == r.flesch == r.kincaid == 0.0


def test_calculation_is_pure() -> None:
    """Same totals, same indices."""
    a = calculate_readability(120, 7, 180, 11)
    b = calculate_readability(120, 7, 180, 11)
    assert a == b
    assert isinstance(a, ReadabilityIndices)


def test_no_rounding_is_applied() -> None:
    r = calculate_readability(10, 3, 13, 1)
    assert r.words_per_sentence == 10 / 3


def test_interpretation_bands() -> None:
    assert interpret_fog(0.0) == "n/a"
    assert interpret_fog(8.0) == "childish"
    assert interpret_fog(10.0) == "acceptable"
    assert interpret_fog(12.0) == "ideal"
    assert interpret_fog(14.0) == "difficult"
    assert interpret_fog(18.0) == "unreadable"
    assert interpret_flesch(65.0) == "optimal"
    assert interpret_flesch(90.0) == "easy"
    assert interpret_flesch(10.0) == "very difficult"
    assert interpret_flesch(0.0, has_words=False) == "n/a"
