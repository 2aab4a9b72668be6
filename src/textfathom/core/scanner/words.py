"""
Word Filter: decide which tokens of a line count as real words.

A line is scanned with a loose pattern (letters, plus inner apostrophes and
hyphens, anchored at word boundaries). Most of what it matches is a word,
but codes, acronyms and stray punctuation also slip through, so every
candidate goes through :func:`is_word`:

- No vowel sound (``a e i o u y``)  -> rejected (``NSW``, the ``S`` of ``U.S.``).
- Hyphenated, but not ``xx-yy`` shaped -> rejected (``a-z``, ``x-ray``).
- Anything else                      -> accepted (``be-bop``, ``I'd``, ``BOTH``).

Acronyms containing a vowel (``GPO``) are still counted as words; telling
them apart would need proper-noun or dictionary knowledge.

Matching and filtering are both lazy generators, so the accumulator can fold
words into the running totals without building intermediate lists.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

WORD_PATTERN = re.compile(r"\b([a-z][-'a-z]*)\b", flags=re.IGNORECASE | re.ASCII)

_VOWEL_SOUND = re.compile(r"[aeiouy]", flags=re.IGNORECASE | re.ASCII)
_COMPOUND = re.compile(r"[a-z]{2,}-[a-z]{2,}", flags=re.IGNORECASE | re.ASCII)


def iter_candidates(line: str) -> Iterator[str]:
    """Yield every non-overlapping match of :data:`WORD_PATTERN` in ``line``."""
    for match in WORD_PATTERN.finditer(line):
        yield match.group(1)


def is_word(token: str) -> bool:
    """Return ``True`` if ``token`` should be counted as a word.

    Parameters
    ----------
    token : str
        A candidate produced by :func:`iter_candidates`.

    Examples
    --------
    >>> is_word("NSW"), is_word("be-bop"), is_word("a-z"), is_word("I'd")
    (False, True, False, True)
    """
    if not _VOWEL_SOUND.search(token):
        return False
    if "-" in token and not _COMPOUND.search(token):
        return False
    return True


def iter_words(line: str) -> Iterator[str]:
    """Yield the accepted words of ``line`` in order of appearance."""
    return (token for token in iter_candidates(line) if is_word(token))


__all__ = ["WORD_PATTERN", "iter_candidates", "is_word", "iter_words"]
