"""Line Classifier: categorise lines and track paragraph boundaries.

Every line of the input (terminator already removed) falls into one of
three categories:

TEXT
    Contains at least one word character (``[A-Za-z0-9_]``). The first TEXT
    line after a non-TEXT line opens a new paragraph.
BLANK
    The empty string. Closes the current paragraph.
NON_TEXT
    Only non-word characters (spaces, punctuation, rules such as ``-----``).
    Also closes the current paragraph.

The classifier itself is pure: it reports what happened through
:class:`LineClassification` and the session applies the counters.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_HAS_WORD_CHAR = re.compile(r"\w", flags=re.ASCII)
_ONLY_NON_WORD = re.compile(r"^\W+$", flags=re.ASCII)


class LineCategory(str, Enum):
    """Category of a single line of input."""

    TEXT = "text"
    BLANK = "blank"
    NON_TEXT = "non_text"


@dataclass(frozen=True, slots=True)
class LineClassification:
    """Outcome of classifying one line.

    Attributes
    ----------
    category : LineCategory
        What kind of line this is.
    in_paragraph : bool
        Paragraph state to carry into the next line.
    starts_paragraph : bool
        True when this line opened a new paragraph.
    """

    category: LineCategory
    in_paragraph: bool
    starts_paragraph: bool = False


def classify_line(line: str, in_paragraph: bool) -> LineClassification:
    """Classify ``line`` given whether the previous line was inside a paragraph."""
    if _HAS_WORD_CHAR.search(line):
        return LineClassification(LineCategory.TEXT, True, starts_paragraph=not in_paragraph)
    if line == "":
        return LineClassification(LineCategory.BLANK, False)
    if _ONLY_NON_WORD.match(line):
        return LineClassification(LineCategory.NON_TEXT, False)
    # Unreachable for str input.
    return LineClassification(LineCategory.TEXT, True, starts_paragraph=not in_paragraph)


def split_lines(text: str) -> list[str]:
    """Split ``text`` on line feeds, dropping empty lines left by trailing terminators.

    Interior empty lines are kept (they are BLANK lines); only the run of
    empty strings at the very end is discarded.

    Examples
    --------
    >>> split_lines("a\\n\\nb\\n\\n\\n")
    ['a', '', 'b']
    >>> split_lines("\\n\\na")
    ['', '', 'a']
    """
    lines = text.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return lines


__all__ = ["LineCategory", "LineClassification", "classify_line", "split_lines"]
