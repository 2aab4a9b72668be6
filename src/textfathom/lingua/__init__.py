from __future__ import annotations

from .base import SentenceSplitter, SyllableCounter
from .sentences import DEFAULT_ABBREVIATIONS, build_tokenizer, split_sentences
from .syllables import count_syllables

__all__ = [
    "SyllableCounter",
    "SentenceSplitter",
    "count_syllables",
    "split_sentences",
    "build_tokenizer",
    "DEFAULT_ABBREVIATIONS",
]
