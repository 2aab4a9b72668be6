"""
Default sentence splitter built on NLTK's Punkt tokenizer.

A sentence is a run of words and non-words closed by a full stop (or ``?``/
``!``), optionally surrounded by spaces. The hard part is deciding when a
full stop is *not* a sentence end:

- abbreviations: ``Mr. Smith``, ``U.S. or``, ``Jan. 5``, ``e.g. this``;
- numbers: ``1.23`` (Punkt never splits inside a token).

Rather than downloading a trained Punkt model we seed an untrained tokenizer
with a fixed abbreviation table (titles, ranks, institutions, street types,
company suffixes, state and province codes, months and a few Latin forms).
This keeps results deterministic and the package usable offline.

Abbreviations that are also everyday words (``no``, ``me``, ``is``, ``miss``,
``wash``, ...) are left out of the table, since treating them as
abbreviations would glue real sentences together.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache

from nltk.tokenize.punkt import PunktParameters, PunktSentenceTokenizer

PEOPLE = ("jr", "mr", "mrs", "ms", "dr", "prof", "sr", "sen", "sens", "rep", "reps",
          "gov", "atty", "supt", "det", "rev", "hon", "messrs")
ARMY = ("col", "gen", "lt", "cmdr", "adm", "capt", "sgt", "cpl", "maj", "brig", "pvt")
INSTITUTIONS = ("dept", "univ", "assn", "bros", "inst", "assoc")
PLACES = ("arc", "ave", "blvd", "bld", "cl", "ct", "cres", "expy", "exp", "dist",
          "mt", "ft", "fwy", "hwy", "hway", "pde", "pd", "plz", "pl", "rd", "st", "tce")
COMPANIES = ("inc", "ltd", "co", "corp", "pty", "plc")
STATES = ("ala", "ariz", "ark", "calif", "colo", "conn", "fed", "fla", "ga", "ida",
          "kans", "kan", "ken", "ky", "md", "mich", "minn", "mont", "neb", "nebr",
          "nev", "okla", "penna", "penn", "dak", "tenn", "vt", "wis", "wisc", "wyo",
          "usafa", "alta", "ont", "que", "sask", "yuk")
MONTHS = ("jan", "feb", "mar", "apr", "jun", "jul", "aug", "sep", "sept", "oct",
          "nov", "dec")
MISC = ("vs", "etc", "esp", "approx", "fig", "figs", "vol", "vols", "ed", "eds",
        "cf", "al")
ACRONYMS = ("u.s", "u.k", "u.s.a", "e.g", "i.e", "a.m", "p.m", "ph.d", "b.a", "m.a",
            "b.sc", "d.c", "n.y", "l.a")

DEFAULT_ABBREVIATIONS: frozenset[str] = frozenset(
    PEOPLE + ARMY + INSTITUTIONS + PLACES + COMPANIES + STATES + MONTHS + MISC + ACRONYMS
)


def build_tokenizer(abbreviations: Iterable[str] = DEFAULT_ABBREVIATIONS) -> PunktSentenceTokenizer:
    """Return a Punkt tokenizer that knows ``abbreviations``.

    Entries are matched case-insensitively and without their final full stop
    (``"u.s"`` covers ``U.S.``).
    """
    params = PunktParameters()
    params.abbrev_types = {a.lower().rstrip(".") for a in abbreviations}
    return PunktSentenceTokenizer(params)


@lru_cache(maxsize=1)
def _default_tokenizer() -> PunktSentenceTokenizer:
    return build_tokenizer()


def split_sentences(text: str) -> list[str]:
    """Split ``text`` into sentences; blank input yields an empty list."""
    if not text or not text.strip():
        return []
    return [s for s in _default_tokenizer().tokenize(text) if s.strip()]


__all__ = ["DEFAULT_ABBREVIATIONS", "build_tokenizer", "split_sentences"]
