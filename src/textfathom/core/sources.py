"""
File provider: read a plain-text file for analysis without raising.

Only regular, non-empty, plain-text files are analysed. Everything else
(missing paths, directories, binary files, unreadable files) is reported as
``Err(reason)`` so the session can return its state unchanged. Callers
detect missing input by looking at the totals.

Plain-text detection
--------------------
A prefix of the file (``sniff_bytes`` long) is inspected:

1. A NUL byte means binary.
2. A prefix that decodes as UTF-8 is text.
3. Otherwise the file is binary when more than 30% of the prefix bytes are
   control characters other than tab, newline, form feed, carriage return,
   backspace and escape.
"""

from __future__ import annotations

from pathlib import Path

from textfathom.core.result import Result, err, ok

_BINARY_RATIO = 0.30
_TEXT_CONTROLS = frozenset(b"\t\n\f\r\b\x1b")


def looks_like_text(sample: bytes) -> bool:
    """Return True when ``sample`` looks like the start of a plain-text file."""
    if not sample:
        return True
    if b"\x00" in sample:
        return False
    try:
        sample.decode("utf-8")
        return True
    except UnicodeDecodeError as exc:
        # A multi-byte sequence cut off by the sniff window is still text.
        if exc.reason == "unexpected end of data":
            return True

    odd = sum(1 for byte in sample if byte < 32 and byte not in _TEXT_CONTROLS)
    return odd / len(sample) <= _BINARY_RATIO


def read_text_file(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    sniff_bytes: int = 512,
) -> Result[str, str]:
    """Read ``path`` when it is a non-empty plain-text file.

    Parameters
    ----------
    path : str | Path
        File to read.
    encoding : str, default "utf-8"
        Text encoding; undecodable bytes are replaced rather than raising.
    sniff_bytes : int, default 512
        Size of the prefix used for plain-text detection.

    Returns
    -------
    Result[str, str]
        ``Ok(text)`` with universal newlines applied, or ``Err(reason)``.
    """
    p = Path(path)
    try:
        if not p.is_file():
            return err(f"not a regular file: {p}")
        if p.stat().st_size == 0:
            return err(f"empty file: {p}")
        with p.open("rb") as fh:
            sample = fh.read(sniff_bytes)
        if not looks_like_text(sample):
            return err(f"not a plain-text file: {p}")
        with p.open("r", encoding=encoding, errors="replace") as fh:
            return ok(fh.read())
    except OSError as exc:
        return err(f"cannot read {p}: {exc}")


__all__ = ["looks_like_text", "read_text_file"]
