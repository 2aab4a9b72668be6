"""Tests for plain-text detection and the non-raising file reader."""

from __future__ import annotations

from pathlib import Path

import pytest

from textfathom.core.sources import looks_like_text, read_text_file


@pytest.mark.parametrize(  # type: ignore[misc]
    ("sample", "expected"),
    [
        (b"", True),
        (b"Plain ASCII text.\n", True),
        ("Café crème".encode(), True),
        (b"cut mid-character \xc3", True),
        (b"latin-1 caf\xe9 au lait", True),
        (b"GIF89a\x00\x01", False),
        (b"\xff\x01\x02\x03\x04", False),
    ],
)
def test_looks_like_text(sample: bytes, expected: bool) -> None:
    assert looks_like_text(sample) is expected


def test_read_text_file_ok_applies_universal_newlines(tmp_path: Path) -> None:
    path = tmp_path / "dos.txt"
    path.write_bytes(b"first line\r\nsecond line\r\n")

    result = read_text_file(path)
    assert result.is_ok()
    assert result.unwrap() == "first line\nsecond line\n"


def test_read_text_file_replaces_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "latin.txt"
    path.write_bytes(b"caf\xe9 au lait\n")

    text = read_text_file(path).unwrap()
    assert text.startswith("caf")
    assert text.endswith(" au lait\n")


def test_read_text_file_honours_encoding(tmp_path: Path) -> None:
    path = tmp_path / "latin.txt"
    path.write_bytes(b"caf\xe9\n")
    assert read_text_file(path, encoding="latin-1").unwrap() == "café\n"


@pytest.mark.parametrize("kind", ["missing", "empty", "binary", "directory"])  # type: ignore[misc]
def test_read_text_file_err(tmp_path: Path, kind: str) -> None:
    path = tmp_path / kind
    if kind == "empty":
        path.touch()
    elif kind == "binary":
        path.write_bytes(b"\x00\x01\x02binary\x00")
    elif kind == "directory":
        path.mkdir()

    result = read_text_file(path)
    assert result.is_err()
    assert str(path) in result.unwrap_err()
