from __future__ import annotations

import pytest

from charlockholmes.pipeline.utf8 import detect_utf8


def test_valid_multibyte_utf8() -> None:
    result = detect_utf8("Le café est très bon.".encode())
    assert result is not None
    assert result.name == "UTF-8"
    assert 80 <= result.confidence <= 99


def test_cjk_heavy_text_saturates() -> None:
    result = detect_utf8("これはテストです。日本語のテキスト。".encode())
    assert result is not None
    assert result.confidence == 99


def test_pure_ascii_is_left_to_ascii_stage() -> None:
    assert detect_utf8(b"hello world") is None


@pytest.mark.parametrize(
    "data",
    [
        b"\xc3\x28",  # bad continuation byte
        b"\xc0\xaf",  # overlong
        b"\xe0\x80\xaf",  # overlong 3-byte
        b"\xed\xa0\x80",  # surrogate
        b"\xf4\x90\x80\x80",  # above U+10FFFF
        b"\xff",
    ],
)
def test_invalid_sequences(data: bytes) -> None:
    assert detect_utf8(b"abc" + data) is None


def test_truncated_final_sequence_is_accepted() -> None:
    data = "日本".encode()[:-1]
    result = detect_utf8(data, truncated=True)
    assert result is not None
    assert result.name == "UTF-8"


def test_empty_input() -> None:
    assert detect_utf8(b"") is None


@pytest.mark.parametrize(
    "data",
    [
        "日本".encode()[:-1],
        b"caf\xc3\xa9 au lait \xe0",
        b"caf\xc3\xa9 \xc3",
    ],
)
def test_incomplete_final_sequence_rejected_when_not_truncated(data: bytes) -> None:
    assert detect_utf8(data) is None


def test_truncated_tail_must_still_be_well_formed() -> None:
    assert detect_utf8(b"caf\xc3\xa9 \xe0\x41", truncated=True) is None
