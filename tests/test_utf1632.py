from __future__ import annotations

import pytest

from charlockholmes.pipeline import DETERMINISTIC_CONFIDENCE
from charlockholmes.pipeline.utf1632 import detect_utf1632_patterns

TEXT = "Hello world, this is plain text without a byte order mark."


@pytest.mark.parametrize(
    ("codec", "expected"),
    [
        ("utf-16-le", "UTF-16LE"),
        ("utf-16-be", "UTF-16BE"),
        ("utf-32-le", "UTF-32LE"),
        ("utf-32-be", "UTF-32BE"),
    ],
)
def test_bomless_unicode_detected(codec: str, expected: str) -> None:
    result = detect_utf1632_patterns(TEXT.encode(codec))
    assert result is not None
    assert result.name == expected
    assert result.confidence == DETERMINISTIC_CONFIDENCE


def test_single_byte_text_is_ignored() -> None:
    assert detect_utf1632_patterns(TEXT.encode("ascii")) is None


def test_short_input_is_ignored() -> None:
    assert detect_utf1632_patterns("Hi".encode("utf-16-le")) is None


def test_control_heavy_data_is_ignored() -> None:
    assert detect_utf1632_patterns(b"\x00\x01\x02\x03" * 64) is None
