from __future__ import annotations

import pytest

from charlockholmes.enums import EncodingFamily, MatchType
from charlockholmes.errors import (
    CharlockHolmesError,
    InvalidArgumentError,
    UnsupportedEncodingNameError,
)
from charlockholmes.pipeline import EncodingMatch, PipelineContext


def test_match_defaults() -> None:
    match = EncodingMatch(name="UTF-8", confidence=90)
    assert match.language is None
    assert match.type is MatchType.TEXT


def test_match_to_dict() -> None:
    match = EncodingMatch(name="Shift_JIS", confidence=100, language="ja")
    assert match.to_dict() == {
        "type": "text",
        "encoding": "Shift_JIS",
        "confidence": 100,
        "language": "ja",
    }


def test_match_type_is_a_string() -> None:
    assert MatchType.BINARY == "binary"
    assert MatchType("text") is MatchType.TEXT


def test_encoding_families() -> None:
    assert {f.value for f in EncodingFamily} == {
        "ascii",
        "unicode",
        "escape",
        "multi-byte",
        "single-byte",
    }


def test_context_caches_decodes() -> None:
    ctx = PipelineContext()
    first = ctx.decode(b"caf\xe9", "latin-1")
    assert ctx.decode(b"ignored", "latin-1") is first
    assert ctx.decode(b"caf\xe9", "latin-1", errors="replace") == "café"


def test_context_strict_decode_raises() -> None:
    with pytest.raises(UnicodeDecodeError):
        PipelineContext().decode(b"\xff", "utf-8")


def test_error_hierarchy() -> None:
    assert issubclass(InvalidArgumentError, CharlockHolmesError)
    assert issubclass(InvalidArgumentError, TypeError)
    assert issubclass(InvalidArgumentError, ValueError)
    err = UnsupportedEncodingNameError("bogus")
    assert isinstance(err, LookupError)
    assert err.name == "bogus"
    assert "bogus" in str(err)
