from __future__ import annotations

from charlockholmes.enums import EncodingFamily
from charlockholmes.models import load_frequent_characters
from charlockholmes.pipeline import EncodingMatch, PipelineContext
from charlockholmes.pipeline.structural import (
    has_high_bytes,
    score_multibyte_candidates,
)
from charlockholmes.registry import get_candidates

MULTI_BYTE = get_candidates(EncodingFamily.MULTI_BYTE)


def _by_name(matches: list[EncodingMatch]) -> dict[str | None, EncodingMatch]:
    return {m.name: m for m in matches}


def _score(data: bytes) -> dict[str | None, EncodingMatch]:
    return _by_name(
        score_multibyte_candidates(
            data, MULTI_BYTE, load_frequent_characters(), PipelineContext()
        )
    )


def test_has_high_bytes() -> None:
    assert has_high_bytes(b"caf\xe9")
    assert not has_high_bytes(b"cafe")


def test_shift_jis_scores_full_confidence(shift_jis_bytes: bytes) -> None:
    match = _score(shift_jis_bytes)["Shift_JIS"]
    assert match.confidence == 100
    assert match.language == "ja"


def test_gb18030_scores_full_confidence() -> None:
    match = _score("这是中文测试文本，用于并发检测。".encode("gb18030"))["GB18030"]
    assert match.confidence == 100
    assert match.language == "zh"


def test_euc_kr_scores_full_confidence() -> None:
    match = _score("대한민국의 수도는 서울이다".encode("euc_kr"))["EUC-KR"]
    assert match.confidence == 100
    assert match.language == "ko"


def test_invalid_sequences_rule_out_candidate(shift_jis_bytes: bytes) -> None:
    # Shift_JIS bytes are not valid EUC-JP often enough to score.
    scores = _score(shift_jis_bytes)
    assert scores.get("EUC-JP") is None or scores["EUC-JP"].confidence < 100


def test_ascii_input_yields_nothing() -> None:
    assert _score(b"plain ascii text") == {}
