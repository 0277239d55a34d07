"""Stage 2b: Multi-byte CJK scoring.

Each candidate decodes the input with replacement characters.  Invalid
sequences count against it, and the multi-byte characters it produces are
checked against the frequent characters of the encoding's language: real
CJK text decoded with the right codec is dominated by them, while the wrong
codec yields rare ideographs.
"""

from __future__ import annotations

from collections.abc import Mapping

from charlockholmes.models import score_multibyte
from charlockholmes.pipeline import EncodingMatch, PipelineContext
from charlockholmes.registry import EncodingInfo

# Byte table for fast non-ASCII counting via bytes.translate.
_HIGH_BYTES: bytes = bytes(range(0x80, 0x100))


def has_high_bytes(data: bytes) -> bool:
    """Return True if *data* contains any byte above 0x7F."""
    return len(data.translate(None, _HIGH_BYTES)) != len(data)


def score_multibyte_candidates(
    data: bytes,
    candidates: tuple[EncodingInfo, ...],
    frequent_chars: Mapping[str, frozenset[str]],
    ctx: PipelineContext,
) -> list[EncodingMatch]:
    """Score every multi-byte candidate.

    :param data: The raw byte data.
    :param candidates: Multi-byte registry entries to try.
    :param frequent_chars: Frequent-character set per language.
    :param ctx: Per-run context caching the decoded text.
    :returns: One match per candidate with a confidence above zero.
    """
    if not has_high_bytes(data):
        return []
    results: list[EncodingMatch] = []
    for enc in candidates:
        text = ctx.decode(data, enc.python_codec, errors="replace")
        best = 0
        best_lang: str | None = None
        for lang in enc.languages:
            score = score_multibyte(text, frequent_chars.get(lang, frozenset()))
            if score > best:
                best, best_lang = score, lang
        if best > 0:
            results.append(
                EncodingMatch(name=enc.name, confidence=best, language=best_lang)
            )
    return results
