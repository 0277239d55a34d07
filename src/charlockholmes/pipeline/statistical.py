"""Stage 3: Statistical trigram scoring of single-byte encodings."""

from __future__ import annotations

from collections.abc import Mapping

from charlockholmes.models import extract_trigrams, score_best_language
from charlockholmes.pipeline import EncodingMatch, PipelineContext
from charlockholmes.registry import EncodingInfo


def score_candidates(
    data: bytes,
    candidates: tuple[EncodingInfo, ...],
    language_models: Mapping[str, frozenset[str]],
    ctx: PipelineContext,
) -> list[EncodingMatch]:
    """Score byte-valid single-byte candidates against their language models.

    Candidates must already have passed validity filtering, so their decoded
    text is in *ctx*.  Encodings that decode to identical text share the
    same trigrams and the same score.

    :returns: One match per candidate scoring above zero, carrying the best
        language.
    """
    if not data or not candidates:
        return []

    trigram_cache: dict[str, list[str]] = {}
    results: list[EncodingMatch] = []
    for enc in candidates:
        text = ctx.decode(data, enc.python_codec)
        trigrams = trigram_cache.get(text)
        if trigrams is None:
            trigrams = extract_trigrams(text)
            trigram_cache[text] = trigrams
        confidence, language = score_best_language(
            trigrams, enc.languages, language_models
        )
        if confidence > 0:
            results.append(
                EncodingMatch(name=enc.name, confidence=confidence, language=language)
            )
    return results
