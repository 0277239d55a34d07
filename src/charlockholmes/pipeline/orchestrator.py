"""Pipeline orchestrator: runs all detection stages in sequence."""

from __future__ import annotations

import logging

from charlockholmes.config import DetectionOptions, DetectorConfig
from charlockholmes.enums import EncodingFamily, MatchType
from charlockholmes.errors import UnsupportedEncodingNameError
from charlockholmes.models import guess_language
from charlockholmes.pipeline import EncodingMatch, PipelineContext
from charlockholmes.pipeline.ascii import detect_ascii
from charlockholmes.pipeline.binary import BINARY_MATCH, is_binary
from charlockholmes.pipeline.bom import detect_bom
from charlockholmes.pipeline.escape import detect_escape_encoding
from charlockholmes.pipeline.markup import strip_markup
from charlockholmes.pipeline.statistical import score_candidates
from charlockholmes.pipeline.structural import score_multibyte_candidates
from charlockholmes.pipeline.utf8 import detect_utf8
from charlockholmes.pipeline.utf1632 import detect_utf1632_patterns
from charlockholmes.pipeline.validity import filter_by_validity
from charlockholmes.registry import (
    PRIORITY,
    EncodingInfo,
    get_candidates,
    lookup_encoding,
)

logger = logging.getLogger(__name__)

# Language guessing only needs the start of the text; trigrams converge
# quickly.
_LANG_SCORE_MAX_BYTES = 2048


def sort_matches(matches: list[EncodingMatch]) -> list[EncodingMatch]:
    """Order matches by descending confidence, then registry order, then name."""
    return sorted(
        matches,
        key=lambda m: (
            -m.confidence,
            PRIORITY.get(m.name or "", len(PRIORITY)),
            m.name or "",
        ),
    )


def _resolve_hint(hint: str | None) -> EncodingInfo | None:
    if hint is None:
        return None
    try:
        return lookup_encoding(hint)
    except UnsupportedEncodingNameError:
        logger.warning("ignoring unsupported encoding hint %r", hint)
        return None


def _apply_hint(
    matches: list[EncodingMatch], hinted: EncodingInfo | None, bonus: int
) -> list[EncodingMatch]:
    """Raise the confidence of the hinted encoding by *bonus*, capped at 100."""
    if hinted is None:
        return matches
    biased: list[EncodingMatch] = []
    for m in matches:
        if m.name == hinted.name:
            logger.debug("hint %s: +%d confidence", m.name, bonus)
            m = EncodingMatch(
                name=m.name,
                confidence=min(100, m.confidence + bonus),
                language=m.language,
                type=m.type,
            )
        biased.append(m)
    return biased


def _fill_language(
    data: bytes,
    matches: list[EncodingMatch],
    config: DetectorConfig,
) -> list[EncodingMatch]:
    """Fill in the language of text matches that have none.

    Single-language encodings take their language from the registry; the
    rest (ASCII and the Unicode encodings) are decoded and guessed.
    """
    filled: list[EncodingMatch] = []
    sample = data[:_LANG_SCORE_MAX_BYTES]
    for m in matches:
        if m.language is None and m.type is MatchType.TEXT and m.name is not None:
            info = lookup_encoding(m.name)
            if len(info.languages) == 1:
                lang: str | None = info.languages[0]
            else:
                text = sample.decode(info.python_codec, errors="ignore")
                lang = guess_language(
                    text, config.language_models, config.frequent_chars
                )
            if lang is not None:
                m = EncodingMatch(
                    name=m.name, confidence=m.confidence, language=lang, type=m.type
                )
        filled.append(m)
    return filled


def _run_pipeline_core(
    data: bytes,
    config: DetectorConfig,
    ctx: PipelineContext,
    truncated: bool = False,
) -> list[EncodingMatch]:
    """Core pipeline logic. Returns the unsorted candidate list.

    *truncated* tells the UTF-8 stage that *data* was cut at ``max_bytes``.
    """
    if not data:
        return []

    # Stage 1a: BOM detection.  BOMs are definitive, and UTF-16/32 data
    # would look binary because of its NUL bytes.
    bom_result = detect_bom(data)
    if bom_result is not None:
        logger.debug("BOM found: %s", bom_result.name)
        return [bom_result]

    # Stage 1b: UTF-16/32 NUL-byte patterns, before binary detection.
    utf1632_result = detect_utf1632_patterns(data)
    if utf1632_result is not None:
        logger.debug("UTF-16/32 pattern found: %s", utf1632_result.name)
        return [utf1632_result]

    # Stage 1c: escape-sequence encodings, before binary (ESC is a control
    # byte) and ASCII (HZ is printable ASCII).
    escape_result = detect_escape_encoding(data)
    if escape_result is not None:
        logger.debug("escape sequences found: %s", escape_result.name)
        return [escape_result]

    # Valid multi-byte UTF-8 may carry control bytes (ANSI colour codes, for
    # instance) that must not trip the binary check.
    utf8_precheck = detect_utf8(data, truncated=truncated)

    # Stage 0: binary content
    if utf8_precheck is None and is_binary(data, max_bytes=config.max_bytes):
        logger.debug("binary content")
        return [BINARY_MATCH]

    # Stage 1d: ASCII
    ascii_results = detect_ascii(data)
    if ascii_results is not None:
        return ascii_results

    # Stage 1e: UTF-8 structural validation
    if utf8_precheck is not None:
        return [utf8_precheck]

    if len(data) < config.min_length:
        logger.debug(
            "%d bytes is below the %d byte analysis window",
            len(data),
            config.min_length,
        )
        return []

    # Stage 2: multi-byte CJK scoring
    results = score_multibyte_candidates(
        data,
        get_candidates(EncodingFamily.MULTI_BYTE, config.registry),
        config.frequent_chars,
        ctx,
    )

    # Stage 3: validity filtering and trigram scoring of single-byte encodings
    single_byte = get_candidates(EncodingFamily.SINGLE_BYTE, config.registry)
    valid = filter_by_validity(data, single_byte, ctx)
    results.extend(score_candidates(data, valid, config.language_models, ctx))
    return results


def run_pipeline(
    data: bytes,
    config: DetectorConfig,
    options: DetectionOptions | None = None,
) -> list[EncodingMatch]:
    """Run the full detection pipeline.

    :param data: The raw byte data to analyze.
    :param config: Detection parameters and static tables.
    :param options: Per-call settings (hint, markup stripping).
    :returns: Every candidate, sorted by confidence descending.  The
        confidence threshold is not applied here.
    """
    if options is None:
        options = DetectionOptions()
    ctx = PipelineContext()
    truncated = len(data) > config.max_bytes
    data = data[: config.max_bytes]
    if options.strip_tags:
        data = strip_markup(data)

    results = _run_pipeline_core(data, config, ctx, truncated)
    results = _apply_hint(results, _resolve_hint(options.hint), config.hint_bonus)
    results = _fill_language(data, results, config)
    return sort_matches(results)
