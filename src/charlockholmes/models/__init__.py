"""Language model building and scoring utilities.

Single-byte encodings are scored with language trigram models: the input is
decoded with the candidate codec, normalised to lowercase letters separated
by single spaces, and the share of its trigrams found among a language's most
frequent trigrams becomes the confidence.  Multi-byte CJK encodings are
scored against sets of frequent characters instead.
"""

from __future__ import annotations

import collections
import math
import threading
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from charlockholmes.models.corpora import FREQUENT_CHARACTERS, TRIGRAM_CORPORA

#: Number of trigrams kept per language model.
TRIGRAM_MODEL_SIZE = 64

# Hit ratio above which a trigram score saturates.
_SATURATION_RATIO = 0.33
_SATURATED_CONFIDENCE = 98

# A guessed language must reach this confidence to be reported.
_MIN_LANGUAGE_CONFIDENCE = 20

# Fewer trigrams than this say nothing about the language; a single chance
# hit would otherwise score high.
_MIN_LANGUAGE_TRIGRAMS = 20

# Multi-byte text without a single frequent character is barely plausible;
# this stays below the default reporting threshold.
_NO_COMMON_CONFIDENCE = 5

_LANGUAGE_MODELS: Mapping[str, frozenset[str]] | None = None
_LANGUAGE_MODELS_LOCK = threading.Lock()
_FREQUENT_CHARS: Mapping[str, frozenset[str]] | None = None
_FREQUENT_CHARS_LOCK = threading.Lock()


def normalize_text(text: str) -> str:
    """Lowercase *text*, fold non-letters to single spaces and pad with spaces."""
    folded = "".join(c.lower() if c.isalpha() else " " for c in text)
    words = folded.split()
    if not words:
        return ""
    return " " + " ".join(words) + " "


def extract_trigrams(text: str) -> list[str]:
    """Return every trigram of the normalised form of *text*, in order."""
    norm = normalize_text(text)
    return [norm[i : i + 3] for i in range(len(norm) - 2)]


def build_trigram_model(text: str, size: int = TRIGRAM_MODEL_SIZE) -> frozenset[str]:
    """Return the *size* most frequent trigrams of *text*.

    Equal counts are ordered lexically so the model never depends on
    dictionary iteration order.
    """
    counts = collections.Counter(extract_trigrams(text))
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return frozenset(trigram for trigram, _ in ranked[:size])


def score_trigrams(trigrams: list[str], model: frozenset[str]) -> int:
    """Score *trigrams* against a language model.

    :param trigrams: Trigrams extracted from the decoded input.
    :param model: A model built by :func:`build_trigram_model`.
    :returns: A confidence between 0 and 100.
    """
    if not trigrams:
        return 0
    hits = sum(1 for t in trigrams if t in model)
    ratio = hits / len(trigrams)
    if ratio > _SATURATION_RATIO:
        return _SATURATED_CONFIDENCE
    return int(ratio * 300)


def score_best_language(
    trigrams: list[str],
    languages: Iterable[str],
    models: Mapping[str, frozenset[str]],
) -> tuple[int, str | None]:
    """Score *trigrams* against each of *languages* and keep the best.

    :returns: A ``(confidence, language)`` tuple.  Earlier languages win
        ties; ``language`` is ``None`` when nothing scored above zero.
    """
    best_score = 0
    best_lang: str | None = None
    for lang in languages:
        model = models.get(lang)
        if model is None:
            continue
        score = score_trigrams(trigrams, model)
        if score > best_score:
            best_score = score
            best_lang = lang
    return best_score, best_lang


def score_multibyte(text: str, frequent: frozenset[str]) -> int:
    """Score text decoded from a multi-byte encoding.

    *text* must have been decoded with ``errors="replace"`` so that each
    invalid byte sequence shows up as U+FFFD.  Every other non-ASCII
    character counts as a multi-byte character; those found in *frequent*
    count as common characters.

    Text without any common character scores 5.  Short samples (ten
    multi-byte characters or fewer) score on the ratio of common characters.
    Longer samples score logarithmically on the number of common characters,
    reaching 100 once a quarter of the multi-byte characters are common.
    """
    bad = 0
    multibyte = 0
    common = 0
    for c in text:
        if c == "\ufffd":
            bad += 1
        elif c >= "\x80":
            multibyte += 1
            if c in frequent:
                common += 1

    if multibyte == 0 or multibyte < 20 * bad:
        return 0
    if common == 0:
        return _NO_COMMON_CONFIDENCE
    if multibyte <= 10:
        return 10 + (60 * common) // multibyte
    max_val = math.log(multibyte / 4)
    scale = 90.0 / max_val
    return min(100, int(math.log(common + 1) * scale + 10))


def load_language_models() -> Mapping[str, frozenset[str]]:
    """Build (once) and return the trigram model for every built-in language."""
    global _LANGUAGE_MODELS  # noqa: PLW0603
    if _LANGUAGE_MODELS is not None:
        return _LANGUAGE_MODELS
    with _LANGUAGE_MODELS_LOCK:
        if _LANGUAGE_MODELS is None:
            _LANGUAGE_MODELS = MappingProxyType(
                {
                    lang: build_trigram_model(text)
                    for lang, text in TRIGRAM_CORPORA.items()
                }
            )
        return _LANGUAGE_MODELS


def load_frequent_characters() -> Mapping[str, frozenset[str]]:
    """Return (once) the frequent-character set of each CJK language."""
    global _FREQUENT_CHARS  # noqa: PLW0603
    if _FREQUENT_CHARS is not None:
        return _FREQUENT_CHARS
    with _FREQUENT_CHARS_LOCK:
        if _FREQUENT_CHARS is None:
            _FREQUENT_CHARS = MappingProxyType(
                {lang: frozenset(chars) for lang, chars in FREQUENT_CHARACTERS.items()}
            )
        return _FREQUENT_CHARS


def guess_language(
    text: str,
    trigram_models: Mapping[str, frozenset[str]],
    frequent_chars: Mapping[str, frozenset[str]],
) -> str | None:
    """Guess the language of already decoded *text*.

    Used for Unicode results, which carry no language signal of their own.
    CJK languages are scored on their share of frequent characters, all
    other languages on trigrams, which need at least twenty trigrams of
    text to count.

    :returns: An ISO 639-1 code, or ``None`` when no language is convincing.
    """
    if not text:
        return None
    best_score = 0
    best_lang: str | None = None
    trigrams = extract_trigrams(text)
    if len(trigrams) >= _MIN_LANGUAGE_TRIGRAMS:
        best_score, best_lang = score_best_language(
            trigrams, trigram_models, trigram_models
        )

    non_ascii = [c for c in text if c >= "\x80" and c.isalpha()]
    if non_ascii:
        for lang, chars in frequent_chars.items():
            hits = sum(1 for c in non_ascii if c in chars)
            score = (100 * hits) // len(non_ascii)
            if score > best_score:
                best_score = score
                best_lang = lang

    if best_score < _MIN_LANGUAGE_CONFIDENCE:
        return None
    return best_lang
