"""Detector configuration.

:func:`initialize` builds the immutable :class:`DetectorConfig` a
:class:`~charlockholmes.detector.Detector` runs with.  Per-call tweaks travel
separately in :class:`DetectionOptions`.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Mapping

from charlockholmes._utils import (
    DEFAULT_MAX_BYTES,
    HINT_BONUS,
    MIN_ANALYSIS_BYTES,
    MINIMUM_THRESHOLD,
    _validate_confidence,
    _validate_hint,
    _validate_positive_int,
)
from charlockholmes.errors import InvalidArgumentError
from charlockholmes.models import load_frequent_characters, load_language_models
from charlockholmes.registry import REGISTRY, EncodingInfo

logger = logging.getLogger(__name__)

#: Environment variable overriding the default ``max_bytes``.
MAX_BYTES_ENV = "CHARLOCKHOLMES_MAX_BYTES"


@dataclasses.dataclass(frozen=True)
class DetectorConfig:
    """Process-wide detection parameters and static tables.

    Instances are immutable and safe to share between detectors and threads.
    """

    registry: tuple[EncodingInfo, ...]
    language_models: Mapping[str, frozenset[str]]
    frequent_chars: Mapping[str, frozenset[str]]
    min_confidence: int = MINIMUM_THRESHOLD
    min_length: int = MIN_ANALYSIS_BYTES
    max_bytes: int = DEFAULT_MAX_BYTES
    hint_bonus: int = HINT_BONUS


@dataclasses.dataclass(frozen=True)
class DetectionOptions:
    """Optional per-call settings.

    :param hint: Declared or expected encoding.  The matching candidate gets
        a confidence bonus; an unknown name is ignored.
    :param min_confidence: Overrides :attr:`DetectorConfig.min_confidence`.
    :param strip_tags: Strip HTML/XML markup before analysis.
    """

    hint: str | None = None
    min_confidence: int | None = None
    strip_tags: bool = False

    def __post_init__(self) -> None:
        _validate_hint(self.hint)
        if self.min_confidence is not None:
            _validate_confidence(self.min_confidence, "min_confidence")


def _max_bytes_from_env() -> int:
    raw = os.environ.get(MAX_BYTES_ENV)
    if not raw:
        return DEFAULT_MAX_BYTES
    try:
        value = int(raw)
    except ValueError:
        msg = f"{MAX_BYTES_ENV} must be a positive integer, got {raw!r}"
        raise InvalidArgumentError(msg) from None
    logger.debug("max_bytes set to %d from %s", value, MAX_BYTES_ENV)
    return value


def initialize(
    *,
    min_confidence: int = MINIMUM_THRESHOLD,
    min_length: int = MIN_ANALYSIS_BYTES,
    max_bytes: int | None = None,
    hint_bonus: int = HINT_BONUS,
) -> DetectorConfig:
    """Build a :class:`DetectorConfig`.

    The language models are computed on first use and shared by every
    configuration in the process.

    :param min_confidence: Candidates below this confidence are not reported.
    :param min_length: Inputs shorter than this many bytes are only checked
        by the deterministic stages (BOM, ASCII, UTF-8, binary).
    :param max_bytes: Maximum number of bytes examined per call.  Defaults to
        ``$CHARLOCKHOLMES_MAX_BYTES`` or 200 000.
    :param hint_bonus: Confidence added to the candidate named by a hint.
    :raises InvalidArgumentError: If any value is out of range.
    """
    if max_bytes is None:
        max_bytes = _max_bytes_from_env()
    _validate_confidence(min_confidence, "min_confidence")
    _validate_positive_int(min_length, "min_length")
    _validate_positive_int(max_bytes, "max_bytes")
    _validate_confidence(hint_bonus, "hint_bonus")
    return DetectorConfig(
        registry=REGISTRY,
        language_models=load_language_models(),
        frequent_chars=load_frequent_characters(),
        min_confidence=min_confidence,
        min_length=min_length,
        max_bytes=max_bytes,
        hint_bonus=hint_bonus,
    )
