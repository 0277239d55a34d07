"""Character encoding detection: detect, detect_all and get_supported_encodings."""

from __future__ import annotations

import threading

from charlockholmes.config import DetectionOptions, DetectorConfig, initialize
from charlockholmes.detector import Detector
from charlockholmes.enums import EncodingFamily, MatchType
from charlockholmes.errors import (
    CharlockHolmesError,
    InvalidArgumentError,
    UnsupportedEncodingNameError,
)
from charlockholmes.pipeline import EncodingMatch

__version__ = "0.1.0"
__all__ = [
    "CharlockHolmesError",
    "DetectionOptions",
    "Detector",
    "DetectorConfig",
    "EncodingFamily",
    "EncodingMatch",
    "InvalidArgumentError",
    "MatchType",
    "UnsupportedEncodingNameError",
    "detect",
    "detect_all",
    "get_supported_encodings",
    "initialize",
]

_DEFAULT_DETECTOR: Detector | None = None
_DEFAULT_DETECTOR_LOCK = threading.Lock()


def _default_detector() -> Detector:
    global _DEFAULT_DETECTOR  # noqa: PLW0603
    if _DEFAULT_DETECTOR is not None:
        return _DEFAULT_DETECTOR
    with _DEFAULT_DETECTOR_LOCK:
        if _DEFAULT_DETECTOR is None:
            _DEFAULT_DETECTOR = Detector(initialize())
        return _DEFAULT_DETECTOR


def detect(
    byte_str: bytes | bytearray | memoryview,
    hint: str | None = None,
    *,
    min_confidence: int | None = None,
    strip_tags: bool = False,
) -> EncodingMatch | None:
    """Detect the most likely encoding of the given byte string.

    :param byte_str: The bytes to examine.
    :param hint: Declared or expected encoding.  Biases the result towards
        that encoding; unknown names are ignored.
    :param min_confidence: Override the default reporting threshold (10).
    :param strip_tags: Strip HTML/XML markup before analysis.
    :returns: The best :class:`EncodingMatch`, or ``None`` when no encoding
        can be determined (for instance on empty input).
    :raises InvalidArgumentError: If *byte_str* is not bytes-like or an
        option has the wrong type.
    :raises TypeError: If *byte_str* is omitted.  This is Python's own
        argument error rather than :class:`InvalidArgumentError`; the latter
        subclasses :class:`TypeError`, so ``except TypeError`` catches both.
    """
    options = DetectionOptions(
        hint=hint, min_confidence=min_confidence, strip_tags=strip_tags
    )
    return _default_detector().detect(byte_str, options)


def detect_all(
    byte_str: bytes | bytearray | memoryview,
    hint: str | None = None,
    *,
    min_confidence: int | None = None,
    strip_tags: bool = False,
) -> list[EncodingMatch]:
    """Detect every plausible encoding of the given byte string.

    Takes the same arguments as :func:`detect`.  Results below the
    confidence threshold are dropped; an empty list means no encoding
    qualified.

    :returns: Matches sorted by descending confidence.
    """
    options = DetectionOptions(
        hint=hint, min_confidence=min_confidence, strip_tags=strip_tags
    )
    return _default_detector().detect_all(byte_str, options)


def get_supported_encodings() -> tuple[str, ...]:
    """Return the canonical names of all encodings the detector can report."""
    return _default_detector().supported_encodings()
