"""Detector: the encoding detection entry point."""

from __future__ import annotations

import logging

from charlockholmes._utils import _coerce_bytes
from charlockholmes.config import DetectionOptions, DetectorConfig, initialize
from charlockholmes.errors import InvalidArgumentError
from charlockholmes.pipeline import EncodingMatch
from charlockholmes.pipeline.orchestrator import run_pipeline
from charlockholmes.registry import supported_encoding_names

logger = logging.getLogger(__name__)


class Detector:
    """Character encoding detector.

    A detector holds nothing but its immutable :class:`DetectorConfig`, so a
    single instance can serve any number of threads.  Every call works on
    its own copy of the input and builds its results from scratch.
    """

    def __init__(self, config: DetectorConfig | None = None) -> None:
        """Initialize the detector.

        :param config: Configuration from :func:`initialize`.  A default
            configuration is built when omitted.
        """
        if config is None:
            config = initialize()
        elif not isinstance(config, DetectorConfig):
            msg = f"config must be a DetectorConfig, not {type(config).__name__}"
            raise InvalidArgumentError(msg)
        self._config = config

    @property
    def config(self) -> DetectorConfig:
        """The configuration this detector runs with."""
        return self._config

    def detect_all(
        self,
        data: bytes | bytearray | memoryview,
        options: DetectionOptions | None = None,
    ) -> list[EncodingMatch]:
        """Return every candidate encoding at or above the confidence threshold.

        :param data: The bytes to examine.
        :param options: Per-call settings; see :class:`DetectionOptions`.
        :returns: Matches sorted by descending confidence, ties broken by
            registry order and then name.  Empty when nothing qualifies.
        :raises InvalidArgumentError: If *data* is not bytes-like or
            *options* is not a :class:`DetectionOptions`.
        """
        raw = _coerce_bytes(data)
        if options is None:
            options = DetectionOptions()
        elif not isinstance(options, DetectionOptions):
            msg = f"options must be DetectionOptions, not {type(options).__name__}"
            raise InvalidArgumentError(msg)

        threshold = options.min_confidence
        if threshold is None:
            threshold = self._config.min_confidence

        matches = run_pipeline(raw, self._config, options)
        kept = [m for m in matches if m.confidence >= threshold]
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%d of %d candidates at or above confidence %d: %s",
                len(kept),
                len(matches),
                threshold,
                ", ".join(f"{m.name}={m.confidence}" for m in matches),
            )
        return kept

    def detect(
        self,
        data: bytes | bytearray | memoryview,
        options: DetectionOptions | None = None,
    ) -> EncodingMatch | None:
        """Return the most likely encoding of *data*, or ``None``.

        Always equal to the first element of :meth:`detect_all`.
        """
        matches = self.detect_all(data, options)
        return matches[0] if matches else None

    def supported_encodings(self) -> tuple[str, ...]:
        """Return the canonical name of every encoding this detector can report."""
        return supported_encoding_names(self._config.registry)
