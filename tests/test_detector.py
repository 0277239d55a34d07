from __future__ import annotations

import dataclasses

import pytest

from charlockholmes.config import DetectionOptions, initialize
from charlockholmes.detector import Detector
from charlockholmes.errors import InvalidArgumentError


def test_default_config() -> None:
    detector = Detector()
    assert detector.config.min_confidence == 10


def test_rejects_foreign_config() -> None:
    with pytest.raises(InvalidArgumentError):
        Detector({"min_confidence": 10})  # type: ignore[arg-type]


def test_detect_is_first_of_detect_all(
    detector: Detector, shift_jis_bytes: bytes
) -> None:
    results = detector.detect_all(shift_jis_bytes)
    assert detector.detect(shift_jis_bytes) == results[0]


def test_threshold_is_inclusive(detector: Detector) -> None:
    names = [
        m.name
        for m in detector.detect_all(b"hello", DetectionOptions(min_confidence=90))
    ]
    assert names == ["ASCII", "UTF-8"]
    names = [
        m.name
        for m in detector.detect_all(b"hello", DetectionOptions(min_confidence=91))
    ]
    assert names == ["ASCII"]


def test_configured_threshold() -> None:
    detector = Detector(initialize(min_confidence=95))
    assert [m.name for m in detector.detect_all(b"hello")] == ["ASCII"]


def test_zero_threshold_keeps_everything(
    detector: Detector, windows_1252_bytes: bytes
) -> None:
    everything = detector.detect_all(
        windows_1252_bytes, DetectionOptions(min_confidence=0)
    )
    assert len(everything) >= len(detector.detect_all(windows_1252_bytes))


def test_bytes_like_inputs(detector: Detector) -> None:
    data = "Größe".encode()
    expected = detector.detect(data)
    assert detector.detect(bytearray(data)) == expected
    assert detector.detect(memoryview(data)) == expected


@pytest.mark.parametrize("data", ["text", None, 42, ["a"]])
def test_non_bytes_rejected(detector: Detector, data: object) -> None:
    with pytest.raises(InvalidArgumentError):
        detector.detect(data)  # type: ignore[arg-type]


def test_options_type_checked(detector: Detector) -> None:
    with pytest.raises(InvalidArgumentError):
        detector.detect_all(b"hello", {"hint": "utf-8"})  # type: ignore[arg-type]


def test_empty_input(detector: Detector) -> None:
    assert detector.detect(b"") is None
    assert detector.detect_all(b"") == []


def test_supported_encodings(detector: Detector) -> None:
    names = detector.supported_encodings()
    assert names == detector.supported_encodings()
    assert "Shift_JIS" in names


def test_config_registry_limits_candidates(shift_jis_bytes: bytes) -> None:
    base = initialize()
    registry = tuple(info for info in base.registry if info.name != "Shift_JIS")
    detector = Detector(dataclasses.replace(base, registry=registry))
    assert "Shift_JIS" not in detector.supported_encodings()
    names = [m.name for m in detector.detect_all(shift_jis_bytes)]
    assert "Shift_JIS" not in names
