from __future__ import annotations

import dataclasses

import pytest

from charlockholmes.config import (
    MAX_BYTES_ENV,
    DetectionOptions,
    DetectorConfig,
    initialize,
)
from charlockholmes.errors import InvalidArgumentError


def test_initialize_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(MAX_BYTES_ENV, raising=False)
    config = initialize()
    assert config.min_confidence == 10
    assert config.min_length == 4
    assert config.max_bytes == 200_000
    assert config.hint_bonus == 10
    assert config.registry


def test_initialize_overrides() -> None:
    config = initialize(min_confidence=50, min_length=8, max_bytes=1000, hint_bonus=0)
    assert (config.min_confidence, config.min_length, config.max_bytes) == (
        50,
        8,
        1000,
    )
    assert config.hint_bonus == 0


def test_config_is_immutable() -> None:
    config = initialize()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.min_confidence = 0  # type: ignore[misc]


def test_configs_share_models() -> None:
    assert initialize().language_models is initialize().language_models


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_confidence": 101},
        {"min_confidence": -1},
        {"min_confidence": True},
        {"min_length": 0},
        {"max_bytes": 0},
        {"max_bytes": 1.5},
        {"hint_bonus": 200},
    ],
)
def test_initialize_rejects_bad_values(kwargs: dict) -> None:
    with pytest.raises(InvalidArgumentError):
        initialize(**kwargs)


def test_max_bytes_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MAX_BYTES_ENV, "1234")
    assert initialize().max_bytes == 1234
    assert initialize(max_bytes=99).max_bytes == 99


@pytest.mark.parametrize("value", ["abc", "0", "-5"])
def test_bad_max_bytes_environment(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv(MAX_BYTES_ENV, value)
    with pytest.raises(InvalidArgumentError):
        initialize()


def test_detection_options_defaults() -> None:
    options = DetectionOptions()
    assert options.hint is None
    assert options.min_confidence is None
    assert options.strip_tags is False


@pytest.mark.parametrize(
    "kwargs",
    [{"hint": 5}, {"hint": b"utf-8"}, {"min_confidence": 101}, {"min_confidence": "5"}],
)
def test_detection_options_validation(kwargs: dict) -> None:
    with pytest.raises(InvalidArgumentError):
        DetectionOptions(**kwargs)


def test_detector_config_is_a_dataclass() -> None:
    assert dataclasses.is_dataclass(DetectorConfig)
