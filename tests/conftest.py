"""Shared test fixtures."""

from __future__ import annotations

import pytest

from charlockholmes.config import DetectorConfig, initialize
from charlockholmes.detector import Detector

JAPANESE_TEXT = "これはテストです。日本語のテキスト。"
RUSSIAN_TEXT = (
    "Она сказала, что он ещё не вернулся домой и что она ждала его весь "
    "вечер. Это было не так просто, как они думали."
)
GERMAN_TEXT = (
    "Die Größe des Gebäudes überraschte die Besucher. "
    "Natürlich können wir das ändern."
)


@pytest.fixture(scope="session")
def config() -> DetectorConfig:
    return initialize()


@pytest.fixture(scope="session")
def detector(config: DetectorConfig) -> Detector:
    return Detector(config)


@pytest.fixture
def shift_jis_bytes() -> bytes:
    return JAPANESE_TEXT.encode("shift_jis")


@pytest.fixture
def windows_1251_bytes() -> bytes:
    return RUSSIAN_TEXT.encode("cp1251")


@pytest.fixture
def windows_1252_bytes() -> bytes:
    return GERMAN_TEXT.encode("cp1252")


@pytest.fixture
def koi8_r_bytes() -> bytes:
    return RUSSIAN_TEXT.encode("koi8-r")
