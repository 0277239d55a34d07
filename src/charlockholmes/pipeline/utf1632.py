"""Stage 1b: UTF-16/UTF-32 detection for data without a BOM.

Runs before binary detection: UTF-16 and UTF-32 text is full of NUL bytes
at fixed positions inside each code unit, which the binary stage would
otherwise take for binary content.
"""

from __future__ import annotations

import unicodedata

from charlockholmes.pipeline import DETERMINISTIC_CONFIDENCE, EncodingMatch

_SAMPLE_SIZE = 4096

# Shortest samples worth analysing: 4 UTF-32 or 5 UTF-16 code units.
_MIN_BYTES_UTF32 = 16
_MIN_BYTES_UTF16 = 10

# Share of code units that must have a NUL in the expected position.
# Latin text in UTF-16 is close to 100 %, CJK-heavy text still above 15 %,
# and single-byte encodings contain no NUL at all.
_UTF16_MIN_NULL_FRACTION = 0.10

# (name, codec, unit size, always-NUL offset, usually-NUL offset)
_UTF32_LAYOUTS: tuple[tuple[str, str, int, int], ...] = (
    ("UTF-32BE", "utf-32-be", 0, 1),
    ("UTF-32LE", "utf-32-le", 3, 2),
)
_UTF16_LAYOUTS: tuple[tuple[str, str, int], ...] = (
    ("UTF-16BE", "utf-16-be", 0),
    ("UTF-16LE", "utf-16-le", 1),
)


def _null_fraction(data: bytes, unit: int, offset: int) -> float:
    """Share of *unit*-sized code units holding NUL at *offset*."""
    units = len(data) // unit
    if units == 0:
        return 0.0
    nulls = data[offset : units * unit : unit].count(0)
    return nulls / units


def _text_quality(text: str) -> float:
    """Score how much *text* looks like human-readable content.

    Letters count fully and ASCII letters get a bonus, which is what tells
    the right byte order from the wrong one for Latin text (the wrong order
    yields CJK ideographs).  Returns -1.0 for text dominated by control
    characters or combining marks.
    """
    sample = text[:500]
    n = len(sample)
    if n == 0:
        return -1.0
    letters = ascii_letters = marks = controls = spaces = 0
    for c in sample:
        cat = unicodedata.category(c)
        if cat[0] == "L":
            letters += 1
            if c < "\x80":
                ascii_letters += 1
        elif cat[0] == "M":
            marks += 1
        elif cat == "Zs" or c in "\n\r\t":
            spaces += 1
        elif cat[0] == "C":
            controls += 1
    if controls / n > 0.1 or marks / n > 0.2:
        return -1.0
    score = letters / n + 0.5 * ascii_letters / n
    if n > 20 and spaces:
        score += 0.1
    return score


def _decode_quality(data: bytes, codec: str) -> float:
    try:
        return _text_quality(data.decode(codec))
    except UnicodeDecodeError:
        return -1.0


def _check_utf32(sample: bytes) -> EncodingMatch | None:
    if len(sample) < _MIN_BYTES_UTF32 or len(sample) % 4:
        return None
    for name, codec, fixed, usual in _UTF32_LAYOUTS:
        # Code points stop at U+10FFFF, so one byte per unit is always NUL;
        # BMP text also zeroes the next one in most units.
        if _null_fraction(sample, 4, fixed) < 1.0:
            continue
        if _null_fraction(sample, 4, usual) <= 0.5:
            continue
        if _decode_quality(sample, codec) > 0.0:
            return EncodingMatch(name=name, confidence=DETERMINISTIC_CONFIDENCE)
    return None


def _check_utf16(sample: bytes) -> EncodingMatch | None:
    sample = sample[: len(sample) - len(sample) % 2]
    if len(sample) < _MIN_BYTES_UTF16:
        return None
    scored: list[tuple[float, str]] = []
    for name, codec, offset in _UTF16_LAYOUTS:
        if _null_fraction(sample, 2, offset) < _UTF16_MIN_NULL_FRACTION:
            continue
        scored.append((_decode_quality(sample, codec), name))
    if not scored:
        return None
    quality, name = max(scored)
    # With a single plausible byte order any readable text will do; when
    # both qualify the winner must look clearly like text.
    threshold = 0.0 if len(scored) == 1 else 0.5
    if quality <= threshold:
        return None
    return EncodingMatch(name=name, confidence=DETERMINISTIC_CONFIDENCE)


def detect_utf1632_patterns(data: bytes) -> EncodingMatch | None:
    """Detect UTF-32 or UTF-16 encoding from null-byte patterns.

    UTF-32 is checked first since its pattern is the more specific one.

    :param data: The raw byte data to examine.
    :returns: An :class:`EncodingMatch`, or ``None`` if no pattern is found.
    """
    sample = data[:_SAMPLE_SIZE]
    return _check_utf32(sample) or _check_utf16(sample)
