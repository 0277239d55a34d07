"""Stage 1c: Escape-sequence encodings (ISO-2022-JP, ISO-2022-KR, HZ-GB-2312).

These encodings stay inside 7-bit bytes and switch character sets with ESC
(0x1B) or tilde sequences.  They must be recognised before binary detection
(ESC is a control byte) and before ASCII detection (HZ-GB-2312 is entirely
printable ASCII).
"""

from __future__ import annotations

from charlockholmes.pipeline import DETERMINISTIC_CONFIDENCE, EncodingMatch

# name, codec, language, designator sequences
_ISO2022: tuple[tuple[str, str, str, tuple[bytes, ...]], ...] = (
    (
        "ISO-2022-JP",
        "iso2022_jp",
        "ja",
        (b"\x1b$B", b"\x1b$@", b"\x1b(J"),
    ),
    ("ISO-2022-KR", "iso2022_kr", "ko", (b"\x1b$)C",)),
)


def _has_valid_hz_regions(data: bytes) -> bool:
    """Check that at least one ~{...~} region holds GB2312 byte pairs.

    Inside a region every character is two bytes in 0x21-0x7E, so the run
    must be non-empty and of even length.
    """
    start = 0
    while True:
        begin = data.find(b"~{", start)
        if begin == -1:
            return False
        end = data.find(b"~}", begin + 2)
        if end == -1:
            return False
        region = data[begin + 2 : end]
        if (
            len(region) >= 2
            and len(region) % 2 == 0
            and all(0x21 <= b <= 0x7E for b in region)
        ):
            return True
        start = end + 2


def _decodes(data: bytes, codec: str) -> bool:
    try:
        data.decode(codec)
    except UnicodeDecodeError:
        return False
    return True


def detect_escape_encoding(data: bytes) -> EncodingMatch | None:
    """Detect ISO-2022 and HZ-GB-2312 from their shift sequences.

    The data must also decode cleanly with the matching codec, which rules
    out stray ESC bytes in otherwise unrelated content.

    :param data: The raw byte data to examine.
    :returns: An :class:`EncodingMatch`, or ``None``.
    """
    if b"\x1b" in data:
        for name, codec, language, designators in _ISO2022:
            if any(seq in data for seq in designators) and _decodes(data, codec):
                return EncodingMatch(
                    name=name,
                    confidence=DETERMINISTIC_CONFIDENCE,
                    language=language,
                )

    if (
        b"~{" in data
        and b"~}" in data
        and _has_valid_hz_regions(data)
        and _decodes(data, "hz")
    ):
        return EncodingMatch(
            name="HZ-GB-2312",
            confidence=DETERMINISTIC_CONFIDENCE,
            language="zh",
        )

    return None
