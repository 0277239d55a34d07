"""Stage 1a: BOM (Byte Order Mark) detection."""

from __future__ import annotations

from charlockholmes.pipeline import EncodingMatch

# Ordered longest-first so UTF-32 is checked before UTF-16
# (UTF-32-LE BOM starts with the same bytes as UTF-16-LE BOM)
_BOMS: tuple[tuple[bytes, str], ...] = (
    (b"\x00\x00\xfe\xff", "UTF-32BE"),
    (b"\xff\xfe\x00\x00", "UTF-32LE"),
    (b"\xef\xbb\xbf", "UTF-8"),
    (b"\xfe\xff", "UTF-16BE"),
    (b"\xff\xfe", "UTF-16LE"),
)

_UTF32_BOMS: frozenset[bytes] = frozenset({b"\x00\x00\xfe\xff", b"\xff\xfe\x00\x00"})


def detect_bom(data: bytes) -> EncodingMatch | None:
    """Check for a BOM at the start of data. Returns a match or None."""
    for bom_bytes, encoding in _BOMS:
        if data.startswith(bom_bytes):
            # FF FE 00 00 is also a UTF-16-LE BOM followed by U+0000.  Only
            # accept UTF-32 when the payload is a whole number of 4-byte
            # code units.
            if bom_bytes in _UTF32_BOMS:
                payload_len = len(data) - len(bom_bytes)
                if payload_len % 4 != 0:
                    continue
            return EncodingMatch(name=encoding, confidence=100)
    return None
