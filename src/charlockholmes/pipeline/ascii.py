"""Stage 1c: Pure ASCII detection."""

from __future__ import annotations

from charlockholmes.pipeline import EncodingMatch

# Allowed ASCII bytes: the whitespace controls 0x09-0x0D and 0x20-0x7F
# (printable ASCII plus DEL), none of which the binary stage counts.
# bytes.translate deletes these from the input; if anything remains, the
# data is not pure ASCII.
_ALLOWED_ASCII: bytes = bytes([*range(0x09, 0x0E), *range(0x20, 0x80)])

# UTF-8 is a strict superset of ASCII, so it is always an equally valid but
# less specific answer.
_UTF8_SUPERSET_CONFIDENCE = 90


def detect_ascii(data: bytes) -> list[EncodingMatch] | None:
    """Return ASCII matches if all bytes are printable ASCII, whitespace or DEL.

    :param data: The raw byte data to examine.
    :returns: ``ASCII`` at confidence 100 followed by ``UTF-8``, or ``None``.
    """
    if not data:
        return None
    if data.translate(None, _ALLOWED_ASCII):
        return None  # Non-allowed bytes remain
    return [
        EncodingMatch(name="ASCII", confidence=100),
        EncodingMatch(name="UTF-8", confidence=_UTF8_SUPERSET_CONFIDENCE),
    ]
