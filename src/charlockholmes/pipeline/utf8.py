"""Stage 1e: UTF-8 structural validation.

Only data holding at least one multi-byte sequence is reported here; pure
ASCII belongs to the ASCII stage.
"""

from __future__ import annotations

from charlockholmes.pipeline import EncodingMatch


def _lead_table() -> dict[int, tuple[int, int, int]]:
    """Map each valid lead byte to (sequence length, second byte min, max).

    The narrowed second-byte ranges exclude overlong forms, UTF-16
    surrogates and code points above U+10FFFF.
    """
    table: dict[int, tuple[int, int, int]] = {}
    for b in range(0xC2, 0xE0):
        table[b] = (2, 0x80, 0xBF)
    for b in range(0xE0, 0xF0):
        table[b] = (3, 0x80, 0xBF)
    table[0xE0] = (3, 0xA0, 0xBF)
    table[0xED] = (3, 0x80, 0x9F)
    for b in range(0xF0, 0xF5):
        table[b] = (4, 0x80, 0xBF)
    table[0xF0] = (4, 0x90, 0xBF)
    table[0xF4] = (4, 0x80, 0x8F)
    return table


_LEADS = _lead_table()

_BASE_CONFIDENCE = 80
_MAX_CONFIDENCE = 99


def _confidence(multibyte_bytes: int, length: int) -> int:
    # A sixth of the input in multi-byte sequences already saturates.
    ratio = min(multibyte_bytes / length * 6, 1.0)
    return min(
        _MAX_CONFIDENCE,
        _BASE_CONFIDENCE + int((_MAX_CONFIDENCE - _BASE_CONFIDENCE) * ratio),
    )


def detect_utf8(data: bytes, truncated: bool = False) -> EncodingMatch | None:
    """Validate UTF-8 byte structure.

    :param data: The raw byte data to examine.
    :param truncated: Whether *data* was cut from longer input at
        ``max_bytes``.  Only then is a sequence cut short by the end of
        *data* accepted.
    :returns: An :class:`EncodingMatch` for UTF-8, or ``None``.
    """
    length = len(data)
    pos = 0
    sequences = 0
    multibyte_bytes = 0

    while pos < length:
        if data[pos] < 0x80:
            pos += 1
            continue
        lead = _LEADS.get(data[pos])
        if lead is None:
            return None
        seq_len, low, high = lead
        tail = data[pos + 1 : pos + seq_len]
        if tail and not low <= tail[0] <= high:
            return None
        if any(not 0x80 <= b <= 0xBF for b in tail[1:]):
            return None
        if len(tail) < seq_len - 1:
            if not truncated:
                return None
            break
        sequences += 1
        multibyte_bytes += seq_len
        pos += seq_len

    if sequences == 0:
        return None
    return EncodingMatch(
        name="UTF-8", confidence=_confidence(multibyte_bytes, length)
    )
