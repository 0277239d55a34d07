"""Stage 2a: Byte sequence validity filtering."""

from __future__ import annotations

from charlockholmes.pipeline import PipelineContext
from charlockholmes.registry import EncodingInfo

# C1 control bytes never appear in genuine ISO-8859 text; their presence
# means a Windows code page.
_C1_BYTES: bytes = bytes(range(0x80, 0xA0))


def has_c1_bytes(data: bytes) -> bool:
    """Return True if *data* contains any byte in 0x80-0x9F."""
    return len(data.translate(None, _C1_BYTES)) != len(data)


def filter_by_validity(
    data: bytes,
    candidates: tuple[EncodingInfo, ...],
    ctx: PipelineContext,
) -> tuple[EncodingInfo, ...]:
    """Filter candidates to only those where *data* decodes without errors.

    ISO-8859 candidates are also dropped when *data* holds C1 bytes.

    :param data: The raw byte data to test.
    :param candidates: Encoding candidates to validate.
    :param ctx: Per-run context caching the decoded text.
    :returns: The subset of *candidates* that can decode *data*.
    """
    if not data:
        return candidates

    c1 = has_c1_bytes(data)
    valid = []
    for enc in candidates:
        if enc.iso_c1_free and c1:
            continue
        try:
            ctx.decode(data, enc.python_codec)
        except (UnicodeDecodeError, LookupError):
            continue
        valid.append(enc)
    return tuple(valid)
