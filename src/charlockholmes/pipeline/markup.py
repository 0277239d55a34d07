"""Input filter: strip HTML/XML markup before analysis.

Tag names and attribute values are ASCII and would otherwise dilute the
statistics of the text around them.
"""

from __future__ import annotations

# Stripping is abandoned for input with fewer tags than this; it is
# probably not markup at all.
_MIN_OPEN_TAGS = 5

# Input this long that strips down to less than _MIN_STRIPPED_BYTES is
# essentially nothing but markup, so the raw bytes are analysed instead.
_MIN_RAW_FOR_FALLBACK = 600
_MIN_STRIPPED_BYTES = 100


def strip_markup(data: bytes) -> bytes:
    """Remove ``<...>`` spans from *data* when it looks like markup.

    A ``<`` inside an open tag counts as a bad tag.  The raw input is
    returned unchanged when there are fewer than five tags, when more than
    one tag in five is bad, or when stripping leaves almost nothing.

    :param data: The raw byte data.
    :returns: The stripped bytes, or *data* itself.
    """
    out = bytearray()
    in_markup = False
    open_tags = 0
    bad_tags = 0
    for b in data:
        if b == 0x3C:  # <
            if in_markup:
                bad_tags += 1
            in_markup = True
            open_tags += 1
        if not in_markup:
            out.append(b)
        if b == 0x3E:  # >
            in_markup = False

    if (
        open_tags < _MIN_OPEN_TAGS
        or bad_tags * 5 > open_tags
        or (len(out) < _MIN_STRIPPED_BYTES and len(data) > _MIN_RAW_FOR_FALLBACK)
    ):
        return data
    return bytes(out)
