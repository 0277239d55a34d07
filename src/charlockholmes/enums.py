"""Enumerations for charlockholmes."""

import enum


class MatchType(str, enum.Enum):
    """Whether a match describes decodable text or opaque binary content."""

    TEXT = "text"
    BINARY = "binary"


class EncodingFamily(enum.Enum):
    """Recognizer family an encoding belongs to.

    The family decides which pipeline stage is able to report the encoding.
    """

    ASCII = "ascii"
    UNICODE = "unicode"
    ESCAPE = "escape"
    MULTI_BYTE = "multi-byte"
    SINGLE_BYTE = "single-byte"
