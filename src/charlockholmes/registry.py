"""Registry of the encodings charlockholmes can report.

Order matters: it is the tiebreak order used when two candidates end up
with the same confidence, so more common encodings come first within each
family.
"""

from __future__ import annotations

import codecs
import dataclasses

from charlockholmes.enums import EncodingFamily
from charlockholmes.errors import UnsupportedEncodingNameError

_LATIN1_LANGUAGES = ("en", "da", "de", "es", "fr", "it", "nl", "no", "pt", "sv")
_LATIN2_LANGUAGES = ("cs", "hu", "pl", "ro")


@dataclasses.dataclass(frozen=True, slots=True)
class EncodingInfo:
    """Metadata for one reportable encoding.

    :param name: Canonical name reported in detection results.
    :param python_codec: Codec name passed to :meth:`bytes.decode`.
    :param family: The recognizer family responsible for the encoding.
    :param languages: ISO 639-1 codes of languages the encoding is scored
        against.  Empty for encodings that carry no language signal.
    :param aliases: Extra names accepted by :func:`lookup_encoding`.
    :param iso_c1_free: True for ISO-8859 parts, which never carry C1
        control bytes (0x80-0x9F) in real text.
    """

    name: str
    python_codec: str
    family: EncodingFamily
    languages: tuple[str, ...] = ()
    aliases: tuple[str, ...] = ()
    iso_c1_free: bool = False


REGISTRY: tuple[EncodingInfo, ...] = (
    EncodingInfo("ASCII", "ascii", EncodingFamily.ASCII, aliases=("US-ASCII",)),
    EncodingInfo("UTF-8", "utf-8", EncodingFamily.UNICODE, aliases=("UTF8",)),
    EncodingInfo("UTF-16LE", "utf-16-le", EncodingFamily.UNICODE),
    EncodingInfo("UTF-16BE", "utf-16-be", EncodingFamily.UNICODE),
    EncodingInfo("UTF-32LE", "utf-32-le", EncodingFamily.UNICODE),
    EncodingInfo("UTF-32BE", "utf-32-be", EncodingFamily.UNICODE),
    EncodingInfo(
        "ISO-2022-JP", "iso2022_jp", EncodingFamily.ESCAPE, languages=("ja",)
    ),
    EncodingInfo(
        "ISO-2022-KR", "iso2022_kr", EncodingFamily.ESCAPE, languages=("ko",)
    ),
    EncodingInfo(
        "HZ-GB-2312", "hz", EncodingFamily.ESCAPE, languages=("zh",), aliases=("HZ",)
    ),
    EncodingInfo(
        "Shift_JIS",
        "shift_jis",
        EncodingFamily.MULTI_BYTE,
        languages=("ja",),
        aliases=("SJIS", "MS_Kanji"),
    ),
    EncodingInfo("EUC-JP", "euc_jp", EncodingFamily.MULTI_BYTE, languages=("ja",)),
    EncodingInfo("EUC-KR", "euc_kr", EncodingFamily.MULTI_BYTE, languages=("ko",)),
    EncodingInfo(
        "GB18030",
        "gb18030",
        EncodingFamily.MULTI_BYTE,
        languages=("zh",),
        aliases=("GB2312", "GBK"),
    ),
    EncodingInfo("Big5", "big5", EncodingFamily.MULTI_BYTE, languages=("zh",)),
    EncodingInfo(
        "ISO-8859-1",
        "iso-8859-1",
        EncodingFamily.SINGLE_BYTE,
        languages=_LATIN1_LANGUAGES,
        aliases=("latin1", "latin-1"),
        iso_c1_free=True,
    ),
    EncodingInfo(
        "windows-1252",
        "cp1252",
        EncodingFamily.SINGLE_BYTE,
        languages=_LATIN1_LANGUAGES,
    ),
    EncodingInfo(
        "ISO-8859-2",
        "iso-8859-2",
        EncodingFamily.SINGLE_BYTE,
        languages=_LATIN2_LANGUAGES,
        aliases=("latin2",),
        iso_c1_free=True,
    ),
    EncodingInfo(
        "windows-1250",
        "cp1250",
        EncodingFamily.SINGLE_BYTE,
        languages=_LATIN2_LANGUAGES,
    ),
    EncodingInfo(
        "ISO-8859-5",
        "iso-8859-5",
        EncodingFamily.SINGLE_BYTE,
        languages=("ru",),
        iso_c1_free=True,
    ),
    EncodingInfo(
        "windows-1251", "cp1251", EncodingFamily.SINGLE_BYTE, languages=("ru",)
    ),
    EncodingInfo("KOI8-R", "koi8-r", EncodingFamily.SINGLE_BYTE, languages=("ru",)),
    EncodingInfo(
        "ISO-8859-6",
        "iso-8859-6",
        EncodingFamily.SINGLE_BYTE,
        languages=("ar",),
        iso_c1_free=True,
    ),
    EncodingInfo(
        "windows-1256", "cp1256", EncodingFamily.SINGLE_BYTE, languages=("ar",)
    ),
    EncodingInfo(
        "ISO-8859-7",
        "iso-8859-7",
        EncodingFamily.SINGLE_BYTE,
        languages=("el",),
        iso_c1_free=True,
    ),
    EncodingInfo(
        "windows-1253", "cp1253", EncodingFamily.SINGLE_BYTE, languages=("el",)
    ),
    EncodingInfo(
        "ISO-8859-8",
        "iso-8859-8",
        EncodingFamily.SINGLE_BYTE,
        languages=("he",),
        iso_c1_free=True,
    ),
    EncodingInfo(
        "windows-1255", "cp1255", EncodingFamily.SINGLE_BYTE, languages=("he",)
    ),
    EncodingInfo(
        "ISO-8859-9",
        "iso-8859-9",
        EncodingFamily.SINGLE_BYTE,
        languages=("tr",),
        aliases=("latin5",),
        iso_c1_free=True,
    ),
    EncodingInfo(
        "windows-1254", "cp1254", EncodingFamily.SINGLE_BYTE, languages=("tr",)
    ),
)


def _normalize_name(name: str) -> str:
    """Fold case and drop punctuation so ``Shift_JIS`` matches ``shift-jis``."""
    return "".join(c for c in name.lower() if c.isalnum())


def _codec_key(name: str) -> str | None:
    """Return Python's canonical codec name for *name*, or None if unknown."""
    try:
        return _normalize_name(codecs.lookup(name).name)
    except LookupError:
        return None


def _build_lookup_tables(
    registry: tuple[EncodingInfo, ...],
) -> tuple[dict[str, EncodingInfo], dict[str, EncodingInfo]]:
    by_name: dict[str, EncodingInfo] = {}
    by_codec: dict[str, EncodingInfo] = {}
    for info in registry:
        for label in (info.name, *info.aliases):
            by_name.setdefault(_normalize_name(label), info)
        key = _codec_key(info.python_codec)
        if key is not None:
            by_codec.setdefault(key, info)
    return by_name, by_codec


_BY_NAME, _BY_CODEC = _build_lookup_tables(REGISTRY)

#: Index of each encoding in :data:`REGISTRY`, used as a tiebreaker.
PRIORITY: dict[str, int] = {info.name: i for i, info in enumerate(REGISTRY)}


def lookup_encoding(name: str) -> EncodingInfo:
    """Resolve *name* to a registry entry.

    Matching ignores case and punctuation, and also accepts any alias that
    Python's :mod:`codecs` resolves to the same codec (``sjis``, ``latin-1``,
    ``cp1251`` ...).

    :param name: An encoding name, alias, or Python codec name.
    :returns: The matching :class:`EncodingInfo`.
    :raises UnsupportedEncodingNameError: If no supported encoding matches.
    """
    info = _BY_NAME.get(_normalize_name(name))
    if info is not None:
        return info
    key = _codec_key(name)
    if key is not None and key in _BY_CODEC:
        return _BY_CODEC[key]
    raise UnsupportedEncodingNameError(name)


def get_candidates(
    family: EncodingFamily | None = None,
    registry: tuple[EncodingInfo, ...] = REGISTRY,
) -> tuple[EncodingInfo, ...]:
    """Return *registry* entries, optionally restricted to one family."""
    if family is None:
        return registry
    return tuple(info for info in registry if info.family is family)


def supported_encoding_names(
    registry: tuple[EncodingInfo, ...] = REGISTRY,
) -> tuple[str, ...]:
    """Return the canonical name of every *registry* entry, in priority order."""
    return tuple(info.name for info in registry)
