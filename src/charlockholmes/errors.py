"""Exception hierarchy for charlockholmes."""

from __future__ import annotations


class CharlockHolmesError(Exception):
    """Base class for every error raised by charlockholmes."""


class InvalidArgumentError(CharlockHolmesError, TypeError, ValueError):
    """A call was made with a missing, mistyped or out-of-range argument.

    Subclasses both :class:`TypeError` and :class:`ValueError` so callers
    that already guard against either keep working.
    """


class UnsupportedEncodingNameError(CharlockHolmesError, LookupError):
    """An encoding name does not match any supported encoding.

    Detection never lets this escape: an unknown hint is logged and the
    input is analysed without bias.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"unsupported encoding name: {name!r}")
        self.name = name
