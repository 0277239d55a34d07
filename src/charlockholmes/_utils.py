"""Internal shared utilities for charlockholmes."""

from __future__ import annotations

from charlockholmes.errors import InvalidArgumentError

#: Default maximum number of bytes to examine during detection.
DEFAULT_MAX_BYTES: int = 200_000

#: Default minimum confidence a candidate needs to be reported.
MINIMUM_THRESHOLD: int = 10

#: Inputs shorter than this skip the statistical stages.
MIN_ANALYSIS_BYTES: int = 4

#: Confidence added to the candidate named by a caller's hint.
HINT_BONUS: int = 10


def _coerce_bytes(data: object) -> bytes:
    """Return *data* as :class:`bytes`, raising for non bytes-like input."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    msg = f"expected a bytes-like object, not {type(data).__name__}"
    raise InvalidArgumentError(msg)


def _validate_hint(hint: object) -> None:
    """Raise InvalidArgumentError if *hint* is neither ``None`` nor a string."""
    if hint is not None and not isinstance(hint, str):
        msg = f"hint must be a string or None, not {type(hint).__name__}"
        raise InvalidArgumentError(msg)


def _validate_confidence(value: object, name: str) -> None:
    """Raise InvalidArgumentError if *value* is not an int in ``[0, 100]``."""
    if (
        isinstance(value, bool)
        or not isinstance(value, int)
        or not 0 <= value <= 100
    ):
        msg = f"{name} must be an integer between 0 and 100"
        raise InvalidArgumentError(msg)


def _validate_positive_int(value: object, name: str) -> None:
    """Raise InvalidArgumentError if *value* is not a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"{name} must be a positive integer"
        raise InvalidArgumentError(msg)
