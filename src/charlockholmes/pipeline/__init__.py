"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses
from dataclasses import field

from charlockholmes.enums import MatchType

#: Confidence for deterministic (non-BOM) detection stages.
#: Used by the escape and utf1632 stages.
DETERMINISTIC_CONFIDENCE: int = 95


@dataclasses.dataclass(frozen=True, slots=True)
class EncodingMatch:
    """A single encoding detection result.

    ``name`` is the canonical encoding name, or ``None`` for binary content.
    ``confidence`` is an integer between 0 and 100 and ``language`` an
    optional ISO 639-1 code.
    """

    name: str | None
    confidence: int
    language: str | None = None
    type: MatchType = MatchType.TEXT

    def to_dict(self) -> dict[str, str | int | None]:
        """Convert this match to a plain dict.

        :returns: A dict with ``'type'``, ``'encoding'``, ``'confidence'`` and
            ``'language'`` keys.
        """
        return {
            "type": self.type.value,
            "encoding": self.name,
            "confidence": self.confidence,
            "language": self.language,
        }


@dataclasses.dataclass(slots=True)
class PipelineContext:
    """Per-run mutable state for a single pipeline invocation.

    Created once at the start of ``run_pipeline()`` and threaded through
    the stages so that each codec decodes the input at most once.  Each
    concurrent ``detect()`` call gets its own context.
    """

    decoded: dict[tuple[str, str], str] = field(default_factory=dict)

    def decode(self, data: bytes, codec: str, errors: str = "strict") -> str:
        """Decode *data* with *codec*, caching the text for later stages.

        :raises UnicodeDecodeError: If ``errors="strict"`` and *data* is
            invalid for *codec*.
        """
        key = (codec, errors)
        text = self.decoded.get(key)
        if text is None:
            text = data.decode(codec, errors=errors)
            self.decoded[key] = text
        return text
