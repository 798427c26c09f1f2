# css_minify/minify/types.py
"""
types.py.

Does: Define the small value types shared by the normalizer, the structural
      minifier and the colour canonicalizers.
Returns: Plain enums, NamedTuples and frozen dataclasses; no behavior beyond
         formatting helpers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

__all__ = [
    "WarningKind",
    "MinifyWarning",
    "ScanState",
    "QuoteSpan",
    "ColorValue",
    "NormalizedText",
    "TransformResult",
]


class WarningKind(str, Enum):
    UNTERMINATED_COMMENT = "UnterminatedComment"
    UNTERMINATED_QUOTE = "UnterminatedQuote"


@dataclass(frozen=True)
class MinifyWarning:
    """A non-fatal diagnostic collected while scanning."""

    kind: WarningKind
    message: str
    offset: int = 0

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class ScanState(Enum):
    # nothing emitted yet since the last structural boundary
    BEFORE = "before"
    DURING = "during"


class QuoteSpan(NamedTuple):
    """Inclusive offsets of a verbatim region in the normalized buffer."""

    start: int
    end: int


class ColorValue(NamedTuple):
    r: int
    g: int
    b: int
    a: int | None = None

    def channels(self) -> tuple[int, ...]:
        if self.a is None:
            return (self.r, self.g, self.b)
        return (self.r, self.g, self.b, self.a)


@dataclass
class NormalizedText:
    """Output of the normalizer: collapsed text plus its verbatim spans."""

    text: str
    spans: dict[int, int] = field(default_factory=dict)
    warnings: list[MinifyWarning] = field(default_factory=list)

    def span_at(self, offset: int) -> QuoteSpan | None:
        end = self.spans.get(offset)
        return None if end is None else QuoteSpan(offset, end)


class TransformResult(NamedTuple):
    text: str
    warnings: list[MinifyWarning]


__docformat__ = "google"
