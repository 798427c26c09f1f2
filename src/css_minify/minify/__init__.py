"""
minify.
======

Does: The text-transform core: normalizer, structural minifier and colour
      canonicalizers behind a single transform() entry point.
Returns: transform(source) -> TransformResult(text, warnings).
"""

from __future__ import annotations

from .orchestrator import transform
from .types import (
    ColorValue,
    MinifyWarning,
    NormalizedText,
    QuoteSpan,
    ScanState,
    TransformResult,
    WarningKind,
)

__all__ = [
    "transform",
    # types
    "ColorValue",
    "MinifyWarning",
    "NormalizedText",
    "QuoteSpan",
    "ScanState",
    "TransformResult",
    "WarningKind",
]
__docformat__ = "google"
