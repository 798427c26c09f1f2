# orchestrator.py
"""
orchestrator.py
===============

Does: Run the minification pipeline: normalize -> structural pass (with
      inline colour canonicalization).
Returns:
  - transform(source) -> TransformResult(text, warnings)
Used by: The invocation adapter, the CLI and library callers.

Each call works on its own local buffers, so independent calls may run on
separate threads.
"""

from __future__ import annotations

import logging

from css_minify.minify.normalize import normalize
from css_minify.minify.structure import minify_structure
from css_minify.minify.types import TransformResult

__all__ = ["transform"]

logger = logging.getLogger(__name__)


def transform(source: str | bytes) -> TransformResult:
    """
    Does: Minify CSS text, collecting non-fatal warnings.
    Returns: TransformResult(text, warnings); never raises. Bytes that are not
             valid UTF-8 decode to U+FFFD.
    """
    if isinstance(source, (bytes, bytearray)):
        source = bytes(source).decode("utf-8", errors="replace")
    normalized = normalize(source)
    text = minify_structure(normalized)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "[TRANSFORM] %d -> %d chars, %d warning(s)",
            len(source),
            len(text),
            len(normalized.warnings),
        )
    return TransformResult(text, list(normalized.warnings))
