# css_minify/minify/normalize.py
# ──────────────────────────────────────────────────────────────
# First pass: whitespace, comments and quoted strings
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Collapse whitespace runs to single interior spaces, drop /* */
      comments and copy quoted strings verbatim while recording their
      offsets in the output.
Returns: normalize() -> NormalizedText(text, spans, warnings).
Used by: transform(), ahead of the structural minifier.
"""

from __future__ import annotations

import logging

from css_minify.minify.types import (
    MinifyWarning,
    NormalizedText,
    ScanState,
    WarningKind,
)

__all__ = ["WHITESPACE", "normalize"]

logger = logging.getLogger(__name__)

WHITESPACE: frozenset[str] = frozenset(" \t\r\n\f")
QUOTES: frozenset[str] = frozenset("\"'")
COMMENT_OPEN = "/*"
COMMENT_CLOSE = "*/"


def normalize(source: str) -> NormalizedText:
    """
    Does: Run the left-to-right normalization scan over raw CSS.
    Returns: NormalizedText with no leading, trailing or repeated whitespace
             outside quote spans, and one warning per unterminated construct.
    """
    out: list[str] = []
    spans: dict[int, int] = {}
    warnings: list[MinifyWarning] = []
    state = ScanState.BEFORE
    n = len(source)
    i = 0

    while i < n:
        ch = source[i]

        if ch in WHITESPACE:
            j = i + 1
            while j < n and source[j] in WHITESPACE:
                j += 1
            # a removed comment can leave "a " + " b"
            if out and out[-1] == " ":
                out.pop()
            if state is ScanState.DURING and j < n:
                out.append(" ")
            i = j
            continue

        if source.startswith(COMMENT_OPEN, i):
            close = source.find(COMMENT_CLOSE, i + len(COMMENT_OPEN))
            if close == -1:
                warnings.append(
                    MinifyWarning(
                        WarningKind.UNTERMINATED_COMMENT,
                        f"comment opened at offset {i} is never closed; "
                        "the rest of the input was dropped",
                        i,
                    )
                )
                break
            i = close + len(COMMENT_CLOSE)
            continue

        if ch in QUOTES:
            close = source.find(ch, i + 1)
            if close == -1:
                warnings.append(
                    MinifyWarning(
                        WarningKind.UNTERMINATED_QUOTE,
                        f"{ch} quote opened at offset {i} is never closed",
                        i,
                    )
                )
                close = n - 1
            start = len(out)
            out.extend(source[i : close + 1])
            spans[start] = len(out) - 1
            state = ScanState.DURING
            i = close + 1
            continue

        out.append(ch)
        state = ScanState.DURING
        i += 1

    # a comment running to the end can strand the separator before it
    if out and out[-1] == " " and (len(out) - 1) not in spans.values():
        out.pop()

    if warnings and logger.isEnabledFor(logging.DEBUG):
        logger.debug("[NORMALIZE] %d warning(s): %s", len(warnings), warnings)
    return NormalizedText("".join(out), spans, warnings)
