"""
hex.py
======

Does: Shorten hex colour literals (#RRGGBB -> #RGB, #RRGGBBAA -> #RGBA) when
      every channel is a doubled digit, and locate plausible hex runs in text.
Returns: canonicalize_hex() -> lowercase canonical literal or None,
         scan_hex_run() -> (canonical, end offset) or None.
Used By: The structural minifier and the functional colour decoder.
"""

from __future__ import annotations

import logging

from css_minify.minify.color.constants import HEX_DIGITS, HEX_LENGTHS, is_name_char

__all__ = ["canonicalize_hex", "scan_hex_run"]
__docformat__ = "google"

logger = logging.getLogger(__name__)


def canonicalize_hex(literal: str) -> str | None:
    """
    Does: Return the shortest lowercase form of a '#'-prefixed hex colour.
    Returns: None if the literal is not 3, 4, 6 or 8 hex digits.

    An 8-digit literal is shortened only when all four channels collapse;
    it is never partially shortened.
    """
    if not literal.startswith("#"):
        return None
    digits = literal[1:]
    if len(digits) not in HEX_LENGTHS or any(ch not in HEX_DIGITS for ch in digits):
        return None
    digits = digits.lower()
    if len(digits) in (3, 4):
        return "#" + digits

    pairs = [digits[i : i + 2] for i in range(0, len(digits), 2)]
    if all(p[0] == p[1] for p in pairs):
        return "#" + "".join(p[0] for p in pairs)
    return "#" + digits


def scan_hex_run(text: str, pos: int) -> tuple[str, int] | None:
    """
    Does: Read '#' + hex digits starting at text[pos] and canonicalize them.
    Returns: (canonical literal, offset just past the digits) or None when the
             run has the wrong length or runs into an identifier character.
    """
    if pos >= len(text) or text[pos] != "#":
        return None
    end = pos + 1
    while end < len(text) and text[end] in HEX_DIGITS:
        end += 1
    if end < len(text) and is_name_char(text[end]):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("[HEX REJECT] %r continues as an identifier", text[pos : end + 1])
        return None
    canonical = canonicalize_hex(text[pos:end])
    if canonical is None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("[HEX REJECT] %r has %d digits", text[pos:end], end - pos - 1)
        return None
    return canonical, end
