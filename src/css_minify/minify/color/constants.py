"""
constants.py.

Does: Character classes shared by the hex and functional colour scanners.
"""

from __future__ import annotations

HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")

# digit counts accepted after '#'
HEX_LENGTHS: frozenset[int] = frozenset({3, 4, 6, 8})

# anything else inside rgb()/rgba() means calc(), var(), relative colours...
FUNCTIONAL_CHARS: frozenset[str] = frozenset("0123456789 ,%./")

FUNCTIONAL_PREFIXES: tuple[str, ...] = ("rgba(", "rgb(")

OPAQUE = 255


def is_name_char(ch: str) -> bool:
    """True for characters that may continue a CSS identifier."""
    return ch.isalnum() or ch in "-_" or ord(ch) >= 0x80


__all__ = [
    "HEX_DIGITS",
    "HEX_LENGTHS",
    "FUNCTIONAL_CHARS",
    "FUNCTIONAL_PREFIXES",
    "OPAQUE",
    "is_name_char",
]
