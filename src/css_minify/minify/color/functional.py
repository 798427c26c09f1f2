"""
functional.py
=============

Does: Decode CSS functional colour notation (rgb()/rgba(), legacy comma and
      modern space/slash syntax) into a ColorValue, format it as hex and
      re-run hex shortening.
Returns: parse_functional() -> ColorValue | None,
         decode_functional() -> canonical hex | None,
         scan_functional() -> (canonical hex, end offset) | None.
Used By: The structural minifier (inline, per recognized 'rgb(' run).

Decoding rules:
- integer channel   -> literal value, 0..255
- percentage        -> floor(percent * 255 / 100), exact rational arithmetic
- fractional alpha  -> round-half-up(fraction * 255), fraction in 0..1
- alpha resolving to 255 is opaque and dropped from the output
"""

from __future__ import annotations

import logging
import math
import re
from fractions import Fraction

from webcolors import rgb_to_hex

from css_minify.minify.color.constants import (
    FUNCTIONAL_CHARS,
    FUNCTIONAL_PREFIXES,
    OPAQUE,
    is_name_char,
)
from css_minify.minify.color.hex import canonicalize_hex
from css_minify.minify.types import ColorValue

__all__ = [
    "parse_functional",
    "decode_functional",
    "format_hex",
    "scan_functional",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[0-9]+")
_NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?|\.[0-9]+")


# ── Channel decoding ─────────────────────────────────────────────────────────
def _percent(token: str) -> int | None:
    number = token[:-1]
    if not _NUMBER_RE.fullmatch(number):
        return None
    value = math.floor(Fraction(number) * OPAQUE / 100)
    return value if 0 <= value <= OPAQUE else None


def _color_channel(token: str) -> int | None:
    if token.endswith("%"):
        return _percent(token)
    if not _INTEGER_RE.fullmatch(token):
        return None
    value = int(token)
    return value if value <= OPAQUE else None


def _alpha_channel(token: str) -> int | None:
    if token.endswith("%"):
        return _percent(token)
    if not _NUMBER_RE.fullmatch(token):
        return None
    fraction = Fraction(token)
    if fraction > 1:
        return None
    return math.floor(fraction * OPAQUE + Fraction(1, 2))


def _split_channels(args: str) -> list[str] | None:
    """Split an argument list into channel tokens, rejecting mixed delimiters."""
    body = args.strip(" ")
    if "," in body:
        # legacy: a, b, c[, alpha]
        if "/" in body:
            return None
        tokens = [t.strip(" ") for t in body.split(",")]
        if any(not t or " " in t for t in tokens):
            return None
        return tokens

    # modern: a b c[ / alpha]
    colors, slash, alpha = body.partition("/")
    tokens = colors.split()
    if len(tokens) != 3:
        return None
    if slash:
        alpha_tokens = alpha.split()
        if len(alpha_tokens) != 1:
            return None
        tokens.append(alpha_tokens[0])
    return tokens


# ── Public API ───────────────────────────────────────────────────────────────
def parse_functional(args: str) -> ColorValue | None:
    """
    Does: Decode the text between 'rgb(' / 'rgba(' and ')' into channels.
    Returns: ColorValue (alpha None when opaque) or None when undecodable.
    """
    if not args or any(ch not in FUNCTIONAL_CHARS for ch in args):
        return None
    tokens = _split_channels(args)
    if tokens is None or len(tokens) not in (3, 4):
        return None

    channels = [_color_channel(t) for t in tokens[:3]]
    if any(c is None for c in channels):
        return None
    r, g, b = channels

    alpha = None
    if len(tokens) == 4:
        alpha = _alpha_channel(tokens[3])
        if alpha is None:
            return None
        if alpha == OPAQUE:
            alpha = None
    return ColorValue(r, g, b, alpha)


def format_hex(color: ColorValue) -> str:
    """Does: Format channels as '#rrggbb' or '#rrggbbaa' (lowercase)."""
    literal = rgb_to_hex((color.r, color.g, color.b))
    if color.a is not None:
        literal += f"{color.a:02x}"
    return literal


def decode_functional(args: str) -> str | None:
    """
    Does: Decode functional notation arguments to the canonical hex literal.
    Returns: Shortest hex form, or None to leave the source untouched.
    """
    color = parse_functional(args)
    if color is None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("[RGB REJECT] %r", args)
        return None
    return canonicalize_hex(format_hex(color))


def scan_functional(text: str, pos: int) -> tuple[str, int] | None:
    """
    Does: Recognize 'rgb(' / 'rgba(' at text[pos] and decode up to ')'.
    Returns: (canonical hex, offset just past ')') or None.
    """
    if pos > 0 and is_name_char(text[pos - 1]):
        return None
    for prefix in FUNCTIONAL_PREFIXES:
        if text.startswith(prefix, pos):
            break
    else:
        return None

    start = pos + len(prefix)
    close = text.find(")", start)
    if close == -1:
        return None
    canonical = decode_functional(text[start:close])
    if canonical is None:
        return None
    return canonical, close + 1
