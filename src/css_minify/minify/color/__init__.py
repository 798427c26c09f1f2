"""
color.
=====

Does: Canonicalize colour literals to their shortest equivalent text:
      hex shortening and rgb()/rgba() decoding.
Used By: The structural minifier.
Returns: Pure functions; no state is kept between calls.
"""

from .functional import decode_functional, format_hex, parse_functional, scan_functional
from .hex import canonicalize_hex, scan_hex_run

__all__ = [
    # hex
    "canonicalize_hex",
    "scan_hex_run",
    # functional
    "parse_functional",
    "decode_functional",
    "format_hex",
    "scan_functional",
]

__docformat__ = "google"
