"""
structure.py
============

Does: Second pass over normalized CSS: strip separators around punctuation,
      drop the last semicolon of each block and splice canonical colours.
Returns: minify_structure(normalized) -> minified text.
Used By: transform().

A single ':' is ambiguous: in `div :hover` the space before it is part of a
selector, in `color : red` it is not. Without a table of property names the
scanner cannot tell, so it keeps the space and remembers where it lives (the
backreference). A later ';' or '}' proves the statement was a declaration and
the space is deleted; '{', '::' or another ':' proves nothing about it and the
space stays. Hex colours rewritten after a ':' are held the same way: a '{'
before the statement ends means the ':' was a pseudo-class, so the runs were
ID selectors and their original text is restored.
"""

from __future__ import annotations

import logging

from css_minify.minify.color import scan_functional, scan_hex_run
from css_minify.minify.types import NormalizedText

__all__ = ["minify_structure"]
__docformat__ = "google"

logger = logging.getLogger(__name__)


class _Output:
    """Output buffer with one pending space deletion and pending colour rewrites."""

    def __init__(self) -> None:
        self.chars: list[str] = []
        self.backreference: int | None = None
        # set after ':' until the statement ends; gates hex rewriting
        self.in_value = False
        # (offset, source text, canonical text) of hex rewrites in this statement
        self.rewrites: list[tuple[int, str, str]] = []

    def emit(self, text: str) -> None:
        self.chars.extend(text)

    def last_is(self, ch: str) -> bool:
        return bool(self.chars) and self.chars[-1] == ch

    def drop_last(self, ch: str) -> None:
        if self.last_is(ch):
            self.chars.pop()

    def mark_space(self) -> None:
        """Remember the trailing space as possibly spurious."""
        self.backreference = len(self.chars) - 1 if self.last_is(" ") else None

    def resolve_declaration(self) -> None:
        """The pending statement was property:value; delete its leading space."""
        j = self.backreference
        self.backreference = None
        if j is not None and self.chars[j] == " ":
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("[BACKREF] dropping space at %d", j)
            del self.chars[j]

    def discard(self) -> None:
        self.backreference = None

    def rewrite(self, source: str, canonical: str) -> None:
        self.rewrites.append((len(self.chars), source, canonical))
        self.emit(canonical)

    def commit_rewrites(self) -> None:
        self.rewrites.clear()

    def revert_rewrites(self) -> None:
        """The statement was a selector: put back every hex run it rewrote."""
        for offset, source, canonical in reversed(self.rewrites):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("[HEX REVERT] %r back to %r at %d", canonical, source, offset)
            self.chars[offset : offset + len(canonical)] = source
        self.rewrites.clear()

    def text(self) -> str:
        return "".join(self.chars)


def _skip_space(text: str, i: int) -> int:
    return i + 1 if i < len(text) and text[i] == " " else i


def minify_structure(normalized: NormalizedText) -> str:
    """
    Does: Apply punctuation rules and inline colour canonicalization.
    Returns: The minified CSS text; quote spans are copied untouched.
    """
    text = normalized.text
    out = _Output()
    n = len(text)
    i = 0

    while i < n:
        span = normalized.span_at(i)
        if span is not None:
            out.emit(text[span.start : span.end + 1])
            i = span.end + 1
            continue

        ch = text[i]

        if ch == "{":
            out.discard()
            out.revert_rewrites()
            out.in_value = False
            out.drop_last(" ")
            out.emit("{")
            i = _skip_space(text, i + 1)

        elif ch == "}":
            out.resolve_declaration()
            out.commit_rewrites()
            out.in_value = False
            out.drop_last(" ")
            out.drop_last(";")
            out.emit("}")
            i = _skip_space(text, i + 1)

        elif ch == ":" and text.startswith("::", i):
            out.discard()
            out.emit("::")
            i += 2

        elif ch == ":":
            out.mark_space()
            out.in_value = True
            out.emit(":")
            i = _skip_space(text, i + 1)

        elif ch == ",":
            out.drop_last(" ")
            out.emit(",")
            i = _skip_space(text, i + 1)

        elif ch == ";":
            out.resolve_declaration()
            out.commit_rewrites()
            out.in_value = False
            out.drop_last(" ")
            out.emit(";")
            i = _skip_space(text, i + 1)

        elif ch == "#" and out.in_value:
            found = scan_hex_run(text, i)
            if found is None:
                out.emit("#")
                i += 1
            else:
                literal, end = found
                out.rewrite(text[i:end], literal)
                i = end

        elif ch == "r":
            found = scan_functional(text, i)
            if found is None:
                out.emit("r")
                i += 1
            else:
                literal, i = found
                out.emit(literal)

        else:
            out.emit(ch)
            i += 1

    return out.text()
