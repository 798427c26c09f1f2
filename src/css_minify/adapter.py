"""
adapter.py
==========

Does: Bridge callers to the transform core: decide whether a value names a
      CSS file or is CSS itself, emit warnings without failing, and quote
      the result for embedding as a string literal.
Returns:
  - resolve_source(value) -> CSS text
  - minify(value) -> minified CSS
  - minify_literal(value) -> minified CSS as a double-quoted literal
Used by: The CLI and build scripts embedding CSS into generated code.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from css_minify.minify import MinifyWarning, transform
from css_minify.utils.load_config import Settings, load_config
from css_minify.utils.log import debug

__all__ = [
    "MinifyError",
    "resolve_source",
    "quote_literal",
    "emit_warnings",
    "minify",
    "minify_literal",
]

logger = logging.getLogger("css_minify")


class MinifyError(RuntimeError):
    """Raised in strict mode when the transform produced warnings."""

    def __init__(self, message: str, warnings: list[MinifyWarning]):
        super().__init__(message)
        self.warnings = warnings


def _read_path(
    value: str, base_dir: str | os.PathLike[str] | None, encoding: str
) -> tuple[str, Path] | None:
    if not value:
        return None
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    path = base / value
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, ValueError):
        # not a readable path (or not text): the value is literal CSS
        return None
    debug(f"read {len(text)} chars from {path}", topic="adapter")
    return text, path


def resolve_source(
    value: str,
    *,
    base_dir: str | os.PathLike[str] | None = None,
    encoding: str | None = None,
    settings: Settings | None = None,
) -> str:
    """
    Does: Read value as a path under base_dir (default: the configured
          base_dir, else cwd); fall back to the value itself when it cannot
          be read as a file.
    Returns: CSS source text.
    """
    if base_dir is None or encoding is None:
        if settings is None:
            settings = load_config()
        if base_dir is None:
            base_dir = settings.base_dir
        if encoding is None:
            encoding = settings.encoding
    found = _read_path(value, base_dir, encoding)
    return value if found is None else found[0]


def quote_literal(text: str) -> str:
    """Does: Escape backslashes and double quotes, then wrap in double quotes."""
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def emit_warnings(warnings: Iterable[MinifyWarning], *, source_name: str = "<css>") -> int:
    """Does: Log each warning on the css_minify logger. Returns the count."""
    count = 0
    for w in warnings:
        logger.warning("%s: %s", source_name, w)
        count += 1
    return count


def _literal_name(value: str) -> str:
    first = value.strip().splitlines()[0] if value.strip() else ""
    return "<literal>" if len(first) > 40 or not first else f"<literal {first!r}>"


def minify(
    value: str,
    *,
    base_dir: str | os.PathLike[str] | None = None,
    settings: Settings | None = None,
    literal: bool = False,
) -> str:
    """
    Does: Resolve value (path or literal), run transform and emit warnings.
    Returns: Minified CSS text.
    Raises: MinifyError if settings.strict and any warning was produced.
    """
    if settings is None:
        settings = load_config()
    if base_dir is None:
        base_dir = settings.base_dir

    found = None if literal else _read_path(value, base_dir, settings.encoding)
    if found is None:
        source, name = value, _literal_name(value)
    else:
        source, name = found[0], str(found[1])
    result = transform(source)
    count = emit_warnings(result.warnings, source_name=name)
    if count and settings.strict:
        raise MinifyError(f"{name}: {count} warning(s) in strict mode", result.warnings)
    return result.text


def minify_literal(
    value: str,
    *,
    base_dir: str | os.PathLike[str] | None = None,
    settings: Settings | None = None,
    literal: bool = False,
) -> str:
    """Does: minify() and return the result as a quoted string literal."""
    return quote_literal(minify(value, base_dir=base_dir, settings=settings, literal=literal))
