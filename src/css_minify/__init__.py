"""
css_minify
==========

Does: Root package for the CSS minifier: the transform core plus the
      adapter, settings and CLI around it.
Returns: transform(), minify(), minify_literal() and the core types.
Used by: Build scripts and the `css-minify` command.
"""

from css_minify.adapter import MinifyError, minify, minify_literal
from css_minify.minify import MinifyWarning, TransformResult, WarningKind, transform

__all__: list[str] = [
    "transform",
    "TransformResult",
    "MinifyWarning",
    "WarningKind",
    "minify",
    "minify_literal",
    "MinifyError",
]
__version__ = "0.1.0"
__docformat__ = "google"
