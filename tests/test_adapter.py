# tests/test_adapter.py
"""Tests for the invocation adapter: path-or-literal resolution, quoting, warnings, strict mode."""

from __future__ import annotations

import importlib
import logging
from pathlib import Path

import pytest

from css_minify.adapter import (
    MinifyError,
    emit_warnings,
    minify,
    minify_literal,
    quote_literal,
    resolve_source,
)
from css_minify.minify.types import MinifyWarning, WarningKind
from css_minify.utils.load_config import Settings, clear_config_cache

LC = importlib.import_module("css_minify.utils.load_config")

TESTS_DIR = Path(__file__).resolve().parent


def test_resolve_source_reads_file_relative_to_base_dir():
    text = resolve_source("test.css", base_dir=TESTS_DIR)
    assert "#ffffff" in text


def test_resolve_source_defaults_to_configured_base_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CSS_MINIFY_CONFIG", raising=False)
    monkeypatch.setenv("CSS_MINIFY_BASE_DIR", str(TESTS_DIR))
    monkeypatch.setattr(LC, "_discover", lambda start=None: None)
    clear_config_cache()

    assert "#ffffff" in resolve_source("test.css")


def test_resolve_source_explicit_settings_win_over_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    text = resolve_source("test.css", settings=Settings(base_dir=TESTS_DIR))
    assert "#ffffff" in text
    assert resolve_source("test.css", settings=Settings()) == "test.css"


def test_resolve_source_falls_back_to_literal(tmp_path):
    assert resolve_source("a{b:c}", base_dir=tmp_path) == "a{b:c}"
    assert resolve_source("", base_dir=tmp_path) == ""
    # a directory is not a readable file
    assert resolve_source(".", base_dir=tmp_path) == "."
    assert resolve_source("a\0b", base_dir=tmp_path) == "a\0b"


def test_minify_finds_css_file():
    assert minify("./test.css", base_dir=TESTS_DIR, settings=Settings()) == "#{color:#fff}"


def test_minify_literal_flag_skips_file_lookup():
    out = minify("test.css", base_dir=TESTS_DIR, settings=Settings(), literal=True)
    assert out == "test.css"


def test_minify_uses_settings_base_dir():
    assert minify("test.css", settings=Settings(base_dir=TESTS_DIR)) == "#{color:#fff}"


def test_quote_literal_escapes_backslash_and_quote():
    assert quote_literal('a[b="c"]{content:"\\2014"}') == '"a[b=\\"c\\"]{content:\\"\\\\2014\\"}"'
    assert quote_literal("") == '""'


def test_minify_literal_matches_embedding_form(tmp_path):
    css = """
        input[type="radio"]:checked, .button:hover {
            color: #ffffff;
            margin: 10px 10px;
        }
    """
    assert minify_literal(css, base_dir=tmp_path, settings=Settings()) == (
        '"input[type=\\"radio\\"]:checked,.button:hover{color:#fff;margin:10px 10px}"'
    )


def test_warnings_are_logged_not_raised(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="css_minify"):
        out = minify("a{b:c} /* open", base_dir=tmp_path, settings=Settings())
    assert out == "a{b:c}"
    assert any("UnterminatedComment" in r.getMessage() for r in caplog.records)


def test_strict_mode_raises_with_warnings(tmp_path):
    with pytest.raises(MinifyError) as exc:
        minify("'open", base_dir=tmp_path, settings=Settings(strict=True))
    assert [w.kind for w in exc.value.warnings] == [WarningKind.UNTERMINATED_QUOTE]


def test_emit_warnings_counts(caplog):
    ws = [
        MinifyWarning(WarningKind.UNTERMINATED_QUOTE, "q", 0),
        MinifyWarning(WarningKind.UNTERMINATED_COMMENT, "c", 3),
    ]
    with caplog.at_level(logging.WARNING, logger="css_minify"):
        assert emit_warnings(ws, source_name="x.css") == 2
    assert "x.css: UnterminatedQuote: q" in caplog.text
