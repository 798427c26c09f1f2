# tests/test_minify_transform.py
"""
transform() tests
=================

Does: Check transform() end to end: regression cases, properties such as
      idempotence and quote integrity, and graceful degradation on
      malformed input.
"""

from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor

import pytest

from css_minify import TransformResult, WarningKind, transform

SAMPLES = [
    "",
    "#{color:#fff}",
    "# {color:#fff}",
    "#{margin:1px 1px}",
    "#{margin:1px;}",
    "#{margin:1px /*1px*/}",
    "div :hover ::after{}",
    "div { span {margin:1px}}",
    """
    input[type="radio"]:checked, .button:hover {
        color: #ffffff;
        margin: 10px 10px;
    }
    """,
    "a { color : rgba(100%, 100%, 100%, 1) ; background: rgb(0 0 0 / 0.5) }",
    "@media (max-width: 600px) { .x , .y { padding : 0 ; } }",
    "a::before{content:'  {;}  '}",
    "a:hover #AABBCC , b:focus #eeeeee { color : #EEEEEE }",
]


# ──────────────────────────────────────────────────────────────────────────────
# Regression cases
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "css, expected",
    [
        ("", ""),
        ("#{color:#fff}", "#{color:#fff}"),
        ("# {color:#fff}", "#{color:#fff}"),
        ("#{margin:1px 1px}", "#{margin:1px 1px}"),
        ("#{margin:1px;}", "#{margin:1px}"),
        ("#{margin:1px /*1px*/}", "#{margin:1px}"),
        ("div :hover ::after{}", "div :hover ::after{}"),
        ("div { span {margin:1px}}", "div{span{margin:1px}}"),
        ("#{color:#aabbcc}", "#{color:#abc}"),
        ("#{color:#DDEEFF}", "#{color:#def}"),
        ("#{color:#aabbccdd}", "#{color:#abcd}"),
        ("#{color:#aabbccde}", "#{color:#aabbccde}"),
        ("#{color:rgb(255,255,254)}", "#{color:#fffffe}"),
        ("#{color:rgb(0, 0, 0)}", "#{color:#000}"),
        ("#{color:rgb(0%, 0%, 0%)}", "#{color:#000}"),
        ("#{color:rgb(1%, 2%, 3%)}", "#{color:#020507}"),
        ("#{color:rgb(50%, 50%, 50%)}", "#{color:#7f7f7f}"),
        ("#{color:rgb(100%, 100%, 100%)}", "#{color:#fff}"),
        ("#{color:rgba(0%,0%,0%,0)}", "#{color:#0000}"),
        ("#{color:rgba(100%,100%,100%,1)}", "#{color:#fff}"),
        ("#{color:rgb(0 100% 255)}", "#{color:#0ff}"),
        ("#{color:rgb(0 0 0 / 0.5)}", "#{color:#00000080}"),
    ],
)
def test_transform_cases(css, expected):
    assert transform(css).text == expected


def test_readme_example():
    css = """
        input[type="radio"]:checked, .button:hover {
            color: #ffffff;
            margin: 10px 10px;
        }
    """
    assert (
        transform(css).text
        == 'input[type="radio"]:checked,.button:hover{color:#fff;margin:10px 10px}'
    )


def test_result_unpacks_as_text_and_warnings():
    result = transform("a{b:c}")
    assert isinstance(result, TransformResult)
    text, warnings = result
    assert text == "a{b:c}"
    assert warnings == []


def test_bytes_input_is_decoded():
    assert transform("a { content: 'é' }".encode("utf-8")).text == "a{content:'é'}"


def test_malformed_bytes_are_replaced_not_raised():
    text, warnings = transform(b"a{b:c}\xff")
    assert text == "a{b:c}\ufffd"
    assert warnings == []


# ──────────────────────────────────────────────────────────────────────────────
# Properties
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("css", SAMPLES)
def test_idempotence(css):
    once = transform(css)
    assert transform(once.text) == once


@pytest.mark.parametrize("css", SAMPLES)
def test_quote_integrity(css):
    out = transform(css).text
    for quoted in re.findall(r"\"[^\"]*\"|'[^']*'", css):
        assert quoted in out


@pytest.mark.parametrize("css", SAMPLES)
def test_whitespace_collapse(css):
    out = transform(css).text
    unquoted = re.sub(r"\"[^\"]*\"|'[^']*'", "", out)
    assert "  " not in unquoted
    assert not re.search(r"[\t\r\n]", unquoted)
    assert out == out.strip()
    assert "{ " not in unquoted and " }" not in unquoted


def test_independent_calls_can_run_concurrently():
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda c: transform(c).text, SAMPLES * 5))
    assert results == [transform(c).text for c in SAMPLES * 5]


# ──────────────────────────────────────────────────────────────────────────────
# Graceful degradation
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "css, expected, kind",
    [
        ('"', '"', WarningKind.UNTERMINATED_QUOTE),
        ("'", "'", WarningKind.UNTERMINATED_QUOTE),
        ("/*", "", WarningKind.UNTERMINATED_COMMENT),
        ("a{b:c} /* x", "a{b:c}", WarningKind.UNTERMINATED_COMMENT),
        ("a{content:'x}", "a{content:'x}", WarningKind.UNTERMINATED_QUOTE),
    ],
)
def test_unterminated_constructs(css, expected, kind):
    text, warnings = transform(css)
    assert text == expected
    assert [w.kind for w in warnings] == [kind]
    assert warnings[0].message


@pytest.mark.parametrize(
    "css",
    ["#", "r", "rgb(", "rgba(1,2", ":", "::", "}", "{", ";", ",", "# ", "a :", "#abc", "/", "*/"],
)
def test_fragments_never_raise(css):
    text, warnings = transform(css)
    assert isinstance(text, str)
    assert warnings == []
