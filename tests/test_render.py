"""End-to-end display pipeline properties."""

from __future__ import annotations

import logging
import random
import time

import pytest

from polyblog.content import render
from polyblog.content.render import render_post_body, sanitize_for_display
from polyblog.core.models import ContentRecord, Locale

SAMPLES = [
    "<!DOCTYPE html><html><head><title>T</title></head><body><p>hi</p></body></html>",
    "<h1>Dup title</h1><h2>Sub</h2><p>text</p>",
    '<p style="color:#222" onclick="x()">styled</p>',
    "<p>a</p><script>alert(1)</script>",
    '<a href="https://x.com" target="_blank">link</a>',
    "<p>unclosed <b>bold",
    "<p>1 < 2 &amp; 3 &gt; 2</p>",
    "<div><span style='font-size:30px'>big</span></div>",
    "<ht<html>ml><h<h1>x</h1>1>y</h1>",
    "",
]


@pytest.mark.parametrize("html", SAMPLES)
def test_idempotent(html: str) -> None:
    once = sanitize_for_display(html)
    assert sanitize_for_display(once) == once


# Inputs whose first sanitized form still reparses differently
HOSTILE = [
    '<p style="c">style<x>="a"</p>',
    '<a href="http://x">a<table><a href="http://y">b',
    "<b><table><tr><td>x</b>y",
    "<h" * 20 + "<h1>" + "1>" * 20,
    "<scr<script>x</script>ipt>alert(1)</script><p>ok</p>",
    "<p title=\"a style='b'\">t</p>",
]


@pytest.mark.parametrize("html", HOSTILE)
def test_idempotent_on_markup_that_reparses(html: str) -> None:
    once = sanitize_for_display(html)
    assert sanitize_for_display(once) == once


_FRAGMENTS = [
    "<p>", "</p>", "<a href=\"http://x\">", "</a>", "<table>", "<tr>", "<td>",
    "<b>", "</b>", "<h1>", "</h1>", "<html>", "<head>", "<x>", "<script>",
    "style", "=\"a\"", " style=\"b\"", "<", ">", "&amp;", "text", "<li>", "<div>",
]


def test_idempotent_on_random_markup() -> None:
    rng = random.Random(20240501)
    for _ in range(300):
        html = "".join(rng.choice(_FRAGMENTS) for _ in range(rng.randint(1, 10)))
        once = sanitize_for_display(html)
        assert sanitize_for_display(once) == once, html


@pytest.mark.parametrize(
    "html",
    [
        "<p>a</p><script>document.cookie</script>",
        '<p onclick="document.cookie">a</p>',
        '<img src="x.png" onerror="document.cookie" onload="document.cookie">',
        '<svg onload="document.cookie"><p>a</p></svg>',
    ],
)
def test_script_exclusion(html: str) -> None:
    out = sanitize_for_display(html)
    assert "<script" not in out
    assert "document.cookie" not in out
    assert "onclick" not in out and "onerror" not in out and "onload" not in out


def test_style_exclusion() -> None:
    html = '<p style="color:red">a</p><div style=\'margin:0\'><span style="x">b</span></div>'
    assert "style=" not in sanitize_for_display(html)


def test_style_exclusion_survives_stripped_tags() -> None:
    out = sanitize_for_display('<p style="c">style<x>="a"</p>')
    assert "style=" not in out
    assert out == "<p></p>"


def test_single_heading_invariant() -> None:
    html = "<h1>One</h1><p>x</p><H1 class='a'>Two</H1><h1>Three"
    assert "<h1" not in sanitize_for_display(html).lower()


def test_wrapper_removal() -> None:
    out = sanitize_for_display(
        "<!DOCTYPE html><html><head><title>T</title></head><body><p>hi</p></body></html>"
    )
    assert "<p>hi</p>" in out
    for marker in ("<!DOCTYPE", "<html", "<head", "<body"):
        assert marker not in out
    assert out == "<p>hi</p>"


def test_allow_list_enforcement() -> None:
    out = sanitize_for_display('<iframe src="evil"></iframe><p>ok</p>')
    assert "<p>ok</p>" in out
    assert "<iframe" not in out


def test_clean_input_passes_through() -> None:
    html = "<h2>Title</h2><p>Body <strong>text</strong>.</p>"
    assert sanitize_for_display(html) == html


def test_link_attributes_preserved() -> None:
    out = sanitize_for_display('<a href="https://x.com" target="_blank">link</a>')
    assert 'href="https://x.com"' in out
    assert 'target="_blank"' in out


def test_none_and_non_string_input() -> None:
    assert sanitize_for_display(None) == ""  # type: ignore[arg-type]
    assert sanitize_for_display(123) == "123"  # type: ignore[arg-type]


def test_oversize_input_is_truncated(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setattr(render, "MAX_INPUT_BYTES", 64)
    with caplog.at_level(logging.WARNING, logger="polyblog.content.render"):
        out = sanitize_for_display("<p>" + "a" * 500 + "</p>")
    assert out.startswith("<p>")
    assert out.count("a") == 61
    assert "truncating" in caplog.text


def test_truncation_never_splits_a_character(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(render, "MAX_INPUT_BYTES", 51)
    out = sanitize_for_display("я" * 100)
    assert out == "я" * 25


def test_render_post_body_falls_back_to_default_locale() -> None:
    record = ContentRecord(content_ru="", content_en="<p>hello</p>")
    assert render_post_body(record, "ru") == "<p>hello</p>"


def test_render_post_body_uses_requested_locale(record: ContentRecord) -> None:
    assert render_post_body(record, Locale.UZ) == "<p>Salom <strong>dunyo</strong></p>"


def test_render_post_body_sanitizes_legacy_documents(record: ContentRecord) -> None:
    assert render_post_body(record, "en") == "<p>Hello <em>world</em></p>"


@pytest.mark.parametrize(
    "html",
    [
        "<h1>" * 50_000,
        "<head>" * 35_000,
        "<h" * 50_000 + "<h1>" + "1>" * 50_000,
        "<script>" * 25_000,
    ],
    ids=["unclosed-h1", "unclosed-head", "nested-h1-splice", "unclosed-script"],
)
def test_large_hostile_input_runs_in_linear_time(html: str) -> None:
    start = time.perf_counter()
    sanitize_for_display(html)
    assert time.perf_counter() - start < 5.0
