# File: tests/test_html_parser.py
import pytest
from bs4 import ParserRejectedMarkup

import page_scout.parser.html_parser as html_parser
from page_scout.errors import ParseError
from page_scout.parser.html_parser import extract_text, is_text, parse_html, walk


def test_skip_subtree_text_extraction():
    doc = parse_html("<div>Hello<script>ignored()</script> World</div>")

    assert extract_text(doc.div, {"script"}) == "Hello World"


def test_whitespace_is_collapsed_and_trimmed():
    doc = parse_html("<p>\n   Lots   of\t\tspace <b>here</b>\n</p>")

    assert extract_text(doc.p) == "Lots of space here"


def test_children_are_separated_by_space():
    doc = parse_html("<p><b>one</b><i>two</i></p>")

    assert extract_text(doc.p) == "one two"


def test_default_skip_set_covers_script_and_style():
    doc = parse_html(
        "<html><head><style>body {color: red}</style></head>"
        "<body><p>Visible</p><script>var x = 1;</script></body></html>"
    )

    assert extract_text(doc) == "Visible"


def test_skipped_root_yields_nothing():
    doc = parse_html("<script>alert(1)</script>")

    assert extract_text(doc.script, {"script"}) == ""


def test_text_node_is_returned_verbatim():
    doc = parse_html("<p>  raw  text </p>")

    assert extract_text(doc.p.contents[0]) == "  raw  text "


def test_comments_and_doctype_are_not_text():
    doc = parse_html("<!DOCTYPE html><html><body><!-- hidden -->shown</body></html>")

    assert extract_text(doc) == "shown"
    assert not any(is_text(node) and "hidden" in node for node in walk(doc))


def test_walk_is_preorder_and_prunes():
    doc = parse_html("<div><p>a</p><nav><p>b</p></nav><p>c</p></div>")

    names = [node.name for node in walk(doc.div, {"nav"}) if getattr(node, "name", None)]
    assert names == ["div", "p", "p"]
    texts = [str(node) for node in walk(doc.div) if is_text(node)]
    assert texts == ["a", "b", "c"]


def test_deeply_nested_document():
    depth = 2000
    doc = parse_html("<div>" * depth + "deep" + "</div>" * depth)

    assert extract_text(doc) == "deep"


def test_parse_html_accepts_bytes():
    doc = parse_html("<p>café</p>".encode("utf-8"))

    assert extract_text(doc) == "café"


def test_parse_html_rejects_non_markup():
    with pytest.raises(ParseError) as exc_info:
        parse_html(None, "https://x.test/")  # type: ignore[arg-type]
    assert exc_info.value.url == "https://x.test/"


def test_parser_rejection_becomes_parse_error(monkeypatch):
    def reject(*_args, **_kwargs):
        raise ParserRejectedMarkup("broken stream")

    monkeypatch.setattr(html_parser, "BeautifulSoup", reject)

    with pytest.raises(ParseError):
        parse_html(b"<html>", "https://x.test/")
