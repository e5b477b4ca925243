# === FILE: page_scout/parser/html_parser.py ===
"""HTML parsing and tree-walking helpers for PageScout.

The markup parser itself is BeautifulSoup with the stdlib ``html.parser``
backend; this module only wraps it so that the rest of the project sees a
single failure type (:class:`~page_scout.errors.ParseError`) and a couple of
traversal primitives:

* :func:`walk`: pre-order iteration over a subtree with an explicit stack,
  optionally pruning whole subtrees by tag name.
* :func:`extract_text`: visible text of a subtree with whitespace collapsed.

Text nodes are :class:`~bs4.element.NavigableString` instances, except for
comments, doctypes, declarations and processing instructions, which carry no
visible text.
"""
from __future__ import annotations

from collections.abc import Collection, Iterator, Sequence
from typing import Union

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import (
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    PageElement,
    ProcessingInstruction,
    Tag,
)

from page_scout.errors import ParseError
from page_scout.utils import collapse_whitespace

__all__: Sequence[str] = ("DEFAULT_SKIP_TAGS", "parse_html", "is_text", "walk", "extract_text")

DEFAULT_SKIP_TAGS: frozenset[str] = frozenset({"script", "style"})

_NON_TEXT = (Comment, Declaration, Doctype, ProcessingInstruction)


def parse_html(content: Union[bytes, str], url: str = "") -> BeautifulSoup:
    """Parse a fetched byte stream (or already decoded markup).

    Raises :class:`ParseError` if the payload is not markup-like or the parser
    rejects it.
    """
    if not isinstance(content, (bytes, str)):
        raise ParseError(url, f"expected bytes or str, got {type(content).__name__}")
    try:
        return BeautifulSoup(content, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError(url, str(exc)) from exc


def is_text(node: PageElement) -> bool:
    """True for visible text nodes."""
    return isinstance(node, NavigableString) and not isinstance(node, _NON_TEXT)


def walk(root: PageElement, skip_tags: Collection[str] = ()) -> Iterator[PageElement]:
    """Yield *root* and its descendants in document (pre-)order.

    Elements whose tag is in *skip_tags* are neither yielded nor descended
    into. The traversal keeps its own stack, so nesting depth is bounded by
    memory rather than by the interpreter's recursion limit.
    """
    stack: list[PageElement] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Tag):
            if node.name in skip_tags:
                continue
            yield node
            stack.extend(reversed(node.contents))
        else:
            yield node


def extract_text(node: PageElement, skip_tags: Collection[str] = DEFAULT_SKIP_TAGS) -> str:
    """Concatenate the visible text under *node*.

    A bare text node is returned verbatim. Otherwise every text node of the
    subtree contributes its content separated by a space, and the result has
    whitespace runs collapsed and is trimmed.
    """
    if is_text(node):
        return str(node)
    pieces = [str(child) for child in walk(node, skip_tags) if is_text(child)]
    return collapse_whitespace(" ".join(pieces))
