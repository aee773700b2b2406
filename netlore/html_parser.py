"""Parser that builds a document tree from HTML tokens."""

from __future__ import annotations

from enum import Enum, auto
from typing import Iterable

from netlore.dom import Dom
from netlore.html_tokens import HtmlToken, HtmlTokenKind
from netlore.node import DomNode

CONTENT_TAG = "__tag"
STYLE_TAG = "style"

_ATTR_KINDS = frozenset(
    {HtmlTokenKind.ATTR_NAME, HtmlTokenKind.ATTR_VALUE, HtmlTokenKind.ATTR_EQ}
)


class HtmlParseError(ValueError):
    """Raised when the token stream holds a tag the parser cannot accept."""


class _Expect(Enum):
    NAME = auto()
    EQ = auto()
    VALUE = auto()


class _Parser:
    """Walks the token list and grows the document tree."""

    def __init__(self, tokens: Iterable[HtmlToken], dom: Dom) -> None:
        self.tokens = list(tokens)
        self.pos = 0
        self.dom = dom
        # Open elements, innermost last; the root is never removed.
        self.stack: list[DomNode] = [dom.root_node]

    def _next(self, after: str) -> HtmlToken:
        self.pos += 1
        if self.pos >= len(self.tokens):
            raise HtmlParseError(f"expected token after {after}")
        return self.tokens[self.pos]

    def run(self) -> None:
        while self.pos < len(self.tokens):
            current = self.tokens[self.pos]
            if current.kind is HtmlTokenKind.TAG_OPEN:
                self._tag()
            elif current.kind is HtmlTokenKind.CONTENT and current.value:
                self.stack[-1].add_child(DomNode(CONTENT_TAG, current.value))
            self.pos += 1

    def _tag(self) -> None:
        current = self._next("TAG_OPEN")
        if current.kind not in (HtmlTokenKind.TAG_NAME, HtmlTokenKind.TAG_DIV):
            raise HtmlParseError("expected TAG_NAME or TAG_DIV after TAG_OPEN")

        closing = current.kind is HtmlTokenKind.TAG_DIV
        if closing:
            current = self._next("TAG_DIV")
            if current.kind is not HtmlTokenKind.TAG_NAME:
                raise HtmlParseError("expected TAG_NAME after TAG_DIV")

        tag_name = current.value
        current = self._next("TAG_NAME")

        if current.kind is HtmlTokenKind.TAG_END:
            if closing:
                self._close(tag_name)
            else:
                self._open(tag_name)
        elif current.kind in (HtmlTokenKind.ATTR_NAME, HtmlTokenKind.ATTR_VALUE) and not closing:
            self._attributes(self._open(tag_name))
        else:
            raise HtmlParseError(
                "expected token ATTR_NAME, ATTR_VALUE or TAG_END after TAG_NAME"
            )

    def _open(self, tag_name: str) -> DomNode:
        node = self.stack[-1].add_child(DomNode(tag_name))
        self.stack.append(node)
        return node

    def _close(self, tag_name: str) -> None:
        # A closing tag that matches nothing open (or only the root) is ignored.
        for index in range(len(self.stack) - 1, 0, -1):
            if self.stack[index].tag == tag_name:
                del self.stack[index]
                return

    def _attributes(self, node: DomNode) -> None:
        """Read attribute tokens; stops on the first token of another kind."""
        expect = _Expect.NAME
        while self.pos < len(self.tokens):
            current = self.tokens[self.pos]
            if current.kind not in _ATTR_KINDS:
                break
            if current.kind is HtmlTokenKind.ATTR_NAME and expect in (_Expect.NAME, _Expect.EQ):
                if current.value:
                    node.add_attribute(current.value, "")
                    expect = _Expect.EQ
            elif current.kind is HtmlTokenKind.ATTR_EQ and expect is _Expect.EQ:
                expect = _Expect.VALUE
            elif current.kind is HtmlTokenKind.ATTR_VALUE and expect is _Expect.VALUE:
                node.attrs[-1].value = current.value
                expect = _Expect.NAME
            self.pos += 1


def _style_nodes(root: DomNode) -> list[DomNode]:
    """Return the text nodes that hold the content of ``<style>`` elements."""
    return [
        node.children[0]
        for node in root.descendants()
        if node.tag == STYLE_TAG and node.children and node.children[0].tag == CONTENT_TAG
    ]


def parse_html(tokens: Iterable[HtmlToken], dom: Dom) -> Dom:
    """Build the tree of ``dom`` from ``tokens`` and return ``dom``.

    Nodes are added under ``dom.root_node``. Afterwards ``dom.style_nodes``
    lists the text of every ``<style>`` element in document order; this is
    done even when parsing stops with :class:`HtmlParseError`.
    """
    try:
        _Parser(tokens, dom).run()
    finally:
        dom.style_nodes = _style_nodes(dom.root_node)
    return dom