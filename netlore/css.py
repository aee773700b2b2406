"""CSS tokens and the CSS tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from netlore.dom import Dom


class CssTokenKind(Enum):
    """Kinds of CSS tokens."""

    HASH = auto()
    COLON = auto()
    SEMICOLON = auto()
    DOT = auto()
    OPEN_BRACE = auto()
    CLOSE_BRACE = auto()
    AT_SIGN = auto()
    IDENTIFIER = auto()


@dataclass
class CssToken:
    """A single CSS token: its kind and its text."""

    kind: CssTokenKind
    value: str


_SHORT_TOKENS = {
    "#": CssTokenKind.HASH,
    ":": CssTokenKind.COLON,
    ";": CssTokenKind.SEMICOLON,
    ".": CssTokenKind.DOT,
    "{": CssTokenKind.OPEN_BRACE,
    "}": CssTokenKind.CLOSE_BRACE,
    "@": CssTokenKind.AT_SIGN,
}

_WHITESPACE = frozenset(" \t\n")


def _is_identifier_char(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "-"


def tokenize_css(value: str) -> list[CssToken]:
    """Split a style sheet into tokens.

    Comments, whitespace and characters that start no token are skipped.
    An identifier of a single character at the very end of the input
    produces no token.
    """
    tokens: list[CssToken] = []
    in_comment = False
    length = len(value)
    pos = 0
    while pos < length:
        char = value[pos]
        following = value[pos + 1] if pos + 1 < length else ""

        if char == "/" and not in_comment:
            if following == "*":
                in_comment = True
                pos += 1
        elif char == "*" and in_comment:
            if following == "/":
                in_comment = False
                pos += 1
        elif in_comment:
            pass
        elif char in _SHORT_TOKENS:
            tokens.append(CssToken(_SHORT_TOKENS[char], char))
        elif char in _WHITESPACE:
            pass
        elif _is_identifier_char(char):
            end = pos + 1
            if end >= length:
                break
            while end < length and _is_identifier_char(value[end]):
                end += 1
            tokens.append(CssToken(CssTokenKind.IDENTIFIER, value[pos:end]))
            pos = end - 1
        pos += 1
    return tokens


def tokenize_all_css_dom(dom: "Dom") -> list[list[CssToken]]:
    """Tokenize the content of every style node of ``dom``, in order."""
    return [tokenize_css(node.content) for node in dom.style_nodes]