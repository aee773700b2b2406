"""Token types produced by the HTML lexer."""

from dataclasses import dataclass
from enum import IntEnum


class HtmlTokenKind(IntEnum):
    """Kinds of HTML tokens."""

    TAG_NAME = 0    # name
    TAG_OPEN = 1    # <
    TAG_DIV = 2     # /
    TAG_END = 3     # >
    CONTENT = 4     # text between tags
    ATTR_NAME = 5
    ATTR_VALUE = 6
    ATTR_EQ = 7     # =


@dataclass
class HtmlToken:
    """A single HTML token: its kind and its text."""

    kind: HtmlTokenKind
    value: str = ""