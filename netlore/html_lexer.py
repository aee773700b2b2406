"""Tokenizer that turns HTML text into a flat list of tokens."""

from __future__ import annotations

from netlore.html_tokens import HtmlToken, HtmlTokenKind

_END = "\0"
_SKIPPED = frozenset("\n\t")
_TAG_NAME_STOPS = frozenset(" >/" + _END)
_ATTR_NAME_STOPS = frozenset(" >/=" + _END)
_ATTR_VALUE_STOPS = frozenset('"' + _END)
_CONTENT_STOPS = frozenset("<>" + _END)


class _HtmlLexer:
    """Character-by-character state machine over one HTML document."""

    def __init__(self, value: str) -> None:
        # Text after an embedded NUL character is never looked at.
        self.text = value.split(_END, 1)[0]
        self.pos = 0
        self.tokens: list[HtmlToken] = []
        self.tag_is_opened = False
        self.expect_name = False
        self.expect_attrs = False

    @property
    def char(self) -> str:
        if 0 <= self.pos < len(self.text):
            return self.text[self.pos]
        return _END

    def _emit(self, kind: HtmlTokenKind, value: str) -> None:
        self.tokens.append(HtmlToken(kind, value))

    def _open_tag(self) -> None:
        self._emit(HtmlTokenKind.TAG_OPEN, "<")
        self.tag_is_opened = True
        self.expect_name = True
        self.expect_attrs = False

    def _close_tag(self) -> None:
        self._emit(HtmlTokenKind.TAG_END, ">")
        self.tag_is_opened = False
        self.expect_name = False
        self.expect_attrs = False

    def _collect_name(self, stops: frozenset[str]) -> str:
        """Collect a tag or attribute name; a newline or tab swallows itself
        and lets the following character through unchecked."""
        chars: list[str] = []
        while self.char not in stops:
            if self.char in _SKIPPED:
                self.pos += 1
            if self.char != _END:
                chars.append(self.char)
            self.pos += 1
        return "".join(chars)

    def _collect_until(self, stops: frozenset[str]) -> str:
        start = self.pos
        while self.char not in stops:
            self.pos += 1
        return self.text[start:self.pos]

    def _tag_name(self) -> None:
        if self.char in _SKIPPED:
            return
        self._emit(HtmlTokenKind.TAG_NAME, self._collect_name(_TAG_NAME_STOPS))
        if self.char == ">":
            self._close_tag()
        elif self.char == "/":
            self._emit(HtmlTokenKind.TAG_DIV, "/")
        elif self.char == " ":
            self.expect_attrs = True
            self.expect_name = False
            self.tag_is_opened = True

    def _attribute(self) -> None:
        if self.char in _SKIPPED:
            return
        self._emit(HtmlTokenKind.ATTR_NAME, self._collect_name(_ATTR_NAME_STOPS))
        if self.char == ">":
            self._close_tag()
        elif self.char == "/":
            self._emit(HtmlTokenKind.TAG_DIV, "/")
        elif self.char == "=":
            self._emit(HtmlTokenKind.ATTR_EQ, "=")
            # Skip the '=' and the opening quote.
            self.pos += 2
            self._emit(HtmlTokenKind.ATTR_VALUE, self._collect_until(_ATTR_VALUE_STOPS))

    def _content(self) -> None:
        chars: list[str] = []
        started = False
        while self.char not in _CONTENT_STOPS:
            if self.char in _SKIPPED:
                self.pos += 1
                continue
            if self.char != " ":
                started = True
            if started:
                chars.append(self.char)
            self.pos += 1
        self._emit(HtmlTokenKind.CONTENT, "".join(chars))
        if self.char == "<":
            self._open_tag()
        elif self.char == ">":
            self._close_tag()

    def run(self) -> list[HtmlToken]:
        while self.pos < len(self.text):
            char = self.char
            if char == "<":
                self._open_tag()
            elif char == ">":
                self._close_tag()
            elif char == "/":
                self._emit(HtmlTokenKind.TAG_DIV, "/")
            elif self.tag_is_opened:
                if self.expect_name:
                    self._tag_name()
                elif self.expect_attrs:
                    self._attribute()
            else:
                self._content()
            self.pos += 1
        return self.tokens


def tokenize_html(value: str) -> list[HtmlToken]:
    """Split HTML text into tokens.

    Newlines and tabs are dropped from text content, and leading spaces
    of a text run are removed while trailing ones are kept.
    """
    return _HtmlLexer(value).run()