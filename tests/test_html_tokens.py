from netlore.html_tokens import HtmlToken, HtmlTokenKind


def test_token_keeps_kind_and_value():
    lexeme = HtmlToken(HtmlTokenKind.TAG_OPEN, "<")
    assert lexeme.kind is HtmlTokenKind.TAG_OPEN
    assert lexeme.value == "<"


def test_token_default_value_is_empty():
    lexeme = HtmlToken(HtmlTokenKind.CONTENT)
    assert lexeme.value == ""


def test_token_equality():
    assert HtmlToken(HtmlTokenKind.TAG_NAME, "html") == HtmlToken(HtmlTokenKind.TAG_NAME, "html")
    assert HtmlToken(HtmlTokenKind.TAG_NAME, "html") != HtmlToken(HtmlTokenKind.ATTR_NAME, "html")


def test_token_value_can_grow():
    lexeme = HtmlToken(HtmlTokenKind.ATTR_VALUE)
    for ch in "title":
        lexeme.value += ch
    assert lexeme.value == "title"


def test_kind_order_follows_declaration():
    lexemes = [HtmlToken(kind, kind.name) for kind in HtmlTokenKind]
    assert lexemes[0].kind is HtmlTokenKind.TAG_NAME
    assert lexemes[-1].kind is HtmlTokenKind.ATTR_EQ
    assert [int(t.kind) for t in lexemes] == list(range(len(lexemes)))
    assert [t.value for t in lexemes] == [
        "TAG_NAME", "TAG_OPEN", "TAG_DIV", "TAG_END",
        "CONTENT", "ATTR_NAME", "ATTR_VALUE", "ATTR_EQ",
    ]


def test_kind_lookup_by_name():
    lexeme = HtmlToken(HtmlTokenKind["ATTR_EQ"], "=")
    assert lexeme == HtmlToken(HtmlTokenKind.ATTR_EQ, "=")
    assert lexeme.kind is HtmlTokenKind.ATTR_EQ