import pytest

from netlore.node import Attribute, DomNode, Edges, RenderBox


@pytest.fixture
def tree():
    root = DomNode("root")
    html = root.add_child(DomNode("html"))
    body = html.add_child(DomNode("body"))
    span = body.add_child(DomNode("span"))
    span.add_attribute("class", "title big")
    span.add_attribute("id", "main")
    text = span.add_child(DomNode("__tag", "Netlore!"))
    div = body.add_child(DomNode("div"))
    div.add_attribute("class", "big")
    return {"root": root, "html": html, "body": body, "span": span,
            "text": text, "div": div}


def test_render_box_defaults_are_zero():
    box = RenderBox()
    assert (box.width, box.height, box.top, box.left) == (0, 0, 0, 0)
    assert box.margin == Edges(0, 0, 0, 0)
    assert box.padding == Edges(0, 0, 0, 0)


def test_add_child_appends_in_order_and_sets_parent():
    parent = DomNode("div")
    first = parent.add_child(DomNode("a"))
    second = parent.add_child(DomNode("b"))
    assert parent.children == [first, second]
    assert first.parent is parent and second.parent is parent


def test_add_attribute_and_find_attr():
    node = DomNode("a")
    attr = node.add_attribute("href")
    assert attr == Attribute("href", "")
    attr.value = "index.html"
    assert node.find_attr("href").value == "index.html"
    assert node.find_attr("missing") is None


def test_find_attr_returns_first_match():
    node = DomNode("a")
    first = node.add_attribute("x", "1")
    node.add_attribute("x", "2")
    assert node.find_attr("x") is first


def test_find_child_by_tag_and_content(tree):
    assert tree["body"].find_child_by_tag("div") is tree["div"]
    assert tree["span"].find_child_by_content("Netlore!") is tree["text"]
    assert tree["root"].find_child_by_tag("span") is None


def test_find_child_by_class_and_id(tree):
    body = tree["body"]
    assert body.find_child_by_class("big") is tree["span"]
    assert body.find_child_by_class("title") is tree["span"]
    assert body.find_child_by_id("main") is tree["span"]
    assert body.find_child_by_id("other") is None
    assert body.find_child_by_class("tit") is None


def test_find_in_subtree(tree):
    root = tree["root"]
    assert root.find_by_tag("span") is tree["span"]
    assert root.find_by_content("Netlore!") is tree["text"]
    assert root.find_by_id("main") is tree["span"]
    assert root.find_by_class("big") is tree["span"]
    assert root.find_by_tag("table") is None
    assert root.find_by_class("") is None


def test_find_by_class_skips_nodes_without_class(tree):
    tree["span"].attrs.clear()
    assert tree["root"].find_by_class("big") is tree["div"]
    assert tree["root"].find_by_id("main") is None


def test_find_does_not_match_self():
    node = DomNode("span")
    assert node.find_by_tag("span") is None


def test_descendants_order(tree):
    tags = [n.tag for n in tree["root"].descendants()]
    assert tags == ["html", "body", "span", "__tag", "div"]


def test_set_padding_and_margin():
    node = DomNode("div")
    node.set_padding(1, 2, 3, 4)
    node.set_margin(5, 6, 7, 8)
    assert node.render_box.padding == Edges(top=1, left=3, right=4, bottom=2)
    assert node.render_box.margin == Edges(top=5, left=7, right=8, bottom=6)


def test_attrs_as_string_format():
    node = DomNode("span")
    node.add_attribute("class", "title")
    node.add_attribute("id", "main")
    expected = ('\x1b[0;34m"class"\x1b[0;0m: "title", '
                '\x1b[0;34m"id"\x1b[0;0m: "main"')
    assert node.attrs_as_string() == expected


def test_attrs_as_string_empty():
    assert DomNode("span").attrs_as_string() == ""


def test_nodes_compare_by_identity():
    parent = DomNode("div")
    first = parent.add_child(DomNode("a"))
    second = parent.add_child(DomNode("a"))
    assert (first == second) is False
    assert parent.children.index(second) == 1
    assert parent.find_child_by_tag("a") is first