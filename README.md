# netlore

A small HTML and CSS front end with no dependencies. It does four things:

- It splits HTML into tokens.
- It builds a DOM tree from those tokens.
- It collects the text of `<style>` blocks and splits that CSS into tokens.
- It holds the table of named CSS colours.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from netlore.dom import Dom
from netlore.html_lexer import tokenize_html
from netlore.html_parser import parse_html
from netlore.css import tokenize_all_css_dom
from netlore.colors import get_builtin_color

html = """<html>
<head><style>span { color: red; }</style></head>
<body><span class="title">Netlore!</span></body>
</html>"""

dom = Dom()
parse_html(tokenize_html(html), dom)

print(dom.find_by_class("title").tag)                # span
print(dom.find_by_content("Netlore!").parent.tag)    # span
print(dom.window_title())                            # Netlore - None

for tokens in tokenize_all_css_dom(dom):             # one token list per <style> block
    print([(t.kind.name, t.value) for t in tokens])

print(hex(get_builtin_color("Red")))                 # 0xff0000ff
```

## Modules

### `netlore.html_tokens`

This module defines `HtmlTokenKind`, an `IntEnum` with these members:

- `TAG_NAME`
- `TAG_OPEN`
- `TAG_DIV`
- `TAG_END`
- `CONTENT`
- `ATTR_NAME`
- `ATTR_VALUE`
- `ATTR_EQ`

It also defines `HtmlToken`, a dataclass with the fields `kind` and `value`.

### `netlore.html_lexer`

`tokenize_html(value)` returns a list of `HtmlToken`.

The lexer drops newlines and tabs from text content. It also removes the leading spaces of a text run and keeps the trailing ones. Attribute values are read between double quotes.

### `netlore.html_parser`

`parse_html(tokens, dom)` adds nodes under `dom.root_node` and returns `dom`.

- Text becomes child nodes with the tag `"__tag"`.
- A closing tag that matches no open element is ignored.
- When the tokens are malformed, it raises `HtmlParseError`, which is a `ValueError`.

After parsing, `dom.style_nodes` holds the text node of every `<style>` element in document order. This list is filled in even when an error is raised.

### `netlore.node`

This module defines four dataclasses:

- `Edges` and `RenderBox`, the geometry of a node. `RenderBox` has a width, a height, a position, a margin and a padding.
- `Attribute`, which has a `name` and a `value`.
- `DomNode`, a node of the tree. Nodes compare by identity.

`DomNode` has these methods:

- `add_child(child)` sets the child's `parent` and returns the child.
- `add_attribute(name, value)` adds an attribute and returns it.
- `find_attr(name)` returns the first attribute with that name.
- `find_child_by_content`, `find_child_by_class`, `find_child_by_tag` and `find_child_by_id` search the direct children only.
- `find_by_content`, `find_by_class`, `find_by_tag` and `find_by_id` search all descendants, depth first.
- `descendants()` yields every node below this one.
- `set_padding(top, bottom, left, right)` and `set_margin(top, bottom, left, right)` set the edges of the render box.
- `attrs_as_string()` returns a coloured listing of the attributes.

Class matching splits the `class` attribute on spaces.

### `netlore.dom`

This module defines `Dom`, the document. It holds these fields:

- `root_node`
- `title`, which defaults to `"None"`
- `style_nodes`
- `window` and `request`, which are opaque values the caller can attach

`Dom` has these methods:

- `set_title`
- `set_request`
- `window_title()`, which returns `"Netlore - <title>"`
- the four `find_by_*` lookups, which search from the root
- `dump_tree(start_node=None, spacing=0)`, which returns the tree below a node as an indented, coloured text

### `netlore.css`

This module defines `CssTokenKind` and `CssToken`.

`tokenize_css(value)` returns tokens for these characters: `#`, `:`, `;`, `.`, `{`, `}` and `@`. It also returns identifiers made of letters and `-`. It skips `/* ... */` comments, whitespace and all other characters.

`tokenize_all_css_dom(dom)` tokenizes the content of every node in `dom.style_nodes`.

### `netlore.colors`

`get_builtin_color(name)` returns a named colour as `0xRRGGBBAA`. The name must match exactly, including case, and an unknown name gives `0`.

`builtin_colors()` returns a read-only mapping of the whole table.

### `netlore.utils`

`gen_spacing(n)` returns four spaces for each nesting level.

## What it does not do

The package does not fetch pages over the network. It does not draw anything, open a window or lay out the tree: `RenderBox` values are only stored. CSS is split into tokens only, and it is not parsed into rules or applied to nodes. There is no command-line program.