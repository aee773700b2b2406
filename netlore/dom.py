"""The document: a root node, a title and the style nodes found while parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from netlore.node import DomNode
from netlore.utils import gen_spacing

_KEY_COLOR = "\x1b[0;33m"
_RESET_COLOR = "\x1b[0m"

WINDOW_TITLE_PREFIX = "Netlore - "


def _new_root() -> DomNode:
    return DomNode("root")


@dataclass(eq=False)
class Dom:
    """A parsed document.

    ``window`` and ``request`` are opaque handles owned by the caller;
    the document only keeps them alongside its tree.
    """

    window: Any = None
    title: str = "None"
    request: Any = None
    root_node: DomNode = field(default_factory=_new_root)
    style_nodes: list[DomNode] = field(default_factory=list)

    def set_title(self, title: str) -> None:
        """Change the document title."""
        self.title = title

    def set_request(self, request: Any) -> None:
        """Attach the request the document was loaded from."""
        self.request = request

    def window_title(self) -> str:
        """Return the title a window showing this document should carry."""
        return f"{WINDOW_TITLE_PREFIX}{self.title}"

    def find_by_content(self, content: str) -> Optional[DomNode]:
        """Return the first node in the document whose content is ``content``."""
        return self.root_node.find_by_content(content)

    def find_by_class(self, class_name: str) -> Optional[DomNode]:
        """Return the first node in the document carrying class ``class_name``."""
        return self.root_node.find_by_class(class_name)

    def find_by_tag(self, tag: str) -> Optional[DomNode]:
        """Return the first node in the document with tag ``tag``."""
        return self.root_node.find_by_tag(tag)

    def find_by_id(self, node_id: str) -> Optional[DomNode]:
        """Return the first node in the document whose ``id`` is ``node_id``."""
        return self.root_node.find_by_id(node_id)

    def dump_tree(self, start_node: Optional[DomNode] = None, spacing: int = 0) -> str:
        """Render the children of ``start_node`` (default: the root) as a coloured tree."""
        node = self.root_node if start_node is None else start_node
        parts: list[str] = []
        for child in node.children:
            pad = gen_spacing(spacing)
            parts.append(
                f"\n{pad}{{\n"
                f'{pad}    "{_KEY_COLOR}tag{_RESET_COLOR}": "{child.tag}",\n'
                f'{pad}    "{_KEY_COLOR}content{_RESET_COLOR}": "{child.content}",\n'
                f'{pad}    "{_KEY_COLOR}childrens_len{_RESET_COLOR}": "{len(child.children)}",\n'
                f'{pad}    "{_KEY_COLOR}attrs_len{_RESET_COLOR}": "{len(child.attrs)}",\n'
                f'{pad}    "{_KEY_COLOR}attrs{_RESET_COLOR}": [{child.attrs_as_string()}],\n'
                f'{pad}    "{_KEY_COLOR}childrens{_RESET_COLOR}": ['
            )
            if child.children:
                parts.append(self.dump_tree(child, spacing + 2))
                parts.append(f"{pad}    ]\n{pad}}}\n")
            else:
                parts.append(f"]\n{pad}}}\n")
        return "".join(parts)