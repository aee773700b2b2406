"""DOM nodes, their attributes and their render boxes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

_ATTR_NAME_COLOR = "\x1b[0;34m"
_RESET_COLOR = "\x1b[0;0m"


@dataclass
class Edges:
    """Four edge sizes, as used by margins and paddings."""

    top: float = 0.0
    left: float = 0.0
    right: float = 0.0
    bottom: float = 0.0


@dataclass
class RenderBox:
    """Geometry of a node: size, position, margin and padding."""

    width: float = 0.0
    height: float = 0.0
    top: float = 0.0
    left: float = 0.0
    margin: Edges = field(default_factory=Edges)
    padding: Edges = field(default_factory=Edges)


@dataclass
class Attribute:
    """A single ``name="value"`` attribute of a node."""

    name: str
    value: str = ""


def _class_names(value: str) -> list[str]:
    return [name for name in value.split(" ") if name]


@dataclass(eq=False)
class DomNode:
    """A node of the document tree.

    Nodes compare by identity; the search methods return the node
    objects held in the tree.
    """

    tag: str
    content: str = ""
    parent: Optional["DomNode"] = field(default=None, repr=False)
    attrs: list[Attribute] = field(default_factory=list)
    render_box: RenderBox = field(default_factory=RenderBox)
    style: Optional[object] = None
    children: list["DomNode"] = field(default_factory=list, repr=False)

    def add_child(self, child: "DomNode") -> "DomNode":
        """Append ``child`` to this node's children and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def add_attribute(self, name: str, value: str = "") -> Attribute:
        """Append a new attribute and return it."""
        attribute = Attribute(name, value)
        self.attrs.append(attribute)
        return attribute

    def find_attr(self, name: str) -> Optional[Attribute]:
        """Return the first attribute called ``name``, or None."""
        return next((a for a in self.attrs if a.name == name), None)

    def _has_class(self, class_name: str) -> bool:
        attribute = self.find_attr("class")
        return attribute is not None and class_name in _class_names(attribute.value)

    def _has_id(self, node_id: str) -> bool:
        attribute = self.find_attr("id")
        return attribute is not None and attribute.value == node_id

    # Direct children only.

    def find_child_by_content(self, content: str) -> Optional["DomNode"]:
        """Return the first direct child whose content equals ``content``."""
        return next((c for c in self.children if c.content == content), None)

    def find_child_by_class(self, class_name: str) -> Optional["DomNode"]:
        """Return the first direct child carrying class ``class_name``."""
        return next((c for c in self.children if c._has_class(class_name)), None)

    def find_child_by_tag(self, tag: str) -> Optional["DomNode"]:
        """Return the first direct child with tag ``tag``."""
        return next((c for c in self.children if c.tag == tag), None)

    def find_child_by_id(self, node_id: str) -> Optional["DomNode"]:
        """Return the first direct child whose ``id`` is ``node_id``."""
        return next((c for c in self.children if c._has_id(node_id)), None)

    # Whole subtree, depth first, the node itself excluded.

    def descendants(self) -> Iterator["DomNode"]:
        """Yield every node below this one, depth first in document order."""
        for child in self.children:
            yield child
            yield from child.descendants()

    def find_by_content(self, content: str) -> Optional["DomNode"]:
        """Return the first descendant whose content equals ``content``."""
        return next((n for n in self.descendants() if n.content == content), None)

    def find_by_class(self, class_name: str) -> Optional["DomNode"]:
        """Return the first descendant carrying class ``class_name``."""
        return next((n for n in self.descendants() if n._has_class(class_name)), None)

    def find_by_tag(self, tag: str) -> Optional["DomNode"]:
        """Return the first descendant with tag ``tag``."""
        return next((n for n in self.descendants() if n.tag == tag), None)

    def find_by_id(self, node_id: str) -> Optional["DomNode"]:
        """Return the first descendant whose ``id`` is ``node_id``."""
        return next((n for n in self.descendants() if n._has_id(node_id)), None)

    def set_padding(self, top: float, bottom: float, left: float, right: float) -> None:
        """Set the padding of this node's render box."""
        self.render_box.padding = Edges(top=top, left=left, right=right, bottom=bottom)

    def set_margin(self, top: float, bottom: float, left: float, right: float) -> None:
        """Set the margin of this node's render box."""
        self.render_box.margin = Edges(top=top, left=left, right=right, bottom=bottom)

    def attrs_as_string(self) -> str:
        """Render the attributes as a coloured, comma separated listing."""
        return ", ".join(
            f'{_ATTR_NAME_COLOR}"{a.name}"{_RESET_COLOR}: "{a.value}"'
            for a in self.attrs
        )