"""
Scene Graph Group
=================

Node holding an ordered list of children.
"""

from typing import Iterator, List

from .node import Node


class Group(Node):
    """Node with children."""

    def __init__(self):
        super().__init__()
        self.children: List[Node] = []

    def add_child(self, child: Node):
        """Add a child and make this group its parent."""
        child.parent = self
        self.children.append(child)

    def remove_child(self, child: Node):
        """Unlink a child. Unknown children are ignored."""
        if child in self.children:
            child.parent = None
            self.children.remove(child)

    def remove_all(self):
        """Unlink every child."""
        for child in list(self.children):
            self.remove_child(child)

    @property
    def has_children(self) -> bool:
        return len(self.children) > 0

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self.children))
