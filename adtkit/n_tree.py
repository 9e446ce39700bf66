"""A tree whose nodes may have any number of ordered children."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from adtkit.errors import IllegalStateError


@dataclass(eq=False)
class NTreeNode:
    """A node with a value, its parent, its ordered children and its level."""

    value: Any = None
    parent: NTreeNode | None = field(default=None, repr=False)
    children: list[NTreeNode] = field(default_factory=list)
    level: int = 0

    def is_leaf(self) -> bool:
        """Return whether the node has no children."""
        return not self.children


def _count(node: NTreeNode) -> int:
    return 1 + sum(_count(child) for child in node.children)


def _relevel(node: NTreeNode, level: int) -> None:
    node.level = level
    for child in node.children:
        _relevel(child, level + 1)


class NTree:
    """An n-ary tree rooted at a single node."""

    def __init__(self) -> None:
        self._root: NTreeNode | None = None
        self.nodes_inside = 0

    def _require_not_empty(self) -> NTreeNode:
        if self._root is None:
            raise IllegalStateError("the tree is empty")
        return self._root

    def is_empty(self) -> bool:
        """Return whether the tree has no node."""
        return self.nodes_inside == 0

    def insert_root(self, node: NTreeNode) -> None:
        """Make ``node`` the root of an empty tree; its level must be 0."""
        if not self.is_empty():
            raise IllegalStateError("the tree already has a root")
        if node.level != 0:
            raise IllegalStateError("a root node must be at level 0")
        self._root = node
        self.nodes_inside = _count(node)

    def root(self) -> NTreeNode:
        """Return the root node."""
        return self._require_not_empty()

    def parent(self) -> NTreeNode | None:
        """Return the parent of the root when the tree is a subtree of another."""
        root = self._require_not_empty()
        if root.level <= 0:
            raise IllegalStateError("the root of a whole tree has no parent")
        return root.parent

    def is_leaf(self) -> bool:
        """Return whether the root has no children."""
        return self._require_not_empty().is_leaf()

    def first_child(self) -> NTreeNode:
        """Return the first child of the root."""
        root = self._require_not_empty()
        if root.is_leaf():
            raise IllegalStateError("a leaf has no children")
        return root.children[0]

    def _attach(self, tree: NTree, index: int) -> None:
        root = self._require_not_empty()
        child = tree.root()
        child.parent = root
        _relevel(child, root.level + 1)
        root.children.insert(index, child)
        self.nodes_inside += tree.nodes_inside

    def insert_first_tree(self, tree: NTree) -> None:
        """Attach the root of ``tree`` as the first child of the root."""
        self._attach(tree, 0)

    def insert_subtree(self, tree: NTree) -> None:
        """Attach the root of ``tree`` right after the first child of the root."""
        self.first_child()
        self._attach(tree, 1)

    def read_value(self, node: NTreeNode) -> Any:
        """Return the value held by ``node``."""
        return node.value

    def write_value(self, node: NTreeNode, value: Any) -> None:
        """Store ``value`` in ``node``."""
        node.value = value

    def depth(self, node: NTreeNode | None = None) -> int:
        """Return the number of edges on the longest path from ``node`` down to a leaf.

        Without a node the root is used; an empty tree has depth 0.
        """
        if node is None:
            node = self._root
        if node is None:
            return 0
        return max((self.depth(child) + 1 for child in node.children), default=0)