"""A binary tree of linked nodes with the three classic depth-first visits."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

_LEFT_PREFIX = "├──"
_RIGHT_PREFIX = "└──"


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree: a value, its parent and up to two children."""

    value: Any = None
    parent: TreeNode | None = field(default=None, repr=False)
    left: TreeNode | None = None
    right: TreeNode | None = None

    def is_leaf(self) -> bool:
        """Return whether the node has no children."""
        return self.left is None and self.right is None


class BinaryTree:
    """A binary tree that always owns a root node.

    Children are attached directly below the root with :meth:`insert_left`
    and :meth:`insert_right`; a node may carry a whole subtree with it.
    """

    def __init__(self, value: Any = None) -> None:
        self._root = TreeNode(value)

    @property
    def root(self) -> TreeNode:
        """The root node of the tree."""
        return self._root

    def is_empty(self) -> bool:
        """Return whether the root is detached and has no children."""
        return self._root.parent is None and self._root.is_leaf()

    def parent(self, node: TreeNode) -> TreeNode | None:
        """Return the parent of ``node``."""
        return node.parent

    def left(self, node: TreeNode) -> TreeNode | None:
        """Return the left child of ``node``."""
        return node.left

    def right(self, node: TreeNode) -> TreeNode | None:
        """Return the right child of ``node``."""
        return node.right

    def is_left_empty(self, node: TreeNode) -> bool:
        """Return whether ``node`` has no left child."""
        return node.left is None

    def is_right_empty(self, node: TreeNode) -> bool:
        """Return whether ``node`` has no right child."""
        return node.right is None

    def read_value(self, node: TreeNode) -> Any:
        """Return the value held by ``node``."""
        return node.value

    def write_value(self, node: TreeNode, value: Any) -> None:
        """Store ``value`` in ``node``."""
        node.value = value

    def insert_left(self, node: TreeNode) -> None:
        """Attach ``node`` as the left child of the root."""
        node.parent = self._root
        self._root.left = node

    def insert_right(self, node: TreeNode) -> None:
        """Attach ``node`` as the right child of the root."""
        node.parent = self._root
        self._root.right = node

    @staticmethod
    def _children(node: TreeNode) -> Iterator[TreeNode]:
        if node.left is not None:
            yield node.left
        if node.right is not None:
            yield node.right

    def pre_order(self, node: TreeNode | None = None) -> Iterator[Any]:
        """Yield values node first, then left subtree, then right subtree."""
        node = self._root if node is None else node
        yield node.value
        for child in self._children(node):
            yield from self.pre_order(child)

    def in_order(self, node: TreeNode | None = None) -> Iterator[Any]:
        """Yield values of the left subtree, then the node, then the right subtree."""
        node = self._root if node is None else node
        if node.left is not None:
            yield from self.in_order(node.left)
        yield node.value
        if node.right is not None:
            yield from self.in_order(node.right)

    def post_order(self, node: TreeNode | None = None) -> Iterator[Any]:
        """Yield values of both subtrees first, then the node."""
        node = self._root if node is None else node
        for child in self._children(node):
            yield from self.post_order(child)
        yield node.value

    def depth(self, node: TreeNode | None = None) -> int:
        """Return the number of edges on the longest path from ``node`` down to a leaf."""
        node = self._root if node is None else node
        return max((self.depth(child) + 1 for child in self._children(node)), default=0)

    def format(self) -> str:
        """Render the tree one node per line, marking left and right children."""
        lines: list[str] = []

        def render(node: TreeNode, prefix: str) -> None:
            lines.append(f"{prefix}{node.value}")
            if node.left is not None:
                render(node.left, _LEFT_PREFIX)
            if node.right is not None:
                render(node.right, _RIGHT_PREFIX)

        render(self._root, "")
        return "\n".join(lines)