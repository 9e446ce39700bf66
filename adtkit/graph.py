"""A directed, weighted graph stored as an adjacency matrix."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from adtkit.errors import IllegalStateError

NO_LINK = 0
DEFAULT_LINK = 1


@dataclass
class GraphNode:
    """A graph node: its value, its id in the graph and its outgoing link count.

    Nodes compare equal when value, soft-deletion flag, link count and id agree.
    """

    value: Any = None
    id: int = -1
    links: int = 0
    soft_deleted: bool = False

    def has_links(self) -> bool:
        """Return whether the node has at least one outgoing link."""
        return self.links > 0


@dataclass(eq=False)
class Edge:
    """A link from ``source`` to ``target`` carrying ``weight``.

    Two edges are equal when their endpoints hold equal values and their
    weights match.
    """

    source: GraphNode
    target: GraphNode
    weight: Any = NO_LINK

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (
            self.source.value == other.source.value
            and self.target.value == other.target.value
            and self.weight == other.weight
        )


@dataclass(eq=False)
class AdjacencyMatrixGraph:
    """A directed graph whose links are kept in a square matrix of weights.

    A weight of ``NO_LINK`` (0) in the matrix means the two nodes are not
    linked. Node values must be unique within the graph.
    """

    _nodes: list[GraphNode] = field(default_factory=list)
    _edges: list[Edge] = field(default_factory=list)
    _matrix: list[list[Any]] = field(default_factory=list)

    def __init__(self) -> None:
        self._nodes = []
        self._edges = []
        self._matrix = []

    def _position(self, node: GraphNode) -> int:
        index = node.id
        if not 0 <= index < len(self._nodes) or self._nodes[index] is not node:
            raise IllegalStateError("the node is not part of the graph")
        return index

    def is_empty(self) -> bool:
        """Return whether the graph has no node."""
        return not self._nodes

    def insert_node(self, node: GraphNode) -> None:
        """Add ``node`` to the graph and give it the next free id.

        :raises IllegalStateError: if a node with the same value is present.
        """
        if self.exists_node(node):
            raise IllegalStateError("a node with this value is already in the graph")
        node.id = len(self._nodes)
        self._nodes.append(node)
        for row in self._matrix:
            row.append(NO_LINK)
        self._matrix.append([NO_LINK] * len(self._nodes))

    def remove_node(self, node: GraphNode) -> None:
        """Remove ``node`` from the graph; it must have no outgoing link.

        Links coming into the node are dropped along with it.

        :raises IllegalStateError: if the node is absent or still has links.
        """
        index = self._position(node)
        if node.has_links():
            raise IllegalStateError("cannot remove a node that still has links")
        for edge in [e for e in self._edges if e.target is node]:
            self._edges.remove(edge)
            edge.source.links -= 1
        del self._matrix[index]
        for row in self._matrix:
            del row[index]
        del self._nodes[index]
        for new_id, remaining in enumerate(self._nodes):
            remaining.id = new_id
        node.id = -1

    def insert_link(self, first: GraphNode, second: GraphNode, weight: Any = DEFAULT_LINK) -> None:
        """Link ``first`` to ``second`` with ``weight``; an existing link is reweighted.

        :raises ValueError: if ``weight`` is the no-link value.
        :raises IllegalStateError: if either node is not in the graph.
        """
        if weight == NO_LINK:
            raise ValueError("a link weight must differ from the no-link value")
        row, col = self._position(first), self._position(second)
        if self._matrix[row][col] != NO_LINK:
            for edge in self._edges:
                if edge.source is first and edge.target is second:
                    edge.weight = weight
                    break
        else:
            self._edges.append(Edge(first, second, weight))
            first.links += 1
        self._matrix[row][col] = weight

    def remove_link(self, first: GraphNode, second: GraphNode) -> None:
        """Remove the link from ``first`` to ``second``.

        :raises IllegalStateError: if there is no such link.
        """
        if not self.exists_link(first, second):
            raise IllegalStateError("there is no link between these nodes")
        for edge in self._edges:
            if edge.source is first and edge.target is second:
                self._edges.remove(edge)
                break
        self._matrix[first.id][second.id] = NO_LINK
        first.links -= 1

    def link_weight(self, first: GraphNode, second: GraphNode) -> Any:
        """Return the weight of the link from ``first`` to ``second`` (0 if none)."""
        return self._matrix[self._position(first)][self._position(second)]

    def nodes(self) -> list[GraphNode]:
        """Return every node in id order."""
        return list(self._nodes)

    def adjacents(self, node: GraphNode) -> list[GraphNode]:
        """Return the nodes that ``node`` links to, in id order."""
        row = self._matrix[self._position(node)]
        return [other for other, weight in zip(self._nodes, row) if weight != NO_LINK]

    def exists_node(self, node: GraphNode) -> bool:
        """Return whether a node holding the same value is in the graph."""
        return any(existing.value == node.value for existing in self._nodes)

    def exists_link(self, first: GraphNode, second: GraphNode) -> bool:
        """Return whether ``first`` links to ``second``."""
        return self.link_weight(first, second) != NO_LINK

    def read_value(self, node: GraphNode) -> Any:
        """Return the value held by ``node``."""
        return node.value

    def write_value(self, node: GraphNode, value: Any) -> None:
        """Store ``value`` in ``node``."""
        node.value = value

    def __len__(self) -> int:
        return len(self._nodes)