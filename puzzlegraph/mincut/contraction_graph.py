from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, Iterator, List

from frozendict import frozendict

from puzzlegraph.utils.input import split_in_two


@dataclass(frozen=True, eq=False)
class CompositeNode:
    """
    A node created by contracting two nodes of a :class:`ContractionGraph`. It stands
    for the union of the original nodes of both constituents. Composites compare and
    hash by identity: each contraction creates a distinct node.

    :field left: The first contracted node, itself a leaf or a composite.
    :field right: The second contracted node, itself a leaf or a composite.
    """

    left: Hashable
    right: Hashable
    _size: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # computed once, so nested composites do not re-walk their history
        object.__setattr__(self, "_size", node_size(self.left) + node_size(self.right))

    @property
    def size(self) -> int:
        """
        Number of original nodes this composite stands for.
        """
        return self._size

    def leaves(self) -> Iterator[Hashable]:
        """
        Yields the original nodes this composite stands for, left to right.
        """
        stack = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, CompositeNode):
                stack.append(node.right)
                stack.append(node.left)
            else:
                yield node


def node_size(node) -> int:
    """
    Number of original nodes ``node`` stands for: 1 for a leaf.
    """
    if isinstance(node, CompositeNode):
        return node.size
    return 1


def node_leaves(node) -> List[Hashable]:
    """
    The original nodes ``node`` stands for: just ``node`` itself for a leaf.
    """
    if isinstance(node, CompositeNode):
        return list(node.leaves())
    return [node]


class ContractionGraph:
    """
    A weighted undirected multigraph stored as ``node -> {neighbour -> weight}``, where
    parallel edges are collapsed into one edge carrying their total weight. Nodes can
    be contracted in pairs into :class:`CompositeNode` instances.

    Node order is insertion order, which makes every algorithm over the graph
    deterministic.
    """

    def __init__(self):
        self._adjacency: Dict[Hashable, Dict[Hashable, int]] = {}

    @classmethod
    def from_edges(cls, edges: Iterable) -> "ContractionGraph":
        """
        Build a graph from ``(a, b)`` or ``(a, b, weight)`` tuples.
        """
        graph = cls()
        for edge in edges:
            graph.add_edge(*edge)
        return graph

    def add_node(self, node):
        """
        Add a node with no edges. Does nothing if it is already present.
        """
        self._adjacency.setdefault(node, {})

    def add_edge(self, a, b, weight: int = 1):
        """
        Add an undirected edge, summing with any edge already between ``a`` and ``b``.

        :raises ValueError: If the edge is a self-loop or its weight is not positive.
        """
        if a == b:
            raise ValueError(f"Self-loop on {a!r} is not allowed.")
        if weight <= 0:
            raise ValueError(f"Edge weight must be positive, got {weight}.")
        self.add_node(a)
        self.add_node(b)
        self._adjacency[a][b] = self._adjacency[a].get(b, 0) + weight
        self._adjacency[b][a] = self._adjacency[b].get(a, 0) + weight

    def nodes(self) -> List[Hashable]:
        """
        All current nodes, in insertion order.
        """
        return list(self._adjacency)

    def neighbours(self, node) -> frozendict:
        """
        The neighbours of a node with their edge weights, as a read-only snapshot.
        """
        return frozendict(self._adjacency[node])

    def weight(self, a, b) -> int:
        """
        Total weight of the edges between ``a`` and ``b``; 0 if there are none.
        """
        return self._adjacency[a].get(b, 0)

    def original_size(self) -> int:
        """
        Number of original nodes across the graph, counting through composites.
        """
        return sum(node_size(node) for node in self._adjacency)

    def copy(self) -> "ContractionGraph":
        """
        An independent copy; contracting it leaves this graph untouched.
        """
        result = ContractionGraph()
        result._adjacency = {
            node: dict(neighbours) for node, neighbours in self._adjacency.items()
        }
        return result

    def contract(self, s, t) -> CompositeNode:
        """
        Replace ``s`` and ``t`` by a single composite node. Every other node's edge to
        the composite carries the sum of its weights to ``s`` and to ``t``; the edge
        between ``s`` and ``t`` disappears.

        :return: The new composite node.
        """
        assert s != t, "Cannot contract a node with itself."
        s_neighbours = self._adjacency.pop(s)
        t_neighbours = self._adjacency.pop(t)
        merged = CompositeNode(s, t)
        merged_neighbours: Dict[Hashable, int] = {}
        for old, neighbours in ((s, s_neighbours), (t, t_neighbours)):
            for neighbour, weight in neighbours.items():
                if neighbour in (s, t):
                    continue
                del self._adjacency[neighbour][old]
                merged_neighbours[neighbour] = merged_neighbours.get(neighbour, 0) + weight
        self._adjacency[merged] = merged_neighbours
        for neighbour, weight in merged_neighbours.items():
            self._adjacency[neighbour][merged] = weight
        return merged

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, node) -> bool:
        return node in self._adjacency


def parse_adjacency_list(lines: Iterable[str]) -> ContractionGraph:
    """
    Build a graph from lines of the form ``a: b c d``, each listed neighbour being
    connected to ``a`` by an edge of weight 1. Blank lines are skipped.

    :raises ValueError: If a line does not contain exactly one ``:``.
    """
    graph = ContractionGraph()
    for line in lines:
        if not line.strip():
            continue
        node, neighbours = split_in_two(line, ":")
        node = node.strip()
        graph.add_node(node)
        for neighbour in neighbours.split():
            graph.add_edge(node, neighbour)
    return graph
