from abc import ABC, abstractmethod
from typing import Iterable, Tuple, TypeVar

N = TypeVar("N")


class BreadthFirstSearchGraph(ABC):
    """
    Represents an unweighted search graph whose edges are generated lazily. The graph
    owns its own visited-set, exposed through ``mark``, so that the caller decides how
    visitedness is stored (e.g. per grid cell, or per cell and direction).
    """

    @abstractmethod
    def mark(self, node: N) -> bool:
        """
        Mark the node as visited. Returns True iff the node was not already marked.
        """

    @abstractmethod
    def neighbours(self, node: N) -> Iterable[N]:
        """
        Find the neighbours of a node in the search graph.
        """

    def search(self, start: N) -> int:
        """
        Visit every node reachable from ``start`` exactly once. See
        :func:`puzzlegraph.search.bfs`.

        :param start: The node to start from. Must not already be marked.
        :return: The number of nodes visited.
        """
        # pylint: disable=import-outside-toplevel,cyclic-import
        from puzzlegraph.search.bfs import bfs

        return bfs(self, start)


class WeightedSearchGraph(ABC):
    """
    Represents a search graph with non-negative integer edge costs, generated lazily.
    The graph records the best known cost of each state itself, through ``try_improve``,
    which lets it impose a problem-specific dominance rule instead of one cost per node.
    """

    @abstractmethod
    def is_end(self, node: N) -> bool:
        """
        Return True iff the node is an end node.
        """

    @abstractmethod
    def neighbours(self, node: N) -> Iterable[Tuple[int, N]]:
        """
        Find the neighbours of a node, as ``(edge_cost, neighbour)`` pairs. Edge costs
        must be non-negative.
        """

    @abstractmethod
    def try_improve(self, node: N, cost: int) -> bool:
        """
        Return True iff ``cost`` improves on the best cost recorded for ``node``, in
        which case ``cost`` becomes the recorded best.
        """

    def search(self, starts: Iterable[N]) -> int:
        """
        Find the minimum total cost from any of ``starts`` to any end node. See
        :func:`puzzlegraph.search.dijkstra`.

        :param starts: The start nodes, each at cost 0.
        :return: The minimal cost.
        """
        # pylint: disable=import-outside-toplevel,cyclic-import
        from puzzlegraph.search.dijkstra import dijkstra

        return dijkstra(self, starts)
