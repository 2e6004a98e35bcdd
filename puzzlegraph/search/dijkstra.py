import heapq
import itertools
from typing import Iterable, TypeVar

from puzzlegraph.search_graph.search_graph import WeightedSearchGraph

N = TypeVar("N")


class UnreachableGoalError(RuntimeError):
    """
    Raised when the frontier is exhausted without reaching an end node.
    """


def dijkstra(g: WeightedSearchGraph, starts: Iterable[N]) -> int:
    """
    Finds the minimum total cost from any of ``starts`` to any node satisfying
    ``g.is_end``, by Dijkstra relaxation over the lazily generated graph.

    The frontier is never cleaned up: a state can appear in it several times, and any
    entry that has since been beaten is harmless because its relaxations fail
    ``g.try_improve``. Returning on the first end node popped is only correct because
    edge costs are non-negative.

    :param g: Search graph to search over.
    :param starts: The start nodes, each at cost 0.
    :return: The minimal total cost.

    :raises ValueError: If there are no start nodes, or an edge has a negative cost.
    :raises UnreachableGoalError: If no end node is reachable.
    """
    fringe = []
    # insertion order breaks ties, so nodes need not be orderable
    counter = itertools.count()

    # starts bypass try_improve
    for start in starts:
        heapq.heappush(fringe, (0, next(counter), start))
    if not fringe:
        raise ValueError("Dijkstra search requires at least one start node.")

    while fringe:
        cost, _, node = heapq.heappop(fringe)
        if g.is_end(node):
            return cost
        for edge_cost, child in g.neighbours(node):
            if edge_cost < 0:
                raise ValueError(
                    f"Negative edge cost {edge_cost} from {node!r} to {child!r}."
                )
            new_cost = cost + edge_cost
            if g.try_improve(child, new_cost):
                heapq.heappush(fringe, (new_cost, next(counter), child))
    raise UnreachableGoalError("Frontier exhausted without reaching an end node.")
