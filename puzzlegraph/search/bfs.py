from collections import deque
from typing import TypeVar

from puzzlegraph.search_graph.search_graph import BreadthFirstSearchGraph

N = TypeVar("N")


def bfs(g: BreadthFirstSearchGraph, start: N) -> int:
    """
    Performs a breadth-first traversal of the given search graph, visiting every node
    reachable from ``start`` exactly once. A node is enqueued only when ``g.mark``
    reports it as newly marked, so ``mark`` is both the visited-set and the dedup guard.

    Infinite graphs never terminate; the graph must bound itself.

    :param g: Search graph to traverse.
    :param start: The node to start from.
    :return: The number of nodes visited.

    :raises AssertionError: If ``start`` is already marked.
    """
    assert g.mark(start), f"Start node {start!r} is already marked."
    queue = deque([start])
    visited = 1
    while queue:
        node = queue.popleft()
        for child in g.neighbours(node):
            if g.mark(child):
                queue.append(child)
                visited += 1
    return visited
