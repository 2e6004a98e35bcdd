from typing import Dict, Hashable, Mapping, Optional, TypeVar

N = TypeVar("N", bound=Hashable)


def longest_path(
    edges: Mapping[N, Mapping[N, int]], start: N, end: N
) -> Optional[int]:
    """
    Finds the greatest total weight of a simple path (no repeated node) from
    ``start`` to ``end``, by depth-first backtracking over every simple path.

    This is exponential in the size of the graph, so it is only practical once a
    maze has been compressed to its junctions.

    :param edges: ``edges[u][v]`` is the weight of the edge from ``u`` to ``v``. Nodes
        missing from ``edges`` have no outgoing edges.
    :param start: The node to start from.
    :param end: The node to reach.
    :return: The longest path weight, or None if ``end`` cannot be reached.
    """
    best = None
    on_path: Dict[N, bool] = {}
    # (node, distance, leaving); a node is pushed a second time to leave it
    stack = [(start, 0, False)]
    while stack:
        node, distance, leaving = stack.pop()
        if leaving:
            del on_path[node]
            continue
        if node == end:
            if best is None or distance > best:
                best = distance
            continue
        on_path[node] = True
        stack.append((node, distance, True))
        for neighbour, weight in edges.get(node, {}).items():
            if neighbour not in on_path:
                stack.append((neighbour, distance + weight, False))
    return best
