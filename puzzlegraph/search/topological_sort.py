from collections import deque
from typing import Dict, Hashable, Iterable, List, Tuple, TypeVar

N = TypeVar("N", bound=Hashable)


class CycleError(ValueError):
    """
    Raised when a directed graph has no topological order.

    :field remaining: The nodes that could not be ordered.
    """

    def __init__(self, remaining):
        super().__init__(f"Graph contains a cycle through {sorted(map(repr, remaining))}")
        self.remaining = remaining


def topological_sort(nodes: Iterable[N], edges: Iterable[Tuple[N, N]]) -> List[N]:
    """
    Kahn's algorithm: repeatedly emit a node with no unprocessed predecessors.

    Nodes with no predecessors are emitted in the order they are given in ``nodes``,
    and successors become ready in edge order, so the result is deterministic.

    :param nodes: All nodes of the graph. Endpoints of ``edges`` not listed here are
        added after the listed ones.
    :param edges: Directed edges ``(u, v)``, meaning ``u`` must come before ``v``.
    :return: The nodes in a topological order.

    :raises CycleError: If the graph has a cycle.
    """
    in_degree: Dict[N, int] = {node: 0 for node in nodes}
    successors: Dict[N, List[N]] = {node: [] for node in in_degree}
    for u, v in edges:
        for endpoint in (u, v):
            if endpoint not in in_degree:
                in_degree[endpoint] = 0
                successors[endpoint] = []
        successors[u].append(v)
        in_degree[v] += 1

    queue = deque(node for node, degree in in_degree.items() if degree == 0)
    result: List[N] = []
    while queue:
        node = queue.popleft()
        result.append(node)
        for successor in successors[node]:
            in_degree[successor] -= 1
            if in_degree[successor] == 0:
                queue.append(successor)

    if len(result) != len(in_degree):
        processed = set(result)
        raise CycleError({node for node in in_degree if node not in processed})
    return result
