"""
Stoer-Wagner global minimum cut.

Given any two nodes s and t, a minimum cut of the graph either separates s from t,
or it is also a minimum cut of the graph with s and t contracted into one node. A
minimum cut phase finds a pair s, t together with a minimum s-t cut: grow a set A
from an arbitrary node, always adding the node most tightly connected to A. The last
two nodes added are s and t, and cutting t off from everything else is a minimum
s-t cut. Repeating phase and contraction until one node is left visits a global
minimum cut.
"""

from dataclasses import dataclass
from typing import FrozenSet, Hashable, Optional, Tuple

from tqdm.auto import tqdm

from puzzlegraph.mincut.contraction_graph import ContractionGraph, node_leaves
from puzzlegraph.mincut.max_priority_queue import MaxPriorityQueue
from puzzlegraph.utils.logging import log


class NoCutBelowThresholdError(RuntimeError):
    """
    Raised when the graph has no cut with weight at or below the requested threshold.
    """


@dataclass(frozen=True)
class MinCut:
    """
    A cut of a graph into two sides.

    :field weight: Total weight of the edges crossing the cut.
    :field side: The original nodes on one side of the cut.
    :field other_side: The original nodes on the other side.
    """

    weight: int
    side: FrozenSet[Hashable]
    other_side: FrozenSet[Hashable]

    @property
    def sizes(self) -> Tuple[int, int]:
        """
        Number of original nodes on each side.
        """
        return len(self.side), len(self.other_side)


def minimum_cut_phase(graph: ContractionGraph) -> Tuple[Hashable, Hashable, int]:
    """
    Orders the nodes by maximum adjacency, starting from the first node of the graph.

    :param graph: The graph, with at least two nodes. It is not modified.
    :return: ``(s, t, weight)`` where ``t`` is the last node added, ``s`` the one
        before it, and ``weight`` the total weight of the edges out of ``t``, which is
        the weight of a minimum s-t cut.
    """
    if len(graph) < 2:
        raise ValueError("A cut phase needs at least two nodes.")
    queue = MaxPriorityQueue()
    for node in graph.nodes():
        queue.push(node, 0)

    s = t = None
    weight = 0
    while queue:
        node, weight = queue.pop()
        for neighbour, edge_weight in graph.neighbours(node).items():
            queue.increase(neighbour, edge_weight)
        s, t = t, node
    return s, t, weight


def stoer_wagner(
    graph: ContractionGraph, threshold: Optional[int] = None, *, verbose: bool = False
) -> MinCut:
    """
    Finds a minimum cut of a connected, weighted, undirected graph.

    With a ``threshold``, the first phase cut of weight at most ``threshold`` is
    returned straight away. That cut is the global minimum whenever the minimum is
    known to be unique and at most ``threshold``. Without one, every phase is run and
    the lightest cut found is returned, earliest first on ties.

    :param graph: The graph to cut. It is copied, never modified.
    :param threshold: Accept the first cut with at most this weight.
    :param verbose: Show a progress bar over phases.
    :return: The cut, with both sides expressed as original nodes.

    :raises ValueError: If the graph has fewer than two nodes.
    :raises NoCutBelowThresholdError: If a threshold is given and no phase finds a cut
        of at most that weight.
    """
    if len(graph) < 2:
        raise ValueError("Cannot cut a graph with fewer than two nodes.")
    all_leaves = frozenset(leaf for node in graph.nodes() for leaf in node_leaves(node))
    graph = graph.copy()

    best = None
    pbar = tqdm(total=len(graph) - 1, disable=not verbose, leave=False)
    with pbar:
        while len(graph) > 1:
            s, t, weight = minimum_cut_phase(graph)
            pbar.update(1)
            pbar.set_description(f"Nodes: {len(graph)}, Phase cut: {weight}")
            if best is None or weight < best[0]:
                best = weight, frozenset(node_leaves(t))
            if threshold is not None and weight <= threshold:
                break
            graph.contract(s, t)

    weight, side = best
    if threshold is not None and weight > threshold:
        raise NoCutBelowThresholdError(
            f"Lightest cut has weight {weight}, above the threshold {threshold}."
        )
    if verbose:
        log(f"Found cut of weight {weight} into {len(side)} and {len(all_leaves) - len(side)}")
    return MinCut(weight, side, all_leaves - side)
