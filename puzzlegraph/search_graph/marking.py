from typing import Callable, Dict, Generic, Hashable, Iterator, Optional, Set, TypeVar

N = TypeVar("N")


class MarkSet(Generic[N]):
    """
    A set of visited nodes, usable as the ``mark`` of a
    :class:`BreadthFirstSearchGraph`.
    """

    def __init__(self):
        self._marked: Set[N] = set()

    def mark(self, node: N) -> bool:
        """
        Add the node to the set. Returns True iff it was not already present.
        """
        if node in self._marked:
            return False
        self._marked.add(node)
        return True

    def __contains__(self, node: N) -> bool:
        return node in self._marked

    def __len__(self) -> int:
        return len(self._marked)

    def __iter__(self) -> Iterator[N]:
        return iter(self._marked)


class BestCostTable(Generic[N]):
    """
    Best known cost per state, usable as the ``try_improve`` of a
    :class:`WeightedSearchGraph` when states are compared by plain cost.

    :param key: Projection from a node to the slot its cost is recorded under. Nodes
        with the same key compete for the same slot. Defaults to the node itself.
    """

    def __init__(self, key: Optional[Callable[[N], Hashable]] = None):
        self._key = key if key is not None else (lambda node: node)
        self._best: Dict[Hashable, int] = {}

    def try_improve(self, node: N, cost: int) -> bool:
        """
        Record ``cost`` for the node if nothing is recorded yet or ``cost`` is strictly
        lower than the recorded cost. Returns whether it was recorded.
        """
        slot = self._key(node)
        existing = self._best.get(slot)
        if existing is not None and existing <= cost:
            return False
        self._best[slot] = cost
        return True

    def get(self, node: N) -> Optional[int]:
        """
        The best cost recorded for the node, or None if it was never reached.
        """
        return self._best.get(self._key(node))

    def __contains__(self, node: N) -> bool:
        return self._key(node) in self._best

    def __len__(self) -> int:
        return len(self._best)
