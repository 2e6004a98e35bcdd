import heapq
import itertools
from typing import Dict, Hashable, Tuple

from puzzlegraph.utils.documentation import internal_only


@internal_only
class MaxPriorityQueue:
    """
    A max-priority queue whose priorities can only be increased. Increasing pushes a
    fresh heap entry rather than updating in place; entries that no longer match the
    item's current priority are skipped when popped.

    Ties are broken by the order in which items were first pushed.
    """

    def __init__(self):
        self._heap: list = []
        self._priority: Dict[Hashable, int] = {}
        self._order: Dict[Hashable, int] = {}
        self._counter = itertools.count()

    def push(self, item, priority: int):
        assert item not in self._priority, f"{item!r} is already queued."
        self._priority[item] = priority
        self._order[item] = next(self._counter)
        heapq.heappush(self._heap, (-priority, self._order[item], item))

    def increase(self, item, amount: int):
        """
        Add ``amount`` to the item's priority. Items no longer queued are ignored.
        """
        if item not in self._priority:
            return
        self._priority[item] += amount
        heapq.heappush(self._heap, (-self._priority[item], self._order[item], item))

    def pop(self) -> Tuple[Hashable, int]:
        """
        Remove and return the item with the highest priority, and that priority.
        """
        while self._heap:
            negative_priority, _, item = heapq.heappop(self._heap)
            if self._priority.get(item) == -negative_priority:
                del self._priority[item]
                return item, -negative_priority
        raise IndexError("pop from an empty priority queue")

    def __len__(self) -> int:
        return len(self._priority)

    def __contains__(self, item) -> bool:
        return item in self._priority
