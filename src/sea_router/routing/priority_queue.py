"""Indexed binary min-heap keyed by node id, for A* open sets."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(slots=True)
class QueueEntry:
    node_id: int
    f_cost: float
    g_cost: float


class IndexedPriorityQueue:
    """Min-heap ordered by ``f_cost`` with at most one entry per node id.

    A ``node_id -> heap index`` map gives O(1) membership tests and
    O(log n) decrease-key through ``update``.
    """

    def __init__(self) -> None:
        self._heap: List[QueueEntry] = []
        self._index: Dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def push(self, entry: QueueEntry) -> None:
        """Insert an entry; an entry for a node already queued is updated in place."""
        if entry.node_id in self._index:
            self.update(entry.node_id, entry.f_cost, entry.g_cost)
            return
        self._heap.append(entry)
        index = len(self._heap) - 1
        self._index[entry.node_id] = index
        self._sift_up(index)

    def pop(self) -> Optional[QueueEntry]:
        """Remove and return the entry with the lowest f-cost, None when empty."""
        if not self._heap:
            return None
        last = self._heap.pop()
        if not self._heap:
            del self._index[last.node_id]
            return last

        root = self._heap[0]
        self._heap[0] = last
        self._index[last.node_id] = 0
        del self._index[root.node_id]
        self._sift_down(0)
        return root

    def peek(self) -> Optional[QueueEntry]:
        return self._heap[0] if self._heap else None

    def update(self, node_id: int, f_cost: float, g_cost: float) -> bool:
        """Rewrite the costs of a queued node. Returns False if the node is not queued."""
        index = self._index.get(node_id)
        if index is None:
            return False

        entry = self._heap[index]
        old_f = entry.f_cost
        entry.f_cost = f_cost
        entry.g_cost = g_cost

        if f_cost < old_f:
            self._sift_up(index)
        elif f_cost > old_f:
            self._sift_down(index)
        return True

    def has(self, node_id: int) -> bool:
        return node_id in self._index

    def is_empty(self) -> bool:
        return not self._heap

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index].f_cost >= heap[parent].f_cost:
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and heap[left].f_cost < heap[smallest].f_cost:
                smallest = left
            if right < size and heap[right].f_cost < heap[smallest].f_cost:
                smallest = right
            if smallest == index:
                break
            self._swap(index, smallest)
            index = smallest

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i].node_id] = i
        self._index[heap[j].node_id] = j
