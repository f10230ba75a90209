"""Indexed binary min-heap with decrease-key.

The queue holds at most one live item per vertex.  Items live in a plain
list ordered as a binary heap; a dense ``position`` list maps each vertex to
its current heap slot (``-1`` when absent) so that membership tests and
priority decreases run without scanning the heap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from utils.errors import DuplicateQueueInsert, QueueUnderflow

__all__ = ['PriorityQueueItem', 'IndexedPriorityQueue']

_ABSENT = -1


@dataclass
class PriorityQueueItem:
    """Queue entry for one vertex; ``index`` is its heap slot."""

    vertex: int
    distance: float
    index: int = _ABSENT


class IndexedPriorityQueue:
    """Min-priority queue keyed by vertex index in ``0..capacity-1``.

    Ties on equal distances are broken only by heap layout, which depends
    solely on the order of operations, so a fixed sequence of calls always
    pops vertices in the same order.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._heap: List[PriorityQueueItem] = []
        self._position: List[int] = [_ABSENT] * capacity

    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, vertex: int) -> bool:
        return self.contains(vertex)

    def is_empty(self) -> bool:
        return not self._heap

    def contains(self, vertex: int) -> bool:
        self._check_vertex(vertex)
        return self._position[vertex] != _ABSENT

    def distance_of(self, vertex: int) -> Optional[float]:
        """Current priority of ``vertex`` or ``None`` when it is not queued."""
        if not self.contains(vertex):
            return None
        return self._heap[self._position[vertex]].distance

    # ------------------------------------------------------------------
    def push(self, vertex: int, distance: float) -> PriorityQueueItem:
        if self.contains(vertex):
            raise DuplicateQueueInsert(f"vertex {vertex} is already queued")
        item = PriorityQueueItem(vertex=vertex, distance=distance, index=len(self._heap))
        self._heap.append(item)
        self._position[vertex] = item.index
        self._sift_up(item.index)
        return item

    def decrease_or_insert(self, vertex: int, distance: float) -> bool:
        """Lower the priority of ``vertex`` or queue it if absent.

        A live item only changes when ``distance`` is strictly smaller than
        its current priority.  Returns ``True`` if the queue changed.
        """
        if not self.contains(vertex):
            self.push(vertex, distance)
            return True
        item = self._heap[self._position[vertex]]
        if not distance < item.distance:
            return False
        item.distance = distance
        self._sift_up(item.index)
        return True

    def peek_min(self) -> PriorityQueueItem:
        if not self._heap:
            raise QueueUnderflow("peek on an empty priority queue")
        return self._heap[0]

    def pop_min(self) -> PriorityQueueItem:
        if not self._heap:
            raise QueueUnderflow("pop on an empty priority queue")
        last = len(self._heap) - 1
        self._swap(0, last)
        item = self._heap.pop()
        self._position[item.vertex] = _ABSENT
        item.index = _ABSENT
        if self._heap:
            self._sift_down(0)
        return item

    # ------------------------------------------------------------------
    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.capacity:
            raise IndexError(f"vertex {vertex} outside 0..{self.capacity - 1}")

    def _less(self, i: int, j: int) -> bool:
        return self._heap[i].distance < self._heap[j].distance

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        heap[i].index = i
        heap[j].index = j
        self._position[heap[i].vertex] = i
        self._position[heap[j].vertex] = j

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if not self._less(i, parent):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        n = len(self._heap)
        while True:
            smallest = i
            left = 2 * i + 1
            right = left + 1
            if left < n and self._less(left, smallest):
                smallest = left
            if right < n and self._less(right, smallest):
                smallest = right
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest
