from __future__ import annotations

from dataclasses import dataclass
from typing import Generic

from .core.types import N as Node


@dataclass
class _QueueItem(Generic[Node]):
    node: Node
    priority: float
    seq: int
    index: int = -1


class IndexedPriorityQueue(Generic[Node]):
    """Binary min-heap with a node index for in-place decrease-key.

    Every item knows its slot in the heap array and the slot is rewritten on
    each swap, so ``decrease_priority`` finds a node in O(1) and repairs the
    heap in O(log n). Equal priorities leave in insertion order.
    """

    def __init__(self) -> None:
        self._heap: list[_QueueItem[Node]] = []
        self._items: dict[Node, _QueueItem[Node]] = {}
        self._counter = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, node: Node) -> bool:
        return node in self._items

    def empty(self) -> bool:
        return not self._heap

    def insert(self, node: Node, priority: float) -> None:
        if node in self._items:
            raise KeyError(f"{node!r} is already queued")
        item = _QueueItem(node, float(priority), self._counter, len(self._heap))
        self._counter += 1
        self._heap.append(item)
        self._items[node] = item
        self._sift_up(item.index)

    def extract_min(self) -> tuple[Node, float]:
        if not self._heap:
            raise IndexError("extract_min from an empty queue")
        last = self._heap.pop()
        if self._heap:
            top = self._heap[0]
            self._heap[0] = last
            last.index = 0
            self._sift_down(0)
        else:
            top = last
        del self._items[top.node]
        top.index = -1
        return top.node, top.priority

    def peek(self) -> tuple[Node, float]:
        if not self._heap:
            raise IndexError("peek at an empty queue")
        top = self._heap[0]
        return top.node, top.priority

    def priority(self, node: Node) -> float:
        return self._items[node].priority

    def decrease_priority(self, node: Node, priority: float) -> None:
        """Set ``node``'s priority and restore heap order.

        A value that is not lower is still applied; the item then moves down
        instead of up.
        """
        item = self._items.get(node)
        if item is None:
            raise KeyError(f"{node!r} is not queued")
        item.priority = float(priority)
        self._sift_up(item.index)
        self._sift_down(item.index)

    def snapshot(self) -> list[tuple[Node, float]]:
        return [(it.node, it.priority) for it in self._heap]

    def clear(self) -> None:
        for it in self._heap:
            it.index = -1
        self._heap.clear()
        self._items.clear()
        self._counter = 0

    def _less(self, i: int, j: int) -> bool:
        a, b = self._heap[i], self._heap[j]
        return (a.priority, a.seq) < (b.priority, b.seq)

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        heap[i].index = i
        heap[j].index = j

    def _sift_up(self, pos: int) -> None:
        while pos > 0:
            parent = (pos - 1) >> 1
            if not self._less(pos, parent):
                break
            self._swap(pos, parent)
            pos = parent

    def _sift_down(self, pos: int) -> None:
        n = len(self._heap)
        while True:
            child = 2 * pos + 1
            if child >= n:
                break
            right = child + 1
            if right < n and self._less(right, child):
                child = right
            if not self._less(child, pos):
                break
            self._swap(pos, child)
            pos = child
