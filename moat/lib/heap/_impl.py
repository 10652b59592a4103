"""
Array-backed binary heap.
"""

from __future__ import annotations

import logging
import operator
from enum import Enum

from attrs import define, field

from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

logger = logging.getLogger(__name__)

__all__ = [
    "PRIO_MAX",
    "PRIO_MIN",
    "Heap",
    "HeapError",
    "HeapNode",
    "MaxHeap",
    "MinHeap",
    "Order",
]

T = TypeVar("T")

# priorities are signed 32-bit integers
PRIO_MIN = -(2**31)
PRIO_MAX = 2**31 - 1


class HeapError(Exception):
    """
    The heap property is violated.

    Attribute ``index`` is the position of the offending child.
    """

    def __init__(self, index: int, msg: str | None = None):
        self.index = index
        super().__init__(msg or f"heap property violated at index {index}")


class Order(Enum):
    """
    Orientation of a heap.
    """

    MAX = "max"
    MIN = "min"

    @property
    def before(self) -> Callable[[int, int], bool]:
        """
        Returns a predicate that's true when its first argument belongs
        strictly closer to the root than its second.
        """
        return operator.gt if self is Order.MAX else operator.lt


@define(eq=False)
class HeapNode:
    """
    A payload and its priority.
    """

    payload: T = field()
    priority: int = field()


def _check_priority(priority) -> None:
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise TypeError(f"Priority must be an int, not {type(priority).__name__}.")
    if not PRIO_MIN <= priority <= PRIO_MAX:
        raise ValueError(f"Priority {priority} is outside the 32-bit range.")


class Heap(Generic[T]):
    """
    A priority-ordered container.

    Items are added with `push` and an integer priority. `pop` removes
    the item whose priority is most extreme in the heap's `Order`.
    Equal priorities are returned in no particular order.

    Iterating over a heap drains it. Heaps cannot be copied.

    This class does no locking.
    """

    def __init__(self, order: Order | str = Order.MAX, items: Iterable[tuple[T, int]] = ()):
        """
        Sets up an empty heap, optionally filled with ``(payload, priority)``
        pairs from `items`.

        `order` may be an `Order` or its value, i.e. ``"max"`` or ``"min"``.
        """
        self._order = Order(order)
        self._before = self._order.before
        self._heap: list[HeapNode] = []

        for payload, priority in items:
            self.push(payload, priority)

    @property
    def order(self) -> Order:
        "the heap's orientation"
        return self._order

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)

    def __repr__(self):
        return f"<{type(self).__name__}:{self._order.name} n={len(self._heap)}>"

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} objects cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} objects cannot be copied")

    def push(self, payload: T, priority: int) -> None:
        """
        Adds `payload` with the given `priority`.

        Raises `TypeError` if the priority isn't an integer, `ValueError`
        if it doesn't fit in 32 bits.
        """
        _check_priority(priority)
        self._heap.append(HeapNode(payload, priority))
        self._sift_up(len(self._heap) - 1)

    def pop(self, default: T | None = None) -> T | None:
        """
        Removes and returns the payload with the most extreme priority.

        Returns `default` if the heap is empty. Pass a sentinel if
        ``None`` is a valid payload.
        """
        heap = self._heap
        if not heap:
            return default
        if len(heap) == 1:
            return heap.pop().payload

        heap[0], heap[-1] = heap[-1], heap[0]
        node = heap.pop()
        self._sift_down(0)
        return node.payload

    def peek(self, default: T | None = None) -> T | None:
        """
        Returns the payload `pop` would return, without removing it.
        """
        if not self._heap:
            return default
        return self._heap[0].payload

    def peek_priority(self, default: int | None = None) -> int | None:  # noqa: D102
        if not self._heap:
            return default
        return self._heap[0].priority

    def clear(self) -> None:
        """
        Discards all items.
        """
        n = len(self._heap)
        self._heap.clear()
        logger.debug("%r: cleared %d items", self, n)

    def drain(self) -> Iterator[T]:
        """
        Returns an iterator that pops items until the heap is empty.

        Items pushed while the iterator is active are returned by later
        steps. The iterator cannot be restarted.
        """
        while self._heap:
            yield self.pop()
        logger.debug("%r: drained", self)

    def __iter__(self) -> Iterator[T]:
        return self.drain()

    def check(self) -> None:
        """
        Verifies the heap property.

        Raises `HeapError` at the first child that belongs before its
        parent.
        """
        heap = self._heap
        before = self._before
        for idx in range(1, len(heap)):
            parent = (idx - 1) // 2
            if before(heap[idx].priority, heap[parent].priority):
                raise HeapError(
                    idx,
                    f"priority {heap[idx].priority} at {idx} "
                    f"is {self._order.name} of parent {heap[parent].priority} at {parent}",
                )

    def _sift_up(self, idx: int) -> None:
        heap = self._heap
        before = self._before
        prio = heap[idx].priority

        while idx > 0:
            parent = (idx - 1) // 2
            if not before(prio, heap[parent].priority):
                break
            heap[idx], heap[parent] = heap[parent], heap[idx]
            idx = parent

    def _sift_down(self, idx: int) -> None:
        heap = self._heap
        before = self._before
        n = len(heap)

        while True:
            left = 2 * idx + 1
            right = left + 1
            best = idx

            if left < n and before(heap[left].priority, heap[best].priority):
                best = left
            # compared against the left child if that one won
            if right < n and before(heap[right].priority, heap[best].priority):
                best = right

            if best == idx:
                break
            heap[idx], heap[best] = heap[best], heap[idx]
            idx = best


class MaxHeap(Heap[T]):
    """
    A heap that returns the highest priority first.
    """

    def __init__(self, items: Iterable[tuple[T, int]] = ()):
        super().__init__(Order.MAX, items)


class MinHeap(Heap[T]):
    """
    A heap that returns the lowest priority first.
    """

    def __init__(self, items: Iterable[tuple[T, int]] = ()):
        super().__init__(Order.MIN, items)
