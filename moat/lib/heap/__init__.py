"""
This library contains a binary heap with explicit integer priorities.

Payloads are stored alongside their priority, so they do not need to be
comparable. The `Heap` class is oriented by an `Order`: ``Order.MAX``
returns the highest priority first, ``Order.MIN`` the lowest.
`MaxHeap` and `MinHeap` are shortcuts for either.

Popping from an empty heap returns a default value instead of raising.
Iterating a heap drains it.
"""

from __future__ import annotations

from ._impl import PRIO_MAX as PRIO_MAX
from ._impl import PRIO_MIN as PRIO_MIN
from ._impl import Heap as Heap
from ._impl import HeapError as HeapError
from ._impl import HeapNode as HeapNode
from ._impl import MaxHeap as MaxHeap
from ._impl import MinHeap as MinHeap
from ._impl import Order as Order

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
