from __future__ import annotations

import heapq
import itertools
from collections.abc import Mapping

from .frequency import check_freq_table
from .tree import Leaf, Node


class Forest:
    """
    Min-heap of tree roots ordered by (freq, arrival).

    Ties on freq are broken by arrival order: a node pushed earlier pops
    first. Merged nodes always arrive after everything already queued.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Node]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, node: Node) -> None:
        heapq.heappush(self._heap, (node.freq, next(self._counter), node))

    def pop_min(self) -> Node:
        if not self._heap:
            raise IndexError("pop_min da una foresta vuota")
        return heapq.heappop(self._heap)[2]

    def peek_min(self) -> Node:
        if not self._heap:
            raise IndexError("peek_min da una foresta vuota")
        return self._heap[0][2]


def build_forest(freq: Mapping[str, int]) -> Forest:
    # Foglie inserite per (freq, char): la foresta dipende solo dal multiset,
    # non dall'ordine del dict.
    check_freq_table(freq)
    forest = Forest()
    for c, f in sorted(freq.items(), key=lambda kv: (kv[1], kv[0])):
        forest.push(Leaf(freq=f, char=c))
    return forest
