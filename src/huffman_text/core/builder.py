from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, Optional

from .forest import Forest, build_forest
from .tree import Leaf, Node, merge, wrap_singleton

MergeKind = Literal["empty", "normal", "singleton"]


@dataclass(frozen=True)
class MergeResult:
    kind: MergeKind
    root: Optional[Node]
    merges: int  # numero di nodi interni creati


def merge_forest(forest: Forest) -> MergeResult:
    """
    Svuota la foresta fondendo sempre i due nodi di freq minima.

    Il primo estratto diventa il figlio sinistro, il secondo il destro.
    """
    if len(forest) == 0:
        return MergeResult(kind="empty", root=None, merges=0)

    # Caso speciale: un solo simbolo => radice sintetica con il solo figlio sinistro
    if len(forest) == 1:
        only = forest.pop_min()
        if not isinstance(only, Leaf):
            raise ValueError("merge_forest: foresta con un solo nodo non-foglia")
        return MergeResult(kind="singleton", root=wrap_singleton(only), merges=0)

    merges = 0
    while len(forest) > 1:
        first = forest.pop_min()
        second = forest.pop_min()
        forest.push(merge(first, second))
        merges += 1

    return MergeResult(kind="normal", root=forest.pop_min(), merges=merges)


def build_huffman_tree(freq: Mapping[str, int]) -> Optional[Node]:
    """freq -> radice dell'albero (None se freq e' vuota)."""
    return merge_forest(build_forest(freq)).root
