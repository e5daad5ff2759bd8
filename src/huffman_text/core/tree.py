from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# -------------------
# Nodi dell'albero Huffman
# -------------------
# Tre varianti, tutte immutabili: l'albero costruito una volta viene
# condiviso in sola lettura da encode e decode.


@dataclass(frozen=True)
class Leaf:
    freq: int
    char: str


@dataclass(frozen=True)
class Internal:
    """Merge di due sottoalberi: freq = left.freq + right.freq."""

    freq: int
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class SingletonRoot:
    """
    Radice sintetica per il caso di un solo carattere distinto.

    Ha un solo figlio (bit '0'), cosi' anche l'unico carattere ha un codice
    non vuoto. Compare solo come radice.
    """

    freq: int
    child: Leaf


Node = Union[Leaf, Internal, SingletonRoot]


def merge(first: Node, second: Node) -> Internal:
    return Internal(freq=first.freq + second.freq, left=first, right=second)


def wrap_singleton(leaf: Leaf) -> SingletonRoot:
    return SingletonRoot(freq=leaf.freq, child=leaf)


def iter_leaves(root: Node | None):
    """Leaves left-to-right (depth-first)."""
    if root is None:
        return
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Leaf):
            yield node
        elif isinstance(node, Internal):
            stack.append(node.right)
            stack.append(node.left)
        else:
            stack.append(node.child)


def tree_depth(root: Node | None) -> int:
    """Longest root-to-leaf path, in edges (0 for None or a bare leaf)."""
    if root is None or isinstance(root, Leaf):
        return 0
    if isinstance(root, SingletonRoot):
        return 1
    return 1 + max(tree_depth(root.left), tree_depth(root.right))


def check_tree(root: Node | None) -> None:
    """Raise ValueError if a frequency sum or a shape invariant is broken."""
    if root is None:
        return

    def walk(node: Node, is_root: bool) -> int:
        if isinstance(node, Leaf):
            if node.freq <= 0:
                raise ValueError(f"foglia {node.char!r} con freq non positiva: {node.freq}")
            return node.freq
        if isinstance(node, SingletonRoot):
            if not is_root:
                raise ValueError("SingletonRoot ammesso solo come radice")
            total = walk(node.child, False)
        else:
            total = walk(node.left, False) + walk(node.right, False)
        if node.freq != total:
            raise ValueError(f"freq nodo {node.freq} != somma foglie {total}")
        return total

    walk(root, True)
