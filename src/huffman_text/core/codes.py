from __future__ import annotations

from collections.abc import Mapping
from typing import Dict, Optional

from .tree import Internal, Leaf, Node


def build_code_table(root: Optional[Node]) -> Dict[str, str]:
    """radice -> {carattere: percorso '0'/'1'} ('0' = sinistra, '1' = destra)."""
    codes: Dict[str, str] = {}
    if root is None:
        return codes

    def dfs(node: Node, path: str) -> None:
        # Foglia
        if isinstance(node, Leaf):
            codes[node.char] = path
            return
        if isinstance(node, Internal):
            dfs(node.left, path + "0")
            dfs(node.right, path + "1")
            return
        # SingletonRoot: unico figlio a sinistra
        dfs(node.child, path + "0")

    dfs(root, "")
    return codes


def is_prefix_code(codes: Mapping[str, str]) -> bool:
    # Dopo l'ordinamento, se un codice e' prefisso di un altro lo e' del successivo.
    ordered = sorted(codes.values())
    if any(not c for c in ordered):
        return False
    for a, b in zip(ordered, ordered[1:]):
        if b.startswith(a):
            return False
    return True


def encoded_length(freq: Mapping[str, int], codes: Mapping[str, str]) -> int:
    """Lunghezza in bit del testo codificato (somma freq * len(codice))."""
    return sum(f * len(codes[c]) for c, f in freq.items())
