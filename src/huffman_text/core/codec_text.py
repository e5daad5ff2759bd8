from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Dict, Optional

from huffman_text.errors import EmptyInput, MalformedEncoding, UnknownSymbol

from .builder import build_huffman_tree
from .codes import build_code_table, encoded_length
from .frequency import build_freq_table
from .tree import Internal, Leaf, Node, SingletonRoot


def encode_text(chars: Iterable[str], codes: Mapping[str, str]) -> str:
    """chars -> concatenazione dei codici, nell'ordine del testo."""
    parts: list[str] = []
    for c in chars:
        try:
            parts.append(codes[c])
        except KeyError:
            raise UnknownSymbol(f"carattere senza codice nella tabella: {c!r}") from None
    return "".join(parts)


def _step(node: Node, bit: str, pos: int) -> Node:
    if isinstance(node, Internal):
        return node.left if bit == "0" else node.right
    if isinstance(node, SingletonRoot):
        if bit == "1":
            raise MalformedEncoding(f"bit {pos}: '1' dalla radice a simbolo singolo (nessun figlio destro)")
        return node.child
    raise MalformedEncoding(f"bit {pos}: cursore su una foglia senza figli")


def decode_bits(root: Optional[Node], encoded: str) -> str:
    """
    Ricostruisce il testo camminando l'albero bit per bit.

    Errori (MalformedEncoding):
      - simbolo diverso da '0'/'1'
      - passo verso un figlio inesistente
      - stringa che finisce a meta' di un codice
    """
    if root is None:
        if encoded:
            raise MalformedEncoding("bitstring non vuota ma nessun albero (testo vuoto)")
        return ""

    out: list[str] = []
    node = root
    for pos, bit in enumerate(encoded):
        if bit != "0" and bit != "1":
            raise MalformedEncoding(f"bit {pos}: simbolo non valido {bit!r}")
        node = _step(node, bit, pos)
        if isinstance(node, Leaf):
            out.append(node.char)
            node = root

    if node is not root:
        raise MalformedEncoding(
            f"bitstring troncata: finisce a meta' di un codice dopo {len(out)} caratteri"
        )
    return "".join(out)


# -------------------
# Sessione completa: albero costruito una sola volta
# -------------------


@dataclass(frozen=True)
class HuffmanText:
    text: str
    freq: Dict[str, int]
    root: Optional[Node]
    codes: Dict[str, str]
    bits: str

    @property
    def n(self) -> int:
        return len(self.text)

    @property
    def nbits(self) -> int:
        return len(self.bits)

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def decode(self, encoded: str | None = None) -> str:
        return decode_bits(self.root, self.bits if encoded is None else encoded)


def huffman_text_core(text: str) -> HuffmanText:
    """text -> (freq, root, codes, bits), albero condiviso da encode e decode."""
    freq = build_freq_table(text)
    root = build_huffman_tree(freq)
    codes = build_code_table(root)
    bits = encode_text(text, codes)
    return HuffmanText(text=text, freq=freq, root=root, codes=codes, bits=bits)


class CodecText:
    def analyze(self, text: str) -> HuffmanText:
        return huffman_text_core(text)

    def require_content(self, text: str) -> HuffmanText:
        result = huffman_text_core(text)
        if result.is_empty:
            raise EmptyInput("il testo non ha contenuto: niente da codificare")
        return result

    def encode(self, text: str) -> str:
        return self.require_content(text).bits

    def decode(self, source_text: str, encoded: str) -> str:
        """Rebuild the tree from the source text, then decode `encoded` against it."""
        return self.require_content(source_text).decode(encoded)

    def weighted_length(self, text: str) -> int:
        result = huffman_text_core(text)
        return encoded_length(result.freq, result.codes)
