from __future__ import annotations

from collections.abc import Iterable, Mapping


def build_freq_table(chars: Iterable[str]) -> dict[str, int]:
    """
    chars -> {carattere: occorrenze}

    Ordine delle chiavi = prima occorrenza (non fa parte del contratto).
    Input vuoto -> {}.
    """
    freq: dict[str, int] = {}
    for c in chars:
        if not isinstance(c, str) or len(c) != 1:
            raise ValueError(f"build_freq_table: atteso un singolo carattere, trovato {c!r}")
        freq[c] = freq.get(c, 0) + 1
    return freq


def check_freq_table(freq: Mapping[str, int]) -> None:
    for c, f in freq.items():
        if not isinstance(c, str) or len(c) != 1:
            raise ValueError(f"tabella frequenze: chiave non valida {c!r}")
        if not isinstance(f, int) or isinstance(f, bool) or f <= 0:
            raise ValueError(f"tabella frequenze: freq non positiva per {c!r}: {f!r}")


def total_count(freq: Mapping[str, int]) -> int:
    return sum(freq.values())
