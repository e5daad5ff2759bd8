from __future__ import annotations

import heapq
import random

from huffman_text.core.builder import build_huffman_tree
from huffman_text.core.codes import build_code_table, encoded_length, is_prefix_code
from huffman_text.core.frequency import build_freq_table

# Golden vector: pins the tie-break contract.
ABRACADABRA_CODES = {"a": "0", "c": "100", "d": "101", "b": "110", "r": "111"}


def _optimal_cost(freqs: list[int]) -> int:
    """Reference Huffman cost: sum of all merge weights."""
    if len(freqs) <= 1:
        return sum(freqs)
    heap = list(freqs)
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        s = heapq.heappop(heap) + heapq.heappop(heap)
        cost += s
        heapq.heappush(heap, s)
    return cost


def test_none_root_gives_empty_table() -> None:
    assert build_code_table(None) == {}


def test_abracadabra_codes_vector() -> None:
    freq = build_freq_table("abracadabra")
    codes = build_code_table(build_huffman_tree(freq))
    assert codes == ABRACADABRA_CODES
    assert all(len(codes["a"]) <= len(c) for c in codes.values())
    assert encoded_length(freq, codes) == 23
    assert encoded_length(freq, codes) == _optimal_cost(list(freq.values()))


def test_singleton_gets_non_empty_code() -> None:
    codes = build_code_table(build_huffman_tree(build_freq_table("aaaa")))
    assert codes == {"a": "0"}
    assert is_prefix_code(codes)


def test_prefix_property_and_optimality_random() -> None:
    rng = random.Random(42)
    alphabet = "abcdefghijklmnopqrstuvwxyz0123456789 .,;"
    for _ in range(100):
        text = "".join(rng.choice(alphabet[: rng.randint(2, len(alphabet))]) for _ in range(rng.randint(2, 400)))
        freq = build_freq_table(text)
        codes = build_code_table(build_huffman_tree(freq))
        assert set(codes) == set(freq)
        assert all(codes.values())
        assert is_prefix_code(codes)
        if len(freq) > 1:
            assert encoded_length(freq, codes) == _optimal_cost(list(freq.values()))


def test_is_prefix_code_detects_violations() -> None:
    assert is_prefix_code({"a": "0", "b": "10", "c": "11"})
    assert not is_prefix_code({"a": "0", "b": "01"})
    assert not is_prefix_code({"a": "10", "b": "1", "c": "0"})
    assert not is_prefix_code({"a": ""})
