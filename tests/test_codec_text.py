from __future__ import annotations

import random

import pytest

from huffman_text.core.builder import build_huffman_tree
from huffman_text.core.codec_text import CodecText, decode_bits, encode_text, huffman_text_core
from huffman_text.core.codes import build_code_table
from huffman_text.core.frequency import build_freq_table
from huffman_text.core.tree import Internal, Leaf
from huffman_text.errors import EmptyInput, MalformedEncoding, UnknownSymbol

ABRACADABRA_BITS = "01101110100010101101110"


def _roundtrip(text: str) -> str:
    root = build_huffman_tree(build_freq_table(text))
    bits = encode_text(text, build_code_table(root))
    return decode_bits(root, bits)


def test_abracadabra_bits_vector() -> None:
    res = huffman_text_core("abracadabra")
    assert res.bits == ABRACADABRA_BITS
    assert res.nbits == 23
    assert res.decode() == "abracadabra"


@pytest.mark.parametrize(
    "text",
    [
        "a",
        "ab",
        "aaaa",
        "abracadabra",
        "HELLO 123\nRIGA ARTICOLO: vite M3 qty=10 prezzo=1.20\n",
        "Ω\nλ\n∂ unicø∂e",
        "\x00\x01 \t",
    ],
)
def test_roundtrip_examples(text: str) -> None:
    assert _roundtrip(text) == text


@pytest.mark.p1
def test_roundtrip_random() -> None:
    rng = random.Random(7)
    for _ in range(200):
        k = rng.randint(1, 60)
        alphabet = [chr(rng.randint(32, 0x3000)) for _ in range(k)]
        text = "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 500)))
        assert _roundtrip(text) == text


def test_singleton_roundtrip_and_bits() -> None:
    res = huffman_text_core("aaaa")
    assert res.codes == {"a": "0"}
    assert res.bits == "0000"
    assert res.decode() == "aaaa"


def test_empty_input_short_circuits() -> None:
    res = huffman_text_core("")
    assert res.freq == {}
    assert res.root is None
    assert res.codes == {}
    assert res.bits == ""
    assert res.decode() == ""
    assert encode_text("", {}) == ""
    assert decode_bits(None, "") == ""


def test_bits_without_tree_is_malformed() -> None:
    with pytest.raises(MalformedEncoding):
        decode_bits(None, "01")


def test_unknown_symbol_on_encode() -> None:
    codes = build_code_table(build_huffman_tree(build_freq_table("abc")))
    with pytest.raises(UnknownSymbol):
        encode_text("abz", codes)


def test_truncated_path_is_reported() -> None:
    # "abccc": a,b merge first, then (ab) with c -> root.left is internal
    root = build_huffman_tree(build_freq_table("abccc"))
    assert isinstance(root, Internal)
    assert isinstance(root.left, Internal)
    with pytest.raises(MalformedEncoding):
        decode_bits(root, "0")


def test_truncated_after_valid_prefix_is_reported() -> None:
    res = huffman_text_core("abracadabra")
    with pytest.raises(MalformedEncoding):
        res.decode(ABRACADABRA_BITS[:-2])


def test_invalid_symbol_is_reported() -> None:
    res = huffman_text_core("abracadabra")
    with pytest.raises(MalformedEncoding):
        res.decode("0120")
    with pytest.raises(MalformedEncoding):
        res.decode("0 1")


def test_right_step_from_singleton_root_is_reported() -> None:
    res = huffman_text_core("aaaa")
    with pytest.raises(MalformedEncoding):
        res.decode("01")


def test_tree_is_shared_and_unchanged_by_use() -> None:
    res = huffman_text_core("mississippi")
    before = res.root
    assert res.decode() == "mississippi"
    assert encode_text("sip", res.codes)
    assert res.root is before
    assert res.root == build_huffman_tree(build_freq_table("mississippi"))


def test_codec_text_requires_content() -> None:
    c = CodecText()
    with pytest.raises(EmptyInput):
        c.encode("")
    with pytest.raises(EmptyInput):
        c.decode("", "0")
    assert c.encode("abracadabra") == ABRACADABRA_BITS
    assert c.decode("abracadabra", "0110") == "ab"
    assert c.weighted_length("abracadabra") == 23


def test_decode_against_plain_leaf_pair() -> None:
    root = Internal(3, Leaf(1, "x"), Leaf(2, "y"))
    assert decode_bits(root, "0110") == "xyyx"
