"""Console report for a HuffmanText result.

Pure rendering: returns strings/dicts, the CLI does the printing.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from huffman_text.core.codec_text import HuffmanText
from huffman_text.options_spec import DEFAULT_SECTIONS

EMPTY_MESSAGE = "The entered file has no content because it is empty"

_TITLES = {
    "content": "Entered text file's content: ",
    "freq": "Character frequencies:",
    "encoded": "Huffman code of the file's content: ",
    "codes": "Huffman tree codes for each individual character:",
    "decoded": "The file's content but decoded from its compressed Huffman binary code: ",
    "stats": "Stats:",
}


def show_char(c: str) -> str:
    if c.isprintable() and not c.isspace():
        return c
    return repr(c)


def ratio(result: HuffmanText) -> float:
    """Encoded bits over the 8-bit-per-character baseline (0.0 for empty text)."""
    if result.n == 0:
        return 0.0
    return result.nbits / (8 * result.n)


def _section_lines(name: str, result: HuffmanText) -> list[str]:
    if name == "content":
        return [result.text]
    if name == "freq":
        items = sorted(result.freq.items(), key=lambda kv: (-kv[1], kv[0]))
        return [f"{show_char(c)}: {f}" for c, f in items]
    if name == "encoded":
        return [result.bits]
    if name == "codes":
        return [f"{show_char(c)}: {result.codes[c]}" for c in sorted(result.codes)]
    if name == "decoded":
        return [result.decode()]
    if name == "stats":
        return [
            f"characters: {result.n}",
            f"distinct: {len(result.freq)}",
            f"encoded bits: {result.nbits}",
            f"8-bit baseline: {8 * result.n}",
            f"ratio: {ratio(result):.4f}",
        ]
    raise ValueError(f"sezione non supportata: {name!r}")


def render_report(result: HuffmanText, sections: Sequence[str] = DEFAULT_SECTIONS) -> str:
    if result.is_empty:
        return EMPTY_MESSAGE + "\n"

    blocks: list[str] = []
    for name in sections:
        lines = [_TITLES[name], *_section_lines(name, result)]
        blocks.append("\n".join(lines) + "\n")
    return "\n".join(blocks)


def render_codes(result: HuffmanText) -> str:
    return "".join(line + "\n" for line in _section_lines("codes", result))


def report_to_json(result: HuffmanText) -> dict[str, Any]:
    return {
        "n": result.n,
        "distinct": len(result.freq),
        "freq": dict(sorted(result.freq.items())),
        "codes": dict(sorted(result.codes.items())),
        "bits": result.bits,
        "nbits": result.nbits,
        "ratio": ratio(result),
        "decoded_ok": result.decode() == result.text,
    }
