"""huffman-text CLI.

This is the stable CLI entrypoint (console-script: ``huffman-text``).

UX policy:
  - Output goes to stdout, diagnostics to stderr with the ``[huffman-text]`` prefix.
  - The tree is never persisted: ``decode`` rebuilds it from the source text.
  - ``interactive`` is the menu loop: enter a path, ``0`` quits.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import IO

from huffman_text.core.codec_text import CodecText, huffman_text_core
from huffman_text.errors import EXIT_GENERIC, HuffmanTextError, MissingResource, UsageError
from huffman_text.options_spec import ALL_SECTIONS, ReportOptionsV1, load_options_spec
from huffman_text.reader import read_text_file
from huffman_text.report import render_codes, render_report, report_to_json

QUIT_SENTINEL = "0"

PROMPT = (
    "Enter in the file path of the text file that you want to compress "
    "or enter the digit 0 to quit the program:"
)


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")


def _add_read_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--options",
        default=None,
        help="Report options spec (JSON). Use '@file.json' to load from file, or pass JSON inline.",
    )
    p.add_argument("--encoding", default=None, help="Input text encoding (default: utf-8)")
    p.add_argument(
        "--keep-newlines",
        action="store_true",
        default=None,
        help="Keep line terminators (default: lines are joined without them)",
    )


def _resolve_options(ns: argparse.Namespace) -> ReportOptionsV1:
    # precedence: CLI flag > options spec > defaults
    spec = load_options_spec(ns.options) if getattr(ns, "options", None) else ReportOptionsV1()
    sections = spec.sections
    if getattr(ns, "sections", None):
        wanted = [s.strip().lower() for s in ns.sections.split(",") if s.strip()]
        bad = [s for s in wanted if s not in ALL_SECTIONS]
        if bad:
            raise UsageError(f"--sections: sezioni non supportate: {', '.join(bad)}")
        sections = tuple(s for s in ALL_SECTIONS if s in wanted)
    return ReportOptionsV1(
        name=spec.name,
        encoding=getattr(ns, "encoding", None) or spec.encoding,
        keep_newlines=True if getattr(ns, "keep_newlines", None) else spec.keep_newlines,
        sections=sections,
    )


def _read(path: Path, opts: ReportOptionsV1) -> str:
    return read_text_file(
        path, encoding=opts.resolved_encoding(), keep_newlines=opts.resolved_keep_newlines()
    )


def _cmd_analyze(ns: argparse.Namespace) -> int:
    opts = _resolve_options(ns)
    result = huffman_text_core(_read(ns.input, opts))
    if ns.json:
        print(json.dumps(report_to_json(result), ensure_ascii=False, sort_keys=True))
        return 0
    sys.stdout.write(render_report(result, opts.resolved_sections()))
    return 0


def _cmd_encode(ns: argparse.Namespace) -> int:
    opts = _resolve_options(ns)
    print(CodecText().encode(_read(ns.input, opts)))
    return 0


def _cmd_decode(ns: argparse.Namespace) -> int:
    opts = _resolve_options(ns)
    bits = ns.bits
    if bits.startswith("@"):
        bits = read_text_file(bits[1:], encoding="ascii").strip()
    print(CodecText().decode(_read(ns.source, opts), bits))
    return 0


def _cmd_codes(ns: argparse.Namespace) -> int:
    opts = _resolve_options(ns)
    result = CodecText().require_content(_read(ns.input, opts))
    sys.stdout.write(render_codes(result))
    return 0


def _cmd_options_validate(options_arg: str) -> int:
    # load is the validation
    load_options_spec(options_arg)
    print("OK")
    return 0


def run_interactive(
    opts: ReportOptionsV1,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
) -> int:
    """Menu loop: ask for a path, print its report, repeat until ``0`` (or EOF)."""
    fin = sys.stdin if stdin is None else stdin
    fout = sys.stdout if stdout is None else stdout

    while True:
        print(PROMPT, file=fout)
        raw = fin.readline()
        if not raw:
            break
        file_path = raw.strip()
        print(file=fout)
        if file_path == QUIT_SENTINEL:
            break
        try:
            if not file_path:
                raise MissingResource("percorso vuoto")
            result = huffman_text_core(_read(Path(file_path), opts))
        except MissingResource:
            print("No file was found with the entered file path", file=fout)
            print(file=fout)
            continue

        fout.write(render_report(result, opts.resolved_sections()))
        print(file=fout)

    print(file=fout)
    print("Ending program...", file=fout)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="huffman-text", description="Huffman prefix codes for text files ('0'/'1' bitstrings)"
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_a = sub.add_parser("analyze", help="Full report: content, bitstring, code table, decoded text")
    p_a.add_argument("input", type=Path)
    p_a.add_argument(
        "--sections",
        default=None,
        help=f"Comma-separated sections to print (any of: {', '.join(ALL_SECTIONS)})",
    )
    p_a.add_argument("--json", action="store_true", help="Print a JSON object instead of the report")
    _add_read_args(p_a)
    _add_common_args(p_a)

    p_e = sub.add_parser("encode", help="Print the '0'/'1' encoding of a text file")
    p_e.add_argument("input", type=Path)
    _add_read_args(p_e)
    _add_common_args(p_e)

    p_d = sub.add_parser("decode", help="Decode a bitstring against the tree of a source text file")
    p_d.add_argument("bits", help="Bitstring of '0'/'1', or '@file' to read it from a file")
    p_d.add_argument("--source", type=Path, required=True, help="Text file the tree is built from")
    _add_read_args(p_d)
    _add_common_args(p_d)

    p_c = sub.add_parser("codes", help="Print the code table of a text file")
    p_c.add_argument("input", type=Path)
    _add_read_args(p_c)
    _add_common_args(p_c)

    p_v = sub.add_parser("options-validate", help="Validate a report options spec (v1)")
    p_v.add_argument("options_spec", help="Options spec JSON (@file.json or inline JSON)")
    _add_common_args(p_v)

    p_i = sub.add_parser("interactive", help="Menu loop: enter file paths, 0 to quit")
    p_i.add_argument(
        "--sections",
        default=None,
        help=f"Comma-separated sections to print (any of: {', '.join(ALL_SECTIONS)})",
    )
    _add_read_args(p_i)
    _add_common_args(p_i)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    ns = p.parse_args(argv)

    try:
        if ns.cmd == "analyze":
            return _cmd_analyze(ns)
        if ns.cmd == "encode":
            return _cmd_encode(ns)
        if ns.cmd == "decode":
            return _cmd_decode(ns)
        if ns.cmd == "codes":
            return _cmd_codes(ns)
        if ns.cmd == "options-validate":
            return _cmd_options_validate(str(ns.options_spec))
        if ns.cmd == "interactive":
            return run_interactive(_resolve_options(ns))
        raise AssertionError("unreachable")

    except SystemExit:
        raise
    except HuffmanTextError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[huffman-text] {e}", file=sys.stderr)
        return int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[huffman-text] error: {e}", file=sys.stderr)
        return EXIT_GENERIC


if __name__ == "__main__":
    raise SystemExit(main())
