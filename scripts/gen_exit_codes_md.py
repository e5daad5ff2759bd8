#!/usr/bin/env python3
"""Write (or, with --check, verify) docs/exit_codes.md from src/huffman_text/errors.py."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO = Path(__file__).resolve().parents[1]
DOC = REPO / "docs" / "exit_codes.md"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--check", action="store_true", help="Exit 1 if the doc is stale, write nothing")
    ns = p.parse_args(argv)

    sys.path.insert(0, str(REPO / "src"))
    from huffman_text.errors import render_exit_codes_markdown  # noqa: E402

    wanted = render_exit_codes_markdown()
    current = DOC.read_text(encoding="utf-8") if DOC.is_file() else None

    if ns.check:
        if current != wanted:
            print(f"[huffman-text] stale: {DOC} (run scripts/gen_exit_codes_md.py)", file=sys.stderr)
            return 1
        print(f"[huffman-text] up to date: {DOC}")
        return 0

    if current == wanted:
        print(f"[huffman-text] unchanged {DOC}")
        return 0
    DOC.parent.mkdir(parents=True, exist_ok=True)
    DOC.write_text(wanted, encoding="utf-8")
    print(f"[huffman-text] wrote {DOC}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
