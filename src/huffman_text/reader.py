"""Input reader for huffman-text.

By default lines are joined WITHOUT their terminators, the way a
line-by-line scanner hands them over; ``keep_newlines=True`` keeps the
file content verbatim.
"""

from __future__ import annotations

import re
from pathlib import Path

from huffman_text.errors import MissingResource, UnreadableInput

# Line terminators a line scanner splits on; \f, \v and \x1c-\x1e are content.
_LINE_BREAK = re.compile(r"\r\n|[\n\r\u2028\u2029\u0085]")


def read_text_file(path: str | Path, *, encoding: str = "utf-8", keep_newlines: bool = False) -> str:
    p = Path(path).expanduser()
    if not p.exists() or not p.is_file():
        raise MissingResource(f"file non trovato: {p}")

    try:
        raw = p.read_bytes()
    except OSError as e:
        raise MissingResource(f"file non leggibile: {p}: {e}") from e

    try:
        text = raw.decode(encoding)
    except LookupError as e:
        raise UnreadableInput(f"encoding sconosciuto: {encoding!r}") from e
    except UnicodeDecodeError as e:
        raise UnreadableInput(f"{p}: contenuto non decodificabile come {encoding}: {e}") from e

    if keep_newlines:
        return text
    return "".join(_LINE_BREAK.split(text))
