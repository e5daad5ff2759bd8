"""Typed errors for huffman-text.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- The core raises, never prints. The CLI maps errors to stable exit codes.
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_EMPTY_INPUT = 3
EXIT_GENERIC = 10
EXIT_MALFORMED_ENCODING = 11
EXIT_MISSING_RESOURCE = 12


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage/config error (invalid args, invalid options spec, etc.)"),
    ExitCodeInfo(EXIT_EMPTY_INPUT, "EMPTY_INPUT", "Input text has no content, nothing to encode/decode"),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (unknown symbol, unexpected error, etc.)"),
    ExitCodeInfo(
        EXIT_MALFORMED_ENCODING,
        "MALFORMED_ENCODING",
        "Encoded bitstring is not a sequence of complete codes for the tree",
    ),
    ExitCodeInfo(EXIT_MISSING_RESOURCE, "MISSING_RESOURCE", "Input file not found or not readable as text"),
)

_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE: do not edit manually.\n")
    lines.append("> Source of truth: `src/huffman_text/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_exit_codes_md.py`.\n\n")
    lines.append("These are the CLI exit codes you can rely on.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- All internal errors extend `HuffmanTextError` and carry an `exit_code`.\n")
    lines.append("- `--debug` re-raises errors to show full stack traces.\n")
    lines.append("- `interactive` never exits on a missing file: it reports and asks again.\n")
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class HuffmanTextError(Exception):
    """Base error for huffman-text."""

    exit_code: int = EXIT_GENERIC


class UsageError(HuffmanTextError):
    exit_code = EXIT_USAGE


class EmptyInput(HuffmanTextError):
    exit_code = EXIT_EMPTY_INPUT


class UnknownSymbol(HuffmanTextError):
    """A character has no code in the table (table and text come from different sources)."""

    exit_code = EXIT_GENERIC


class MalformedEncoding(HuffmanTextError):
    exit_code = EXIT_MALFORMED_ENCODING


class MissingResource(HuffmanTextError):
    exit_code = EXIT_MISSING_RESOURCE


class UnreadableInput(MissingResource):
    pass
