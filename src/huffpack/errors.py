"""Typed errors for huffpack.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- None of them is retried: they are contract violations, not transient states.
- The CLI maps errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_GENERIC = 10
EXIT_EMPTY_INPUT = 11
EXIT_CODEMAP_INCOMPLETE = 12
EXIT_IO_UNAVAILABLE = 13


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage/config error (invalid args, invalid job spec, etc.)"),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (unexpected error)"),
    ExitCodeInfo(EXIT_EMPTY_INPUT, "EMPTY_INPUT", "Empty input: no symbols to build a code tree from"),
    ExitCodeInfo(
        EXIT_CODEMAP_INCOMPLETE,
        "CODEMAP_INCOMPLETE",
        "Input symbol without an assigned codeword (code map / input mismatch)",
    ),
    ExitCodeInfo(EXIT_IO_UNAVAILABLE, "IO_UNAVAILABLE", "Input unreadable or output unwritable"),
)

_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE, do not edit manually.\n")
    lines.append("> Source of truth: `src/huffpack/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_exit_codes_md.py`.\n\n")
    lines.append("These are the CLI exit codes you can rely on.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- Every internal error extends `HuffpackError` and carries an `exit_code`.\n")
    lines.append("- `--debug` re-raises errors to show full stack traces.\n")
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class HuffpackError(Exception):
    """Base error for huffpack."""

    exit_code: int = EXIT_GENERIC


class UsageError(HuffpackError):
    exit_code = EXIT_USAGE


class EmptyInput(HuffpackError):
    exit_code = EXIT_EMPTY_INPUT

    def __init__(self, message: str = "empty input: nothing to encode") -> None:
        super().__init__(message)


class CodeMapIncomplete(HuffpackError):
    exit_code = EXIT_CODEMAP_INCOMPLETE

    def __init__(self, symbol: int, position: int) -> None:
        super().__init__(f"no codeword for byte 0x{symbol:02x} at offset {position}")
        self.symbol = symbol
        self.position = position


class IOUnavailable(HuffpackError):
    exit_code = EXIT_IO_UNAVAILABLE
