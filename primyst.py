#!/usr/bin/env python3
"""
Primyst - Tell whether an integer is prime.

Architecture: Functional Core, Imperative Shell
- Data: immutable dataclasses
- Computations: pure functions (no I/O, no printing)
- Renderers: pure functions (data → str)
- Actions: read/print at edges only
"""

from __future__ import annotations

import json
import re
import sys
from dataclasses import dataclass
from typing import Literal, Sequence, TextIO


# =============================================================================
# DOMAIN TYPES (Data)
# =============================================================================


# Signed 64-bit machine word
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

DEFAULT_PROMPT = "Enter an integer: "

EXIT_OK = 0
EXIT_USAGE = 2

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_MAX_DIGITS = len(str(INT_MIN).lstrip("-"))


class InvalidInput(ValueError):
    """The input text does not name a supported integer."""


@dataclass(frozen=True)
class CheckResult:
    """The outcome of checking one integer (pure data)."""

    number: int
    prime: bool


# =============================================================================
# PURE FUNCTIONS (Computations) - No I/O, no side effects, no printing
# =============================================================================


def is_prime(n: int) -> bool:
    """
    Return True if n is prime, using trial division by odd candidates.

    The loop bound is ``i * i <= n`` so no floating-point square root is involved.

    Pure: int -> bool
    """
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2

    return True


def parse_integer(text: str) -> int:
    """
    Parse a decimal integer within the signed 64-bit range.

    Surrounding whitespace is ignored. Raises InvalidInput for empty,
    malformed or out-of-range text.

    Pure: str -> int
    """
    stripped = text.strip()
    if not stripped:
        raise InvalidInput("no integer given")

    if _INTEGER_RE.fullmatch(stripped) is None:
        raise InvalidInput(f"{stripped!r} is not an integer")

    # Leading zeros don't count toward the range; anything longer than
    # INT_MIN's digits can't fit and never reaches int()
    sign = stripped[0] if stripped[0] in "+-" else ""
    digits = stripped[len(sign):].lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        raise InvalidInput(
            f"integer with {len(digits)} digits is outside the supported range "
            f"[{INT_MIN}, {INT_MAX}]"
        )

    value = int(sign + digits)
    if not INT_MIN <= value <= INT_MAX:
        raise InvalidInput(
            f"{value} is outside the supported range [{INT_MIN}, {INT_MAX}]"
        )

    return value


def check(n: int) -> CheckResult:
    """Check one integer. Pure: int -> CheckResult."""
    return CheckResult(number=n, prime=is_prime(n))


# =============================================================================
# RENDERERS (Pure: Data -> str)
# =============================================================================


def render_result_text(result: CheckResult) -> str:
    """Render result as a single line. Pure: CheckResult -> str."""
    if result.prime:
        return f"{result.number} is prime"
    return f"{result.number} is not prime"


def render_result_json(result: CheckResult) -> str:
    """Render result as JSON. Pure: CheckResult -> str."""
    data = {
        "number": result.number,
        "prime": result.prime,
    }
    return json.dumps(data, indent=2)


def render_error(message: str) -> str:
    """Render an error message. Pure: str -> str."""
    return f"Error: {message}"


# =============================================================================
# ACTIONS (Effects) - I/O happens here only
# =============================================================================


def read_line(stream: TextIO, prompt: str, prompt_stream: TextIO) -> str:
    """Show the prompt and read one line. Action."""
    prompt_stream.write(prompt)
    prompt_stream.flush()
    return stream.readline()


# =============================================================================
# MAIN (Orchestration) - Wiring only, single print at the end
# =============================================================================


def run(
    number: str | None,
    output_format: Literal["text", "json"],
    prompt: str = DEFAULT_PROMPT,
    stdin: TextIO | None = None,
    prompt_stream: TextIO | None = None,
) -> tuple[int, str]:
    """
    Run a primality check. Returns (exit_code, output_to_display).

    When ``number`` is None one line is read from ``stdin`` after writing
    the prompt to ``prompt_stream`` (standard error by default), so standard
    output only ever carries the result.
    """
    # ACTION: Read (only when no argument was given)
    if number is None:
        text = read_line(
            stdin or sys.stdin,
            prompt,
            prompt_stream or sys.stderr,
        )
    else:
        text = number

    try:
        value = parse_integer(text)
    except InvalidInput as exc:
        return (EXIT_USAGE, render_error(str(exc)))

    # COMPUTATION: Check (pure)
    result = check(value)

    # RENDER: Data -> str (pure)
    if output_format == "json":
        output = render_result_json(result)
    else:
        output = render_result_text(result)

    return (EXIT_OK, output)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point. Parses args, calls run(), prints once, exits."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Tell whether an integer is prime."
    )
    parser.add_argument(
        "number",
        nargs="?",
        help="Integer to check (default: read one line from stdin)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--prompt",
        default=DEFAULT_PROMPT,
        help="Prompt shown on stderr before reading stdin",
    )

    args = parser.parse_args(argv)

    # Run (returns data)
    exit_code, output = run(
        number=args.number,
        output_format=args.format,
        prompt=args.prompt,
    )

    # Single print at the edge
    if exit_code == EXIT_OK:
        print(output)
    else:
        print(output, file=sys.stderr)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
