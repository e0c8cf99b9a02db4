#!/usr/bin/env python3
"""
Regenerate test fixtures from current primyst implementation.

Usage:
    python scripts/regenerate_fixtures.py [fixture_name]

If fixture_name is provided, only that fixture is regenerated.
Otherwise, all fixtures are regenerated.
"""

from __future__ import annotations

import contextlib
import io
import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import primyst


FIXTURES_DIR = Path(__file__).parent.parent / "test" / "fixtures"


def run_cli(argv: list[str], stdin: str) -> tuple[int, str]:
    """Run primyst.main on argv with stdin text. Returns (exit_code, stdout)."""
    stdout = io.StringIO()
    saved_stdin = sys.stdin
    sys.stdin = io.StringIO(stdin)
    try:
        # Prompt and errors go to stderr, which fixtures don't record
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(io.StringIO()):
            exit_code = primyst.main(argv)
    finally:
        sys.stdin = saved_stdin
    return exit_code, stdout.getvalue()


def regenerate_fixture(fixture_dir: Path) -> None:
    """Regenerate a fixture (args.txt / stdin.txt -> expected_*)."""
    args_file = fixture_dir / "args.txt"
    stdin_file = fixture_dir / "stdin.txt"

    if not args_file.exists() and not stdin_file.exists():
        print(f"  Skipping {fixture_dir.name}: no args.txt or stdin.txt")
        return

    argv = args_file.read_text().split() if args_file.exists() else []
    stdin = stdin_file.read_text() if stdin_file.exists() else ""

    exit_code, stdout = run_cli(argv, stdin)

    (fixture_dir / "expected_stdout.txt").write_text(stdout)
    (fixture_dir / "expected_exit_code.txt").write_text(f"{exit_code}\n")

    print(f"  {fixture_dir.name}: exit {exit_code}")


def main() -> int:
    """Main entry point."""
    target = sys.argv[1] if len(sys.argv) > 1 else None

    print("Regenerating fixtures...")

    for fixture_dir in sorted(FIXTURES_DIR.iterdir()):
        if not fixture_dir.is_dir():
            continue

        if target and fixture_dir.name != target:
            continue

        regenerate_fixture(fixture_dir)

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
