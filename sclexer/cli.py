"""Command that tokenizes a source file and prints each token."""

from __future__ import annotations

import argparse
import sys

from .lexer import print_tokens, tokenize

DEFAULT_SOURCE = "test.sc"


def main(argv: list[str] | None = None) -> int:
    """Tokenize a source file and print the tokens; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="sclexer", description="Print the tokens of a source file."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_SOURCE,
        help=f"source file to read (default: {DEFAULT_SOURCE})",
    )
    args = parser.parse_args(argv)

    try:
        handle = open(args.path, encoding="utf-8", errors="replace")
    except OSError as exc:
        print(f"Error opening file: {exc.strerror}", file=sys.stderr)
        return 1

    with handle:
        print_tokens(tokenize(handle))
    return 0


if __name__ == "__main__":
    sys.exit(main())