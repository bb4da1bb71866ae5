"""Command line entry point: build a catalogue and answer stat requests."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from transit_catalogue.input_reader import read_catalogue
from transit_catalogue.stat_reader import write_info


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transit-catalogue",
        description=(
            "Read a block of Stop/Bus creation requests followed by a block of "
            "stat requests and print the answers."
        ),
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="file holding both request blocks (standard input by default)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the catalogue on the given input and print answers to stdout."""
    args = _build_parser().parse_args(argv)
    if args.input is None:
        catalogue = read_catalogue(sys.stdin)
        write_info(catalogue, sys.stdin, sys.stdout)
    else:
        with open(args.input, encoding="utf-8") as stream:
            catalogue = read_catalogue(stream)
            write_info(catalogue, stream, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())