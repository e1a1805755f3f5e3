"""hackasm command-line entry point."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List

from tabulate import tabulate

from .assembler import Program, assemble_program
from .codegen import format_word
from .errors import AssemblerError

LOG = logging.getLogger("hackasm.cli")

LISTING_HEADERS = ["line", "addr", "hex", "word", "source"]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def existing_file(value: str) -> Path:
    path = Path(value)
    if not path.is_file():
        raise argparse.ArgumentTypeError(f"input file does not exist: {value}")
    return path


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hack assembler")
    parser.add_argument("-i", "--input", type=existing_file, help="Source file (default stdin)")
    parser.add_argument("-o", "--output", type=Path, help="Output file (default stdout)")
    parser.add_argument("-l", "--listing", type=Path, help="Write an annotated listing")
    parser.add_argument("--sym", type=Path, help="Write label and variable addresses as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="print assembly statistics")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("HACKASM_LOG", "WARNING"),
        help="Logging level (default WARNING)",
    )
    return parser


def render_listing(program: Program) -> str:
    rows: List[List[Any]] = []
    for entry in program.listing:
        if entry.is_label:
            rows.append([entry.lineno, "", "", "", entry.text])
            continue
        rows.append(
            [
                entry.lineno,
                entry.address,
                f"0x{entry.word:04X}",
                format_word(entry.word),
                str(entry.instruction),
            ]
        )
    return tabulate(rows, headers=LISTING_HEADERS, tablefmt="plain", disable_numparse=True)


def symbol_payload(program: Program) -> Dict[str, Dict[str, int]]:
    return {
        "labels": program.symbols.labels(),
        "variables": program.symbols.variables(),
    }


def main(argv: List[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    try:
        if args.input:
            text = args.input.read_text(encoding="utf-8")
        else:
            text = sys.stdin.read()
        program = assemble_program(text)
        code = "\n".join(format_word(word) for word in program.words)
        # Machine code is written after the listing and symbol files.
        if args.listing:
            args.listing.write_text(render_listing(program) + "\n", encoding="utf-8")
        if args.sym:
            args.sym.write_text(json.dumps(symbol_payload(program), indent=2) + "\n", encoding="utf-8")
        if args.output:
            args.output.write_text(code, encoding="utf-8")
        else:
            sys.stdout.write(code)
            sys.stdout.flush()
    except AssemblerError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        LOG.debug("I/O failure", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    if args.verbose:
        print(
            f"words={len(program.words)} labels={len(program.symbols.labels())} "
            f"variables={len(program.symbols.variables())}",
            file=sys.stderr,
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
