#!/usr/bin/env python3
"""Hack disassembler: binary text back to source text."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List

from .codegen import ADDRESS_MASK, FIELD_COMPUTATION, format_word
from .errors import AssemblerError, TableLookupMiss, UnknownInstruction
from .instruction import AddressLoad, Compute, Instruction
from .tables import COMP_NAMES, DEST_NAMES, JUMP_NAMES

LOGGER = logging.getLogger("hackasm.disasm")

COMPUTE_TAG = 0b111


def parse_word(token: str) -> int:
    """Parse one 16-character line of ``0``/``1`` text."""
    token = token.strip()
    if len(token) != 16 or set(token) - {"0", "1"}:
        raise UnknownInstruction(token)
    return int(token, 2)


def decode_word(word: int) -> Instruction:
    if not word & 0x8000:
        return AddressLoad(word & ADDRESS_MASK)
    if (word >> 13) & 0b111 != COMPUTE_TAG:
        raise UnknownInstruction(format_word(word))
    comp_bits = (word >> 6) & 0x7F
    comp = COMP_NAMES.get(comp_bits)
    if comp is None:
        raise TableLookupMiss(FIELD_COMPUTATION, f"{comp_bits:07b}")
    return Compute(
        computation=comp,
        destination=DEST_NAMES.get((word >> 3) & 0b111),
        jump=JUMP_NAMES.get(word & 0b111),
    )


def disassemble(words: Iterable[int]) -> List[str]:
    return [str(decode_word(word)) for word in words]


def disassemble_text(text: str) -> List[str]:
    lines: List[str] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        if not raw.strip():
            continue
        try:
            lines.append(str(decode_word(parse_word(raw))))
        except AssemblerError as exc:
            exc.lineno = lineno
            raise
    return lines


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hack disassembler")
    parser.add_argument("-i", "--input", type=Path, help="Binary text file (default stdin)")
    parser.add_argument("-o", "--output", type=Path, help="Source output file (default stdout)")
    return parser


def main(argv: List[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    try:
        text = args.input.read_text(encoding="utf-8") if args.input else sys.stdin.read()
        source = "\n".join(disassemble_text(text))
        if args.output:
            args.output.write_text(source + "\n" if source else "", encoding="utf-8")
        else:
            if source:
                print(source)
    except AssemblerError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        LOGGER.debug("disassembly I/O failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


__all__ = ["parse_word", "decode_word", "disassemble", "disassemble_text", "main"]


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
