"""Two-pass assembly pipeline.

``assemble_program`` normalises the source, binds labels in a first pass,
then parses and encodes every remaining line in a second pass.  The first
error aborts the run; its ``lineno`` points at the offending source line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .codegen import encode
from .errors import AssemblerError
from .instruction import Instruction
from .parser import collect_labels, label_name, parse_instruction, source_lines
from .symbols import SymbolTable

LOGGER = logging.getLogger("hackasm.assembler")


@dataclass
class ListingEntry:
    """One source line as seen by the assembler.

    Label declarations have no address, instruction or word.
    """

    lineno: int
    text: str
    address: Optional[int] = None
    instruction: Optional[Instruction] = None
    word: Optional[int] = None

    @property
    def is_label(self) -> bool:
        return self.address is None


@dataclass
class Program:
    words: List[int]
    symbols: SymbolTable
    listing: List[ListingEntry] = field(default_factory=list)


def assemble_program(text: str) -> Program:
    lines = source_lines(text)
    table = SymbolTable()
    count = collect_labels(lines, table)
    LOGGER.debug(
        "label pass: %d lines, %d instructions, %d labels",
        len(lines),
        count,
        len(table.labels()),
    )

    words: List[int] = []
    listing: List[ListingEntry] = []
    for line in lines:
        if label_name(line.text) is not None:
            listing.append(ListingEntry(line.lineno, line.text))
            continue
        try:
            inst = parse_instruction(line.text, table)
            word = encode(inst)
        except AssemblerError as exc:
            if exc.lineno is None:
                exc.lineno = line.lineno
            raise
        listing.append(ListingEntry(line.lineno, line.text, len(words), inst, word))
        words.append(word)
    LOGGER.debug("instruction pass: %d words, %d variables", len(words), len(table.variables()))
    return Program(words=words, symbols=table, listing=listing)


def assemble(text: str) -> List[int]:
    """Translate source text into machine words."""
    return assemble_program(text).words


__all__ = ["ListingEntry", "Program", "assemble", "assemble_program"]
