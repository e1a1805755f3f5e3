"""
hackasm - assembler for the 16-bit Hack instruction set.

Source text is normalised, labels are bound in a first pass, and every
remaining line is parsed and encoded to one machine word in a second pass:

    parser.py     → normalisation, label collection, instruction grammar
    symbols.py    → predefined symbols, labels, variable allocation
    codegen.py    → bit-pattern encoding
    assembler.py  → the two-pass pipeline
    disasm.py     → machine words back to source text

Use ``python -m hackasm`` or the ``hackasm`` script to run the assembler.
"""

from __future__ import annotations

from .assembler import ListingEntry, Program, assemble, assemble_program  # noqa: F401
from .codegen import encode, format_word  # noqa: F401
from .errors import (  # noqa: F401
    AlreadyBound,
    AssemblerError,
    InvalidAddress,
    SymbolBindingExhausted,
    TableLookupMiss,
    TooManyBindings,
    UnknownInstruction,
)
from .instruction import AddressLoad, Compute, Instruction  # noqa: F401
from .parser import collect_labels, label_name, parse_instruction, preprocess  # noqa: F401
from .symbols import SymbolTable  # noqa: F401

__all__ = [
    "assemble",
    "assemble_program",
    "Program",
    "ListingEntry",
    "encode",
    "format_word",
    "AssemblerError",
    "InvalidAddress",
    "SymbolBindingExhausted",
    "TooManyBindings",
    "AlreadyBound",
    "UnknownInstruction",
    "TableLookupMiss",
    "AddressLoad",
    "Compute",
    "Instruction",
    "preprocess",
    "label_name",
    "collect_labels",
    "parse_instruction",
    "SymbolTable",
]
__version__ = "0.1.0"
