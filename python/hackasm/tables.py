#!/usr/bin/env python3
"""Shared bit-pattern tables for the Hack toolchain.

The assembler and the disassembler both read these mappings; ordered lists
keep listings and documentation stable.  Nothing mutates them after import.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

# a-bit followed by c1..c6.
COMP_LIST: Tuple[Tuple[str, int], ...] = (
    ("0", 0b0101010),
    ("1", 0b0111111),
    ("-1", 0b0111010),
    ("D", 0b0001100),
    ("A", 0b0110000),
    ("!D", 0b0001101),
    ("!A", 0b0110001),
    ("-D", 0b0001111),
    ("-A", 0b0110011),
    ("D+1", 0b0011111),
    ("A+1", 0b0110111),
    ("D-1", 0b0001110),
    ("A-1", 0b0110010),
    ("D+A", 0b0000010),
    ("D-A", 0b0010011),
    ("A-D", 0b0000111),
    ("D&A", 0b0000000),
    ("D|A", 0b0010101),
    ("M", 0b1110000),
    ("!M", 0b1110001),
    ("-M", 0b1110011),
    ("M+1", 0b1110111),
    ("M-1", 0b1110010),
    ("D+M", 0b1000010),
    ("D-M", 0b1010011),
    ("M-D", 0b1000111),
    ("D&M", 0b1000000),
    ("D|M", 0b1010101),
)

DEST_LIST: Tuple[Tuple[str, int], ...] = (
    ("M", 0b001),
    ("D", 0b010),
    ("MD", 0b011),
    ("A", 0b100),
    ("AM", 0b101),
    ("AD", 0b110),
    ("AMD", 0b111),
)

JUMP_LIST: Tuple[Tuple[str, int], ...] = (
    ("JGT", 0b001),
    ("JEQ", 0b010),
    ("JGE", 0b011),
    ("JLT", 0b100),
    ("JNE", 0b101),
    ("JLE", 0b110),
    ("JMP", 0b111),
)

COMP_TABLE: Mapping[str, int] = MappingProxyType(dict(COMP_LIST))
DEST_TABLE: Mapping[str, int] = MappingProxyType(dict(DEST_LIST))
JUMP_TABLE: Mapping[str, int] = MappingProxyType(dict(JUMP_LIST))

COMP_NAMES: Mapping[int, str] = MappingProxyType({bits: name for name, bits in COMP_LIST})
DEST_NAMES: Mapping[int, str] = MappingProxyType({bits: name for name, bits in DEST_LIST})
JUMP_NAMES: Mapping[int, str] = MappingProxyType({bits: name for name, bits in JUMP_LIST})

__all__ = [
    "COMP_LIST",
    "DEST_LIST",
    "JUMP_LIST",
    "COMP_TABLE",
    "DEST_TABLE",
    "JUMP_TABLE",
    "COMP_NAMES",
    "DEST_NAMES",
    "JUMP_NAMES",
]
