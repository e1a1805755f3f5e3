"""Source normalisation, label collection and instruction parsing."""

from __future__ import annotations

import re
from typing import Iterable, List, NamedTuple, Optional, Union

from .errors import AssemblerError, InvalidAddress, UnknownInstruction
from .instruction import AddressLoad, Compute, Instruction
from .symbols import SymbolTable

COMMENT = "//"
MAX_LITERAL = 0x7FFF

SYMBOL_PATTERN = r"[A-Za-z][A-Za-z0-9_.$]*"

LABEL_RE = re.compile(rf"\((?P<label>{SYMBOL_PATTERN})\)")
A_INST_RE = re.compile(rf"@(?:(?P<address>[0-9]+)|(?P<symbol>{SYMBOL_PATTERN}))")
C_INST_RE = re.compile(
    r"(?:(?P<dest>[AMD]{1,3})=)?"
    r"(?P<comp>[-+|&!01ADM]+)"
    r"(?:;(?P<jump>[EGJLMNPQT]{3}))?"
)


class SourceLine(NamedTuple):
    lineno: int
    text: str


def clean_line(raw: str) -> str:
    """Remove every whitespace character, then drop the ``//`` comment."""
    return "".join(raw.split()).split(COMMENT, 1)[0]


def source_lines(text: str) -> List[SourceLine]:
    """Non-empty cleaned lines tagged with their 1-based source line number."""
    lines: List[SourceLine] = []
    for lineno, raw in enumerate(text.split("\n"), start=1):
        cleaned = clean_line(raw)
        if cleaned:
            lines.append(SourceLine(lineno, cleaned))
    return lines


def preprocess(text: str) -> List[str]:
    return [line.text for line in source_lines(text)]


def label_name(line: str) -> Optional[str]:
    """Return the name declared by ``(name)``, or ``None``."""
    match = LABEL_RE.fullmatch(line)
    if not match:
        return None
    return match.group("label")


def collect_labels(lines: Iterable[Union[str, SourceLine]], table: SymbolTable) -> int:
    """Bind every label to the address of the instruction that follows it.

    Returns the number of instructions seen.  Label lines occupy no address.
    """
    address = 0
    for line in lines:
        lineno = None
        if isinstance(line, SourceLine):
            lineno, line = line
        label = label_name(line)
        if label is None:
            address += 1
            continue
        try:
            table.bind(label, address)
        except AssemblerError as exc:
            exc.lineno = lineno
            raise
    return address


def parse_instruction(line: str, table: SymbolTable) -> Instruction:
    """Parse one cleaned, non-label line.

    Unseen symbols in ``@symbol`` are allocated as variables.
    """
    match = A_INST_RE.fullmatch(line)
    if match:
        symbol = match.group("symbol")
        if symbol is not None:
            return AddressLoad(table.resolve_or_bind(symbol))
        literal = match.group("address")
        try:
            address = int(literal, 10)
        except ValueError as exc:
            raise InvalidAddress(literal) from exc
        if address > MAX_LITERAL:
            raise InvalidAddress(literal)
        return AddressLoad(address)
    match = C_INST_RE.fullmatch(line)
    if match:
        return Compute(
            computation=match.group("comp"),
            destination=match.group("dest"),
            jump=match.group("jump"),
        )
    raise UnknownInstruction(line)


__all__ = [
    "SourceLine",
    "clean_line",
    "source_lines",
    "preprocess",
    "label_name",
    "collect_labels",
    "parse_instruction",
]
