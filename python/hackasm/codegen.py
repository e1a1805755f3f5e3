"""Instruction encoder."""

from __future__ import annotations

from .errors import TableLookupMiss
from .instruction import AddressLoad, Compute, Instruction
from .tables import COMP_TABLE, DEST_TABLE, JUMP_TABLE

ADDRESS_MASK = 0x7FFF
COMPUTE_PREFIX = 0xE000
WORD_BITS = 16

FIELD_COMPUTATION = "computation"
FIELD_DESTINATION = "destination"
FIELD_JUMP = "jump"


def encode(inst: Instruction) -> int:
    """Return the 16-bit machine word for ``inst``.

    Compute words are ``111a cccc ccdd djjj``; a missing destination or jump
    encodes as zero, but a mnemonic absent from its table raises
    :class:`TableLookupMiss`.
    """
    if isinstance(inst, AddressLoad):
        return inst.address & ADDRESS_MASK
    if isinstance(inst, Compute):
        comp = COMP_TABLE.get(inst.computation)
        if comp is None:
            raise TableLookupMiss(FIELD_COMPUTATION, inst.computation)
        dest = 0
        if inst.destination is not None:
            dest = DEST_TABLE.get(inst.destination)
            if dest is None:
                raise TableLookupMiss(FIELD_DESTINATION, inst.destination)
        jump = 0
        if inst.jump is not None:
            jump = JUMP_TABLE.get(inst.jump)
            if jump is None:
                raise TableLookupMiss(FIELD_JUMP, inst.jump)
        return COMPUTE_PREFIX | (comp << 6) | (dest << 3) | jump
    raise TypeError(f"cannot encode {inst!r}")


def format_word(word: int) -> str:
    return f"{word & 0xFFFF:0{WORD_BITS}b}"


__all__ = [
    "encode",
    "format_word",
    "ADDRESS_MASK",
    "FIELD_COMPUTATION",
    "FIELD_DESTINATION",
    "FIELD_JUMP",
]
