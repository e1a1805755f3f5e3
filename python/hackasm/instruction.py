"""Decoded instruction values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class AddressLoad:
    """``@value``: load a 15-bit address into the A register."""

    address: int

    def __str__(self) -> str:
        return f"@{self.address}"


@dataclass(frozen=True)
class Compute:
    """``dest=comp;jump``: ALU computation with optional store and jump."""

    computation: str
    destination: Optional[str] = None
    jump: Optional[str] = None

    def __str__(self) -> str:
        text = self.computation
        if self.destination:
            text = f"{self.destination}={text}"
        if self.jump:
            text = f"{text};{self.jump}"
        return text


Instruction = Union[AddressLoad, Compute]

__all__ = ["AddressLoad", "Compute", "Instruction"]
