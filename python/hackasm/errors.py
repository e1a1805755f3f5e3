"""Assembly error taxonomy.

Every failure derives from :class:`AssemblerError`, itself a ``ValueError``,
so callers can catch the specific condition or any assembly failure.  Errors
hold owned copies of the offending text; the pipeline attaches the 1-based
source line number when one is known.
"""

from __future__ import annotations

from typing import Optional


class AssemblerError(ValueError):
    """Base class for all assembly failures."""

    def __init__(self, message: str, *, lineno: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.lineno = lineno

    def __str__(self) -> str:
        if self.lineno is not None:
            return f"line {self.lineno}: {self.message}"
        return self.message


class InvalidAddress(AssemblerError):
    """Numeric address literal outside 0..32767 or not an integer."""

    def __init__(self, literal: str, *, lineno: Optional[int] = None) -> None:
        super().__init__(f"invalid address: {literal}", lineno=lineno)
        self.literal = literal


class SymbolBindingExhausted(AssemblerError):
    """No free address left for a new variable."""

    def __init__(self, name: str, *, lineno: Optional[int] = None) -> None:
        super().__init__(f"no free address left for variable: {name}", lineno=lineno)
        self.name = name


TooManyBindings = SymbolBindingExhausted


class AlreadyBound(AssemblerError):
    """Explicit binding of a name that already has an address."""

    def __init__(self, name: str, address: int, *, lineno: Optional[int] = None) -> None:
        super().__init__(f"symbol already bound: {name} (address {address})", lineno=lineno)
        self.name = name
        self.address = address


class UnknownInstruction(AssemblerError):
    def __init__(self, line: str, *, lineno: Optional[int] = None) -> None:
        super().__init__(f"unknown instruction: {line}", lineno=lineno)
        self.line = line


class TableLookupMiss(AssemblerError):
    """Mnemonic accepted by the grammar but absent from its lookup table."""

    def __init__(self, field: str, mnemonic: str, *, lineno: Optional[int] = None) -> None:
        super().__init__(f"lookup table miss: {field} `{mnemonic}'", lineno=lineno)
        self.field = field
        self.mnemonic = mnemonic


__all__ = [
    "AssemblerError",
    "InvalidAddress",
    "SymbolBindingExhausted",
    "TooManyBindings",
    "AlreadyBound",
    "UnknownInstruction",
    "TableLookupMiss",
]
