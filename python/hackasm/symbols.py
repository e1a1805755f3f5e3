"""Symbol table for one assembly run."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Optional, Tuple

from .errors import AlreadyBound, SymbolBindingExhausted

LOGGER = logging.getLogger("hackasm.symbols")

PREDEFINED_SYMBOLS: Tuple[Tuple[str, int], ...] = tuple(
    [(f"R{index}", index) for index in range(16)]
    + [
        ("SP", 0),
        ("LCL", 1),
        ("ARG", 2),
        ("THIS", 3),
        ("THAT", 4),
        ("SCREEN", 16384),
        ("KBD", 24576),
    ]
)

VARIABLE_BASE = 16
MAX_ADDRESS = 0xFFFF
ADDRESS_LIMIT = 0x7FFF

KIND_PREDEFINED = "predefined"
KIND_LABEL = "label"
KIND_VARIABLE = "variable"


class SymbolTable:
    """Case-sensitive name to address mapping.

    A fresh table holds the predefined bindings.  Each name is bound at most
    once; unseen names passed to :meth:`resolve_or_bind` become variables at
    consecutive addresses from ``VARIABLE_BASE`` in first-reference order.
    """

    def __init__(self) -> None:
        self._addresses: Dict[str, int] = {}
        self._kinds: Dict[str, str] = {}
        self._next_variable = VARIABLE_BASE
        for name, address in PREDEFINED_SYMBOLS:
            self._insert(name, address, KIND_PREDEFINED)

    def _insert(self, name: str, address: int, kind: str) -> None:
        if name in self._addresses:
            raise AlreadyBound(name, self._addresses[name])
        self._addresses[name] = address
        self._kinds[name] = kind

    def bind(self, name: str, address: int) -> None:
        """Bind a label; raises :class:`AlreadyBound` for any known name."""
        self._insert(name, address, KIND_LABEL)

    def resolve(self, name: str) -> Optional[int]:
        return self._addresses.get(name)

    def resolve_or_bind(self, name: str) -> int:
        address = self._addresses.get(name)
        if address is not None:
            return address
        if self._next_variable > MAX_ADDRESS:
            raise SymbolBindingExhausted(name)
        address = self._next_variable
        self._insert(name, address, KIND_VARIABLE)
        self._next_variable += 1
        LOGGER.debug("allocated variable %s at %d", name, address)
        if address == ADDRESS_LIMIT + 1:
            LOGGER.warning(
                "variable %s allocated at %d; addresses above %d do not fit an address-load instruction",
                name,
                address,
                ADDRESS_LIMIT,
            )
        return address

    def kind(self, name: str) -> Optional[str]:
        return self._kinds.get(name)

    def labels(self) -> Dict[str, int]:
        return self._select(KIND_LABEL)

    def variables(self) -> Dict[str, int]:
        return self._select(KIND_VARIABLE)

    def _select(self, kind: str) -> Dict[str, int]:
        return {name: self._addresses[name] for name, k in self._kinds.items() if k == kind}

    def __contains__(self, name: object) -> bool:
        return name in self._addresses

    def __len__(self) -> int:
        return len(self._addresses)

    def __iter__(self) -> Iterator[str]:
        return iter(self._addresses)


__all__ = [
    "SymbolTable",
    "PREDEFINED_SYMBOLS",
    "VARIABLE_BASE",
    "MAX_ADDRESS",
    "ADDRESS_LIMIT",
    "KIND_PREDEFINED",
    "KIND_LABEL",
    "KIND_VARIABLE",
]
