"""
Pawn Type System and Symbol Table
=================================

Pawn programs handled by pawn2py declare variables of exactly four
primitive types. Each maps onto a Python default value used when a
declaration has no initializer:

| Pawn type | Python default |
|-----------|----------------|
| int       | 0              |
| float     | 0.0            |
| bool      | False          |
| string    | ""             |

The symbol table is a single flat mapping from variable name to declared
type. There is no scoping, shadowing or removal: a re-declaration simply
overwrites the earlier entry.
"""

from enum import Enum
from typing import Optional


class PawnType(Enum):
    """The primitive types a Pawn variable may be declared with."""

    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"

    def __str__(self) -> str:
        return self.value

    @property
    def python_default(self) -> str:
        """Python literal for a declaration without an initializer."""
        return _PYTHON_DEFAULTS[self]

    @classmethod
    def from_keyword(cls, keyword: Optional[str]) -> Optional["PawnType"]:
        """Return the PawnType spelled by keyword, or None if unknown."""
        try:
            return cls(keyword)
        except ValueError:
            return None


_PYTHON_DEFAULTS = {
    PawnType.INT: "0",
    PawnType.FLOAT: "0.0",
    PawnType.BOOL: "False",
    PawnType.STRING: '""',
}


class SymbolTable:
    """
    Flat mapping of variable name to declared PawnType.

    Example:
        symbols = SymbolTable()
        symbols.declare("x", PawnType.INT)
        symbols.lookup("x")      # PawnType.INT
        symbols.lookup("y")      # None
    """

    def __init__(self):
        self._symbols: dict[str, PawnType] = {}

    def declare(self, name: str, pawn_type: PawnType) -> None:
        """Insert or overwrite the entry for name."""
        self._symbols[name] = pawn_type

    def lookup(self, name: Optional[str]) -> Optional[PawnType]:
        """Return the declared type of name, or None if it was never declared."""
        if name is None:
            return None
        return self._symbols.get(name)

    def snapshot(self) -> dict[str, PawnType]:
        """Return a copy of the table contents."""
        return dict(self._symbols)

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)
