"""Closed-world symbolic keys.

Textual keys from untrusted input are only ever resolved against symbols that
trusted code has already interned; a lookup never adds to a table.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from gen_util.result import Found, NotFound


@dataclass(frozen=True, slots=True)
class Symbol:
    """A symbolic key. Never equal to a plain ``str``."""

    name: str

    def __str__(self) -> str:
        return self.name


class SymbolTable:
    """Registry of known symbols keyed by their text."""

    def __init__(self) -> None:
        super().__init__()
        self._symbols: dict[str, Symbol] = {}
        self._lock = threading.Lock()

    def intern(self, name: str) -> Symbol:
        """Return the symbol for ``name``, adding it when missing.

        Only call this with names from trusted code such as record type
        declarations.
        """
        if not name:
            msg = "symbol name must not be empty"
            raise ValueError(msg)
        with self._lock:
            symbol = self._symbols.get(name)
            if symbol is None:
                symbol = Symbol(name)
                self._symbols[name] = symbol
            return symbol

    def lookup(self, text: str) -> Found[Symbol] | NotFound:
        """Resolve ``text`` to a known symbol without registering anything."""
        symbol = self._symbols.get(text)
        if symbol is None:
            return NotFound()
        return Found(symbol)

    def __contains__(self, text: object) -> bool:
        return text in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)


SYMBOLS = SymbolTable()


def lookup_known_symbol(text: str, table: SymbolTable = SYMBOLS) -> Found[Symbol] | NotFound:
    """Resolve ``text`` against ``table``."""
    return table.lookup(text)


def to_existing_symbol(text: str, table: SymbolTable = SYMBOLS) -> Symbol | str:
    """Return the known symbol for ``text``, or ``text`` itself when there is none."""
    found = table.lookup(text)
    if isinstance(found, NotFound):
        return text
    return found.value
