"""Symbol tables and the session that owns them.

This module defines the `TableKind` enum, an append-only `SymbolTable` that
interns strings by first-seen position, the `StandardSymbol` record that
points into one of the tables, and `SymbolSession` which groups the four
vocabulary tables with the trace of standard symbols produced by the
classifier.

Keyword and separator tables are seeded from fixed vocabularies; literal and
identifier tables start empty. An index, once assigned, never changes.
"""

from __future__ import annotations
import threading
from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional


DEFAULT_KEYWORDS = (
    "let",
    "const",
    "number",
    "if",
    "else",
)

DEFAULT_SEPARATORS = (
    ":",
    ";",
    "(",
    ")",
    "{",
    "}",
    ">",
    "=",
    "+",
    "-",
    "<=",
    "==",
    "===",
    ">=",
    "!=",
    "!==",
)


class TableKind(Enum):
    KEYWORD = auto()
    SEPARATOR = auto()
    LITERAL = auto()
    IDENTIFIER = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class StandardSymbol:
    value: str
    table: TableKind
    index: int

    def __repr__(self) -> str:
        return f"StandardSymbol({self.value!r}, ({self.table}, {self.index}))"


class SymbolTable:
    def __init__(self, kind: TableKind, values: Iterable[str] = ()):
        self.kind = kind
        self.values: List[str] = []
        self._index: Dict[str, int] = {}
        for value in values:
            if value in self._index:
                raise ValueError(f"Duplicate {kind} table entry '{value}'")
            self.intern(value)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __contains__(self, value: str) -> bool:
        return value in self._index

    def __getitem__(self, index: int) -> str:
        return self.values[index]

    def index_of(self, value: str) -> Optional[int]:
        """Return the index of `value`, or None if it is not in the table."""
        return self._index.get(value)

    def intern(self, value: str) -> int:
        """Return the index of `value`, appending it first if it is new."""
        idx = self._index.get(value)
        if idx is None:
            idx = len(self.values)
            self.values.append(value)
            self._index[value] = idx
        return idx

    def truncate(self, length: int) -> None:
        """Drop every entry at or past `length`."""
        for value in self.values[length:]:
            del self._index[value]
        del self.values[length:]


class SymbolSession:
    """The four vocabulary tables plus the standard-symbol trace of one run.

    `lock` serializes writers; the classifier holds it for the whole of each
    call so that concurrent classifications against one session never
    interleave their appends.
    """

    def __init__(
        self,
        keywords: Iterable[str] = DEFAULT_KEYWORDS,
        separators: Iterable[str] = DEFAULT_SEPARATORS,
    ):
        self.keywords = SymbolTable(TableKind.KEYWORD, keywords)
        self.separators = SymbolTable(TableKind.SEPARATOR, separators)
        self.literals = SymbolTable(TableKind.LITERAL)
        self.identifiers = SymbolTable(TableKind.IDENTIFIER)
        self.trace: List[StandardSymbol] = []
        self.lock = threading.Lock()

    def table(self, kind: TableKind) -> SymbolTable:
        return {
            TableKind.KEYWORD: self.keywords,
            TableKind.SEPARATOR: self.separators,
            TableKind.LITERAL: self.literals,
            TableKind.IDENTIFIER: self.identifiers,
        }[kind]

    def resolve(self, symbol: StandardSymbol) -> str:
        """Return the table entry a standard symbol points at."""
        return self.table(symbol.table)[symbol.index]

    def __repr__(self) -> str:
        return (
            f"SymbolSession(literals={len(self.literals)}, "
            f"identifiers={len(self.identifiers)}, trace={len(self.trace)})"
        )
