"""Pretty-printer for scanner output and symbol tables.

Provides `TablePrinter` whose static methods render the pre-token stream, a
single vocabulary table, the standard-symbol trace or a whole
`SymbolSession` into readable tab-separated listings. Every method returns
a string; printing is left to the caller.

Examples:
    print(TablePrinter.print_session(session))
"""

from __future__ import annotations
from typing import List

from symbols import StandardSymbol, SymbolSession, SymbolTable
from tokens import PreToken


class TablePrinter:
    @staticmethod
    def print_pre_tokens(tokens: List[PreToken]) -> str:
        """Listing of lexemes with their scanner category."""
        lines = ["\tLexeme\tCategory", ""]
        for token in tokens:
            lines.append(f"\t{token.value}\t{token.category}")
        return "\n".join(lines)

    @staticmethod
    def print_table(title: str, table: SymbolTable) -> str:
        lines = [f"\t{title}", "", "\tIndex\tValue"]
        for idx, value in enumerate(table):
            lines.append(f"\t{idx}\t{value}")
        return "\n".join(lines)

    @staticmethod
    def print_trace(trace: List[StandardSymbol]) -> str:
        """Listing of standard symbols as `value (table, index)` rows."""
        lines = ["\tStandard symbols", "", "\tValue\tReference"]
        for symbol in trace:
            lines.append(f"\t{symbol.value}\t({symbol.table}, {symbol.index})")
        return "\n".join(lines)

    @staticmethod
    def print_session(session: SymbolSession) -> str:
        sections = [
            TablePrinter.print_table("Keywords", session.keywords),
            TablePrinter.print_table("Separators", session.separators),
            TablePrinter.print_table("Literals", session.literals),
            TablePrinter.print_table("Identifiers", session.identifiers),
            TablePrinter.print_trace(session.trace),
        ]
        return "\n\n\n".join(sections)
