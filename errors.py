"""Lexical errors raised by the scanner and the classifier.

Both error kinds derive from `LexicalError`, itself a `SyntaxError`, so a
driver can catch either stage's failure with a single handler.
"""

from __future__ import annotations


class LexicalError(SyntaxError):
    def __init__(self, message: str, line: int = 1, column: int = 1):
        super().__init__(f"{message} at line {line}, column {column}")
        self.line = line
        self.column = column


class UnexpectedSymbol(LexicalError):
    """A character outside every recognised character class."""

    def __init__(self, symbol: str, line: int = 1, column: int = 1):
        super().__init__(f"Unexpected symbol {symbol!r}", line, column)
        self.symbol = symbol


class UndefinedSeparator(LexicalError):
    """A separator run with no exact entry in the separator table."""

    def __init__(self, value: str, line: int = 1, column: int = 1):
        super().__init__(f"Undefined separator {value!r}", line, column)
        self.value = value
