"""Token definitions for the scanner.

This module defines the enums that drive the scanner's state machine
(`ScannerState`, `CharClass`), the coarse `TokenCategory` assigned to each
lexeme and the `PreToken` dataclass that carries a lexeme from the scanner
to the classifier.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass


class TokenCategory(Enum):
    LITERAL = auto()
    SEPARATOR = auto()
    IDENTIFIER = auto()

    def __str__(self) -> str:
        return self.name.lower()


class ScannerState(Enum):
    START = auto()
    DIGIT = auto()
    SEPARATOR = auto()
    IDENTIFIER = auto()
    COMMENT = auto()

    def __str__(self) -> str:
        return self.name


class CharClass(Enum):
    DIGIT = auto()
    LETTER = auto()
    SEPARATOR = auto()
    COMMENT_MARKER = auto()
    NEWLINE = auto()
    WHITESPACE = auto()
    OTHER = auto()

    def __str__(self) -> str:
        return self.name.lower()


# States that buffer a lexeme, and the category they emit it as.
STATE_CATEGORIES = {
    ScannerState.DIGIT: TokenCategory.LITERAL,
    ScannerState.SEPARATOR: TokenCategory.SEPARATOR,
    ScannerState.IDENTIFIER: TokenCategory.IDENTIFIER,
}


@dataclass(frozen=True)
class PreToken:
    value: str
    category: TokenCategory
    line: int = 1
    column: int = 1

    def __repr__(self) -> str:
        return f"PreToken({self.category}, {self.value!r})"
