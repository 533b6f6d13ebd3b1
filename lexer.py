"""
Scanner for the simple C-like language.

Overview:
- This module implements a table-driven finite-state machine that turns a
    source string into a list of `PreToken` objects defined in `tokens.py`.
- Every input character is mapped to a `CharClass`; the pair
    `(ScannerState, CharClass)` selects a `Transition` from `TRANSITIONS`,
    which names what to do with the character and which state to enter.
- Runs of digits become literals, runs of letters/digits/underscores that
    start with a letter become identifiers, and any run of separator
    characters becomes one separator token. `#` starts a comment running to
    the end of the line. Whitespace separates tokens and is dropped.

Examples:
    Input:  "let a: number = 5;"
    Tokens: [IDENTIFIER('let'), IDENTIFIER('a'), SEPARATOR(':'),
             IDENTIFIER('number'), SEPARATOR('='), LITERAL('5'), SEPARATOR(';')]

Implementation notes:
- Separator runs are greedy and are not checked against any vocabulary here:
    `=>` is scanned as one token and rejected later by the classifier.
- Entering a token state does not consume the character; it is dispatched
    again from the new state, so the first character lands in the buffer.
- A token still being buffered when the input ends is flushed as a final
    token.
"""

from __future__ import annotations
import logging
import string
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

from errors import UnexpectedSymbol
from tokens import CharClass, PreToken, ScannerState, STATE_CATEGORIES

logger = logging.getLogger(__name__)

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters + "_")
SEPARATOR_CHARS = frozenset(":;=()>{}+-!<")
COMMENT_MARKER = "#"


class Action(Enum):
    SKIP = auto()  # consume, buffer untouched
    SHIFT = auto()  # append to buffer and consume
    ENTER = auto()  # switch state, re-dispatch the same character
    EMIT = auto()  # emit buffer, switch state, re-dispatch
    FAIL = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Transition:
    action: Action
    target: Optional[ScannerState]


def classify_char(ch: str) -> CharClass:
    """Return the character class of a single character."""
    if ch in DIGITS:
        return CharClass.DIGIT
    if ch in LETTERS:
        return CharClass.LETTER
    if ch in SEPARATOR_CHARS:
        return CharClass.SEPARATOR
    if ch == COMMENT_MARKER:
        return CharClass.COMMENT_MARKER
    if ch == "\n":
        return CharClass.NEWLINE
    if ch.isspace():
        return CharClass.WHITESPACE
    return CharClass.OTHER


def _build_transitions() -> Dict[Tuple[ScannerState, CharClass], Transition]:
    S = ScannerState
    table: Dict[Tuple[ScannerState, CharClass], Transition] = {}

    # START dispatches on the first character of each lexeme.
    start = {
        CharClass.DIGIT: Transition(Action.ENTER, S.DIGIT),
        CharClass.LETTER: Transition(Action.ENTER, S.IDENTIFIER),
        CharClass.SEPARATOR: Transition(Action.ENTER, S.SEPARATOR),
        CharClass.COMMENT_MARKER: Transition(Action.SKIP, S.COMMENT),
        CharClass.NEWLINE: Transition(Action.SKIP, S.START),
        CharClass.WHITESPACE: Transition(Action.SKIP, S.START),
        CharClass.OTHER: Transition(Action.FAIL, None),
    }

    # Characters each token state keeps accumulating.
    continues = {
        S.DIGIT: {CharClass.DIGIT},
        S.SEPARATOR: {CharClass.SEPARATOR},
        S.IDENTIFIER: {CharClass.LETTER, CharClass.DIGIT},
    }

    for cls in CharClass:
        table[(S.START, cls)] = start[cls]
        for state, accepted in continues.items():
            if cls in accepted:
                table[(state, cls)] = Transition(Action.SHIFT, state)
            else:
                table[(state, cls)] = Transition(Action.EMIT, S.START)
        if cls == CharClass.NEWLINE:
            table[(S.COMMENT, cls)] = Transition(Action.SKIP, S.START)
        else:
            table[(S.COMMENT, cls)] = Transition(Action.SKIP, S.COMMENT)

    return table


TRANSITIONS = _build_transitions()


@dataclass
class ScanResult:
    tokens: List[PreToken] = field(default_factory=list)
    errors: List[UnexpectedSymbol] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class Scanner:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None

        self.state = ScannerState.START
        self.buffer: List[str] = []
        self.token_line = 1
        self.token_column = 1
        self.tokens: List[PreToken] = []

    def error(self) -> UnexpectedSymbol:
        return UnexpectedSymbol(self.current_char, self.line, self.column)

    def advance(self) -> None:
        """Advance to next character."""
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def emit(self) -> None:
        """Emit the buffered lexeme as a token of the current state's category."""
        token = PreToken(
            "".join(self.buffer),
            STATE_CATEGORIES[self.state],
            self.token_line,
            self.token_column,
        )
        logger.debug("emit %r at %d:%d", token, token.line, token.column)
        self.tokens.append(token)
        self.buffer = []

    def step(self) -> None:
        """Run one transition on the current character."""
        transition = TRANSITIONS[(self.state, classify_char(self.current_char))]

        match transition.action:
            case Action.SKIP:
                self.advance()
            case Action.SHIFT:
                self.buffer.append(self.current_char)
                self.advance()
            case Action.ENTER:
                self.token_line = self.line
                self.token_column = self.column
            case Action.EMIT:
                self.emit()
            case Action.FAIL:
                raise self.error()

        self.state = transition.target or self.state

    def finish(self) -> None:
        """Flush a lexeme still being buffered when the input runs out."""
        if self.state in STATE_CATEGORIES and self.buffer:
            self.emit()
        self.state = ScannerState.START

    def scan(self, fail_fast: bool = True) -> ScanResult:
        """Scan the whole input and return the tokens and any errors."""
        result = ScanResult(tokens=self.tokens)

        while self.current_char is not None:
            try:
                self.step()
            except UnexpectedSymbol as e:
                result.errors.append(e)
                if fail_fast:
                    return result
                # Skip the offending character and carry on from START.
                self.advance()

        self.finish()
        return result


def try_scan(text: str, fail_fast: bool = True) -> ScanResult:
    """Scan `text` without raising; errors are returned in the result."""
    return Scanner(text).scan(fail_fast=fail_fast)


def scan(text: str) -> List[PreToken]:
    """Return all tokens of `text`, raising `UnexpectedSymbol` on failure."""
    result = try_scan(text)
    if not result.ok:
        raise result.errors[0]
    return result.tokens
