"""Classify scanned tokens into the symbol tables of a `SymbolSession`.

Each `PreToken` is resolved to a table and an index and recorded as a
`StandardSymbol` at the end of the session's trace:

- separators must match an entry of the separator table exactly,
- literals are interned into the literal table,
- identifiers that spell a keyword point into the keyword table; all other
  identifiers are interned into the identifier table.

A call either classifies every token or leaves the session untouched.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List

from errors import UndefinedSeparator
from symbols import StandardSymbol, SymbolSession, TableKind
from tokens import PreToken, TokenCategory

logger = logging.getLogger(__name__)


@dataclass
class ClassifyResult:
    symbols: List[StandardSymbol] = field(default_factory=list)
    errors: List[UndefinedSeparator] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def resolve_token(token: PreToken, session: SymbolSession) -> StandardSymbol:
    """Resolve a single token, interning it if needed."""
    match token.category:
        case TokenCategory.SEPARATOR:
            idx = session.separators.index_of(token.value)
            if idx is None:
                raise UndefinedSeparator(token.value, token.line, token.column)
            return StandardSymbol(token.value, TableKind.SEPARATOR, idx)

        case TokenCategory.LITERAL:
            idx = session.literals.intern(token.value)
            return StandardSymbol(token.value, TableKind.LITERAL, idx)

        case TokenCategory.IDENTIFIER:
            # Keywords shadow identifiers entirely.
            idx = session.keywords.index_of(token.value)
            if idx is not None:
                return StandardSymbol(token.value, TableKind.KEYWORD, idx)
            idx = session.identifiers.intern(token.value)
            return StandardSymbol(token.value, TableKind.IDENTIFIER, idx)

    raise ValueError(f"Unknown token category {token.category!r}")


def try_classify(
    tokens: List[PreToken], session: SymbolSession, fail_fast: bool = True
) -> ClassifyResult:
    """Classify `tokens` into `session` without raising.

    With `fail_fast` false every undefined separator is reported instead of
    only the first. If any error is found the session is rolled back to its
    state before the call and `symbols` is empty.
    """
    result = ClassifyResult()

    with session.lock:
        literals_len = len(session.literals)
        identifiers_len = len(session.identifiers)

        def rollback() -> None:
            session.literals.truncate(literals_len)
            session.identifiers.truncate(identifiers_len)

        try:
            for token in tokens:
                try:
                    symbol = resolve_token(token, session)
                except UndefinedSeparator as e:
                    result.errors.append(e)
                    if fail_fast:
                        break
                    continue
                logger.debug("resolved %r -> (%s, %d)", token.value, symbol.table, symbol.index)
                result.symbols.append(symbol)
        except BaseException:
            logger.debug("rolling back after unexpected failure", exc_info=True)
            rollback()
            raise

        if result.errors:
            logger.debug(
                "rolling back %d symbol(s) after %d error(s)",
                len(result.symbols),
                len(result.errors),
            )
            rollback()
            result.symbols = []
        else:
            session.trace.extend(result.symbols)

    return result


def classify(tokens: List[PreToken], session: SymbolSession) -> List[StandardSymbol]:
    """Classify `tokens` into `session` and return the symbols appended to the trace.

    Raises `UndefinedSeparator` for the first separator run that is not in the
    separator table; the session is left as it was before the call.
    """
    result = try_classify(tokens, session)
    if not result.ok:
        raise result.errors[0]
    return result.symbols
