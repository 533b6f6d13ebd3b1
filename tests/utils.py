from lexer import scan
from classifier import classify
from symbols import SymbolSession


def lex_pairs(text: str):
    """Return (value, category) pairs for the tokens of `text`."""
    return [(t.value, t.category) for t in scan(text)]


def classify_text(text: str, session=None):
    """Convenience: scan+classify `text` into a (fresh) session and return it."""
    if session is None:
        session = SymbolSession()
    classify(scan(text), session)
    return session


def trace_refs(session):
    """Return the trace as (value, table, index) triples."""
    return [(s.value, s.table, s.index) for s in session.trace]
