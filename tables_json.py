"""Convert a `SymbolSession` into JSON-serializable structures.

`session_to_json(session)` returns a dict of plain lists and dicts that can
be handed straight to `json.dump`.
"""

from typing import Any, Dict

from symbols import StandardSymbol, SymbolSession


def symbol_to_json(symbol: StandardSymbol) -> Dict[str, Any]:
    return {"value": symbol.value, "table": str(symbol.table), "index": symbol.index}


def session_to_json(session: SymbolSession) -> Dict[str, Any]:
    return {
        "keywords": list(session.keywords),
        "separators": list(session.separators),
        "literals": list(session.literals),
        "identifiers": list(session.identifiers),
        "trace": [symbol_to_json(s) for s in session.trace],
    }
