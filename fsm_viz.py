"""Graphviz visualization of the scanner's state machine.

Provides `render_fsm_dot()` which returns a `graphviz.Digraph` (not
rendered) built from `lexer.TRANSITIONS`, and `write_and_render` which
writes it to disk.

Layout: one ellipse per `ScannerState` plus a box for the failure sink.
Transitions sharing a source and a target are merged into one edge whose
label lists `class/action` pairs, one per line.
"""

from typing import Dict, List, Tuple
from graphviz import Digraph

from lexer import Action, TRANSITIONS
from tokens import ScannerState, STATE_CATEGORIES

ERROR_NODE = "error"


def _collect_edges() -> Dict[Tuple[str, str], List[str]]:
    edges: Dict[Tuple[str, str], List[str]] = {}
    for (state, cls), transition in TRANSITIONS.items():
        if transition.action == Action.FAIL:
            target = ERROR_NODE
        else:
            target = str(transition.target)
        edges.setdefault((str(state), target), []).append(
            f"{cls}/{transition.action}"
        )
    return edges


def render_fsm_dot(fmt: str = "svg") -> Digraph:
    """Return a graphviz.Digraph of the scanner transition table.

    The caller may inspect `dot.source` or call `dot.render(...)` (requires
    the Graphviz binaries).
    """
    dot = Digraph(name="scanner", format=fmt)
    dot.attr("graph", rankdir="LR")

    for state in ScannerState:
        if state == ScannerState.START:
            dot.node(str(state), shape="doublecircle")
        elif state in STATE_CATEGORIES:
            dot.node(
                str(state),
                label=f"{state}\\n[{STATE_CATEGORIES[state]}]",
                shape="ellipse",
            )
        else:
            dot.node(str(state), shape="ellipse")
    dot.node(ERROR_NODE, label="UnexpectedSymbol", shape="box", color="red")

    for (src, dst), labels in _collect_edges().items():
        dot.edge(src, dst, label="\\n".join(labels), fontsize="8")

    return dot


def write_and_render(out_path: str, fmt: str = "svg") -> None:
    """Write and render the state machine to `out_path` (without extension).

    Example: write_and_render('out/scanner', fmt='png') creates out/scanner.png
    (requires Graphviz)."""
    dot = render_fsm_dot(fmt=fmt)
    dot.render(out_path, cleanup=True)
