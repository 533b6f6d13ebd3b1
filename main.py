from __future__ import annotations
import json
import logging
from typing import List, Optional, Tuple

from classifier import classify, try_classify
from errors import LexicalError
from lexer import scan, try_scan
from pretty_printer import TablePrinter
from symbols import SymbolSession
from tables_json import session_to_json
from tokens import PreToken
from fsm_viz import write_and_render

logger = logging.getLogger(__name__)


DEMO_PROGRAM = """
    const a: number = 432;
    let b: number;
    let c: number;

    b = 3; # comment ; b = 9999;

    if (a === b) {
        c = a + b;
    } else {
        c = b - a;
    }
"""


def lex(text: str) -> List[PreToken]:
    """Tokenize input string."""
    return scan(text)


def analyze(
    text: str, session: Optional[SymbolSession] = None
) -> Tuple[List[PreToken], SymbolSession]:
    """Scan and classify `text`, returning the tokens and the populated session.

    A fresh session is created when none is given. Raises `LexicalError` from
    whichever stage fails first.
    """
    if session is None:
        session = SymbolSession()
    tokens = scan(text)
    classify(tokens, session)
    return tokens, session


def _collect_errors(text: str, session: SymbolSession) -> Tuple[List[PreToken], List[LexicalError]]:
    scanned = try_scan(text, fail_fast=False)
    if not scanned.ok:
        # Classify into a scratch session so a failed run leaves `session` untouched.
        session = SymbolSession(keywords=session.keywords, separators=session.separators)
    classified = try_classify(scanned.tokens, session, fail_fast=False)
    return scanned.tokens, list(scanned.errors) + list(classified.errors)


def process_program(
    text: str,
    *,
    session: Optional[SymbolSession] = None,
    print_tokens: bool = False,
    print_tables: bool = True,
    dump_tables_path: Optional[str] = None,
    collect_errors: bool = False,
) -> bool:
    """Process a single program: scan, classify and optionally print or dump the tables.

    Returns True when both stages succeed. Errors are printed rather than
    raised so the caller can keep going (as the REPL does).
    """
    if session is None:
        session = SymbolSession()

    if collect_errors:
        tokens, errors = _collect_errors(text, session)
        if errors:
            for e in errors:
                print(f"Lexical error: {e}")
            return False
    else:
        try:
            tokens, session = analyze(text, session)
        except LexicalError as e:
            print(f"Lexical error: {e}")
            return False

    if print_tokens:
        print(f"Tokens ({len(tokens)}):")
        print(TablePrinter.print_pre_tokens(tokens))
        print()

    if print_tables:
        print(TablePrinter.print_session(session))

    if dump_tables_path:
        try:
            with open(dump_tables_path, "w", encoding="utf-8") as fh:
                json.dump(session_to_json(session), fh, indent=2, ensure_ascii=False)
            print(f"Wrote symbol tables JSON to {dump_tables_path}")
        except OSError as e:
            print(f"Failed to write symbol tables JSON to {dump_tables_path}: {e}")
            return False

    return True


def interactive_mode(
    print_tokens: bool = False,
    print_tables: bool = True,
    collect_errors: bool = False,
) -> None:
    """Run an interactive REPL; each line is analyzed in a fresh session."""
    print("\nInteractive Scanner Mode (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            text = input("\nEnter program: ").strip()
            if text.lower() in ("quit", "exit", "q"):
                print("Goodbye!")
                break

            if not text:
                continue

            process_program(
                text,
                print_tokens=print_tokens,
                print_tables=print_tables,
                collect_errors=collect_errors,
            )

        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting...")
            break


def build_arg_parser():
    import argparse

    parser = argparse.ArgumentParser(
        description="Scan a program and print its symbol tables"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to process"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    group.add_argument(
        "--demo", dest="demo", action="store_true", help="Process the built-in demo program"
    )
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print scanner tokens"
    )
    parser.add_argument(
        "--no-tables",
        dest="print_tables",
        action="store_false",
        help="Do not print the symbol tables",
    )
    parser.add_argument(
        "--dump-tables", dest="dump_tables", help="Path to write symbol tables JSON"
    )
    parser.add_argument(
        "--collect-errors",
        dest="collect_errors",
        action="store_true",
        help="Report every lexical error instead of stopping at the first",
    )
    parser.add_argument(
        "--viz-fsm",
        dest="viz_fsm",
        help="Path (without extension) to write Graphviz visualization of the scanner",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.add_argument(
        "--verbose", "-v", dest="verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.viz_fsm:
        try:
            write_and_render(args.viz_fsm, fmt=args.viz_format)
            print(f"Wrote scanner visualization to {args.viz_fsm}.{args.viz_format}")
        except Exception as e:
            logger.debug("graphviz render failed", exc_info=True)
            print(f"Failed to render scanner visualization to {args.viz_fsm}: {e}")
            return 1

    if args.interactive:
        interactive_mode(
            print_tokens=args.print_tokens,
            print_tables=args.print_tables,
            collect_errors=args.collect_errors,
        )
        return 0

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            return 1
    elif args.demo:
        text = DEMO_PROGRAM
    else:
        if not args.viz_fsm:
            parser.print_help()
        return 0

    ok = process_program(
        text,
        print_tokens=args.print_tokens,
        print_tables=args.print_tables,
        dump_tables_path=args.dump_tables,
        collect_errors=args.collect_errors,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    import sys

    sys.exit(main())
