"""
Command-line front end for typeahead.

Loads a corpus file and either answers one query or runs an interactive
session that re-runs the search after every keystroke.

Usage:
    typeahead wikipedia.txt --query "fir"
    typeahead wikipedia.txt            # interactive, ESC or Ctrl-C to quit
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from .config import SearchConfig
from .corpus import load_corpus
from .errors import TypeaheadError
from .search import IncrementalSearch, SearchResult, format_corrections

ESC = 0x1B
CTRL_C = 0x03
BACKSPACE = 0x08
LINUX_DEL = 0x7F


# ---------- key input ----------
def getch() -> int:
    """Read one key press without echo or line buffering."""
    try:
        import msvcrt
    except ImportError:
        msvcrt = None

    if msvcrt is not None:
        return ord(msvcrt.getwch())

    import termios
    import tty

    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old_settings)
    # EOF ends the session like ESC
    return ord(ch) if ch else ESC


@dataclass
class QueryEditor:
    """Query text edited one key at a time."""
    text: str = ""
    finished: bool = False

    def press(self, key: int) -> bool:
        """
        Apply one key code.

        Returns:
            True if the query text changed
        """
        if key in (ESC, CTRL_C):
            self.finished = True
            return False
        if key in (BACKSPACE, LINUX_DEL):
            if not self.text:
                return False
            self.text = self.text[:-1]
            return True
        if key < 0x20:  # control characters
            return False
        self.text += chr(key)
        return True


# ---------- output ----------
def print_result(result: SearchResult, show_latency: bool = True) -> None:
    print()
    print(" ============== ")
    print(f"Search: '{result.query}'...")
    for entry in result.results:
        print(f" > {entry}")
    line = f"Corrections: {format_corrections(result.corrections)}"
    if show_latency:
        line += f" ({result.latency_ms:.1f} ms)"
    print(line)


def run_interactive(search: IncrementalSearch, read_key: Callable[[], int] = getch) -> str:
    """
    Re-run the search after every edit until ESC or Ctrl-C.

    Returns:
        The final query text
    """
    editor = QueryEditor()
    while True:
        key = read_key()
        changed = editor.press(key)
        if editor.finished:
            break
        if changed:
            print_result(search.autocomplete(editor.text))
    return editor.text


# ---------- entry point ----------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="typeahead", description="Type-ahead search with spelling corrections")
    parser.add_argument("corpus", help="Text file with one corpus entry per line")
    parser.add_argument("--query", help="Run a single query instead of the interactive session")
    parser.add_argument("--max-results", type=int, help="Maximum number of results per query")
    parser.add_argument("--max-corrections", type=int, help="Maximum number of corrections shown")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar while indexing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s: %(message)s',
    )

    try:
        config = SearchConfig.from_env()
        overrides = {}
        if args.max_results is not None:
            overrides["max_result_count"] = args.max_results
        if args.max_corrections is not None:
            overrides["max_correction_count"] = args.max_corrections
        if overrides:
            config = replace(config, **overrides)
    except TypeaheadError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2

    corpus = load_corpus(args.corpus)
    search = IncrementalSearch(corpus, config=config, show_progress=args.progress)
    print(f"Loaded {len(search)} entries")

    if args.query is not None:
        print_result(search.autocomplete(args.query), show_latency=False)
        return 0

    try:
        run_interactive(search)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
