# apps/cli/assist.py
"""
Interactive Wordle assistant.

This script:
  1) Validates the dictionary (prints counts + SHA) and builds the engine.
  2) Reads one command per line and drives the engine:
       q / quit                    leave
       h / help                    show the menu
       g / guess                   ranked suggestions
       f / feedback <word> <score> apply feedback, then suggest
       r / reset                   start a new puzzle with the full dictionary

Usage:
    python -m apps.cli.assist
    python -m apps.cli.assist --words my_words.txt --N 6 --top 10
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, Iterable, List, Optional

from packages.datasets import default_wordlist, pretty_summary, validate_wordlist
from packages.engine import (
    CandidateEngine,
    DataSourceError,
    DEFAULT_WORD_LENGTH,
    TOP_K,
    validate_feedback,
)
from packages.engine.constraints import ABSENT_RULES

WELCOME = "\n--- Welcome to Wordle Assistant ---"
GOODBYE = "Goodbye."


def help_text(N: int = DEFAULT_WORD_LENGTH) -> str:
    example = "f adieu 11020" if N == 5 else f"f {'a' * N} {'0' * N}"
    return (
        "\n(Q) Quit: Quit playing\n"
        "(H) Help: Show this menu\n"
        "(G) Guess: Request a guess\n"
        f"(F) Feedback: Give feedback on last guess. Example: \"{example}\"\n"
        "(R) Reset: Start a new puzzle\n"
    )


def format_guesses(ranking: Dict[str, int]) -> str:
    """One 'word  score' line per suggestion, best first."""
    if not ranking:
        return "No remaining candidates."
    return "\n".join(f"{i}. {w}  {s}" for i, (w, s) in enumerate(ranking.items(), 1))


def handle_line(engine: CandidateEngine, line: str, top: int = TOP_K) -> Optional[str]:
    """
    Run one command against `engine`.

    Returns the text to print, or None when the user asked to quit.
    """
    tokens = line.split()
    if not tokens:
        return ""

    cmd = tokens[0].lower()
    if cmd in ("q", "quit"):
        return None
    if cmd in ("h", "help"):
        return help_text(engine.word_length)
    if cmd in ("g", "guess"):
        return format_guesses(engine.guess(top))
    if cmd in ("r", "reset"):
        return f"Reset: {engine.reset()} word(s) available"
    if cmd in ("f", "feedback"):
        err = validate_feedback(tokens, engine.word_length)
        if err:
            return err
        remaining = engine.update(tokens[1], tokens[2])
        return f"Remaining word(s) {remaining}\n{format_guesses(engine.guess(top))}"
    return "Invalid command"


def repl(engine: CandidateEngine, lines: Iterable[str], out: Callable[[str], None] = print,
         top: int = TOP_K) -> None:
    """Feed `lines` through handle_line until quit or end of input."""
    for line in lines:
        reply = handle_line(engine, line, top)
        if reply is None:
            break
        if reply:
            out(reply)
    out(GOODBYE)


def positive_int(s: str) -> int:
    """argparse type: an integer >= 1."""
    try:
        n = int(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer; got {s!r}") from e
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1; got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle-assist: interactive guess suggestions")
    ap.add_argument("--words", help="dictionary file, one word per line (default: bundled list)")
    ap.add_argument("--N", type=positive_int, default=DEFAULT_WORD_LENGTH, help="word length (e.g., 5 or 6)")
    ap.add_argument("--top", type=positive_int, default=TOP_K, help="number of suggestions to show")
    ap.add_argument("--strict", action="store_true",
                    help="reject the dictionary on any malformed line instead of skipping it")
    ap.add_argument("--absent-rule", choices=ABSENT_RULES, default="counted",
                    help="'counted' handles repeated letters; 'any' drops every word holding an absent letter")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # 1) Validate the dictionary and print a one-liner summary
    path = args.words or str(default_wordlist(args.N))
    print(pretty_summary(validate_wordlist(args.N, path)))

    # 2) Build the engine; a bad dictionary is fatal
    try:
        engine = CandidateEngine.from_path(path, N=args.N, strict=args.strict,
                                           absent_rule=args.absent_rule)
    except DataSourceError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Loaded {len(engine.dictionary)} words.")
    print(WELCOME)
    print(help_text(args.N))

    # 3) Command loop
    repl(engine, sys.stdin, top=args.top)
    return 0


if __name__ == "__main__":
    sys.exit(main())
