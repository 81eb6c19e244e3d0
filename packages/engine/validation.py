"""
Lightweight validation of a typed feedback command.

This module answers the question: "Can this `f <word> <digits>` line be
handed to the engine?" The tokens are acceptable iff:
  - there are exactly three of them (command, word, score)
  - the word has exact length N and only letters (either case)
  - the score has exact length N and only digits 0-2

Each failure has its own message so the shell can print it verbatim. The
engine's own checks (parse_round) still apply; this only produces friendlier
messages for interactive use.
"""

from __future__ import annotations

import re
from typing import Sequence

_LETTERS = re.compile(r"[a-zA-Z]+")
_DIGITS = re.compile(r"[0-2]+")


def feedback_usage(N: int) -> str:
    example = "f adieu 11020" if N == 5 else f"f {'a' * N} {'0' * N}"
    return (
        f"Usage: \"feedback <guess> <score>\" where score is {N} digits from 0 to 2.\n"
        "0: Wrong letter\n"
        "1: Correct letter, wrong position\n"
        "2: Correct letter, correct position\n"
        f"Example: \"{example}\"\n"
    )


def validate_feedback(tokens: Sequence[str], N: int) -> str:
    """
    Return "" if `tokens` form a valid feedback command, else the message to show.

    Args:
      tokens : whitespace-split command line, e.g. ["f", "adieu", "11020"]
      N      : required word length
    """
    if len(tokens) != 3:
        return feedback_usage(N)

    _, word, digits = tokens
    if len(word) != N:
        return f"Word must be {N} letters."
    if not _LETTERS.fullmatch(word):
        return "Word must only contain letters."
    if len(digits) != N:
        return f"Score must be {N} digits."
    if not _DIGITS.fullmatch(digits):
        return "Score must only contain digits between 0 and 2."
    return ""
