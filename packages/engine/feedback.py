"""
Feedback symbols and round parsing.

Conventions (external digit encoding, kept exactly):
  - '0' : absent            = letter not in the word (see constraints.py for
                              how repeated letters are treated)
  - '1' : present-elsewhere = letter in the word, but not at this position
  - '2' : exact             = letter at this position

A feedback round is a guess word plus one symbol per position. Parsing is the
only place that checks the round's shape; the filtering code assumes a
well-formed `FeedbackRound`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Tuple, Union

from .errors import InvalidFeedbackError

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


class Feedback(IntEnum):
    ABSENT = 0
    PRESENT = 1
    EXACT = 2


# Accepted inputs for a round's marks: "01020", [0, 1, 0, 2, 0], or Feedback members.
FeedbackLike = Union[str, Iterable[Union[int, Feedback]]]


@dataclass(frozen=True)
class FeedbackRound:
    guess: str
    marks: Tuple[Feedback, ...]

    def __iter__(self):
        return iter(zip(self.guess, self.marks))

    def code(self) -> str:
        """Digit encoding of the marks, e.g. '00120'."""
        return "".join(str(int(m)) for m in self.marks)


def is_word(w: str, N: int) -> bool:
    """True if `w` is exactly N lowercase a–z letters."""
    return len(w) == N and all(ch in ALPHABET for ch in w)


_DIGIT_MARKS = {str(int(f)): f for f in Feedback}


def _parse_mark(m) -> Feedback:
    # Only digit characters, ints and Feedback members; floats and bools are rejected.
    if isinstance(m, str) and m in _DIGIT_MARKS:
        return _DIGIT_MARKS[m]
    if isinstance(m, int) and not isinstance(m, bool) and 0 <= m <= 2:
        return Feedback(m)
    raise InvalidFeedbackError(f"feedback symbols must be 0, 1 or 2; got {m!r}")


def parse_round(guess: str, feedback: FeedbackLike, N: int) -> FeedbackRound:
    """
    Validate and normalise one guess/feedback pair for a word length of N.

    Raises:
      InvalidFeedbackError if the guess is not N letters, the feedback does
      not have N symbols, or a symbol is outside 0/1/2.
    """
    g = guess.strip().lower()
    if not is_word(g, N):
        raise InvalidFeedbackError(f"guess must be {N} letters a-z; got {guess!r}")

    marks = tuple(_parse_mark(m) for m in (feedback.strip() if isinstance(feedback, str) else feedback))
    if len(marks) != N:
        raise InvalidFeedbackError(f"feedback must have {N} symbols; got {len(marks)}")

    return FeedbackRound(g, marks)
