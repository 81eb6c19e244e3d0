"""
Candidate filtering for one feedback round.

Given:
  - the current candidate set
  - one parsed FeedbackRound (guess + marks)
  - the dictionary's PositionIndex

Return:
  - a NEW frozenset of candidates consistent with that round.

Per position i with letter c:
  - EXACT   : keep words in matrix[c][i]
  - PRESENT : keep words in the union of matrix[c][j] for j != i
  - ABSENT  : drop words in the union of matrix[c][*]

Every rule is a plain intersection or difference against the candidate set,
so the order positions are applied in never changes the result.

Repeated letters:
  absent_rule="any" applies the ABSENT rule literally, even when the same
  letter is also marked PRESENT/EXACT elsewhere in the guess. That drops the
  real answer for guesses like "speed" vs "abide" ('e' is 1 then 0), which
  is what earlier versions of the assistant did.

  absent_rule="counted" (default) reads such an ABSENT mark as "no further
  copies": words with c at i are dropped, and so are words holding more
  copies of c than the round confirmed. A letter with only ABSENT marks is
  treated exactly as under "any".
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, FrozenSet, Iterable

from .feedback import Feedback, FeedbackRound
from .index import PositionIndex

ABSENT_RULES = ("counted", "any")


def confirmed_counts(rnd: FeedbackRound) -> Counter:
    """How many PRESENT/EXACT marks each letter received in this round."""
    return Counter(c for c, m in rnd if m is not Feedback.ABSENT)


def filter_candidates(
        candidates: Iterable[str],
        rnd: FeedbackRound,
        index: PositionIndex,
        absent_rule: str = "counted",
) -> FrozenSet[str]:
    """
    Narrow `candidates` to the words consistent with `rnd`.

    The input is never mutated; the result is always a subset of it.
    """
    if absent_rule not in ABSENT_RULES:
        raise ValueError(f"absent_rule must be one of {ABSENT_RULES}; got {absent_rule!r}")

    confirmed = confirmed_counts(rnd)
    caps: Dict[str, int] = {}
    keep = set(candidates)

    for i, (c, m) in enumerate(rnd):
        if m is Feedback.EXACT:
            keep &= index.at(c, i)
        elif m is Feedback.PRESENT:
            keep &= index.elsewhere(c, i)
        elif absent_rule == "any" or not confirmed[c]:
            keep -= index.containing(c)
        else:
            keep -= index.at(c, i)
            caps[c] = confirmed[c]

    if caps:
        keep = {w for w in keep if all(w.count(c) <= n for c, n in caps.items())}

    return frozenset(keep)
