"""
CandidateEngine: the stateful front door of the engine.

Lifecycle:
  - construct : index the dictionary, candidates = dictionary, score
  - update    : parse one feedback round, filter, rescore -> new count
  - guess     : ranked suggestions from the latest scores
  - reset     : candidates = re-unioned index, rescore -> full count

The dictionary and PositionIndex never change after construction. Every
update/reset builds a fresh immutable EngineState and swaps it in, so a
rejected round leaves the previous state exactly as it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping

from .constraints import ABSENT_RULES, filter_candidates
from .errors import DataSourceError
from .feedback import FeedbackLike, is_word, parse_round
from .index import PositionIndex
from .ranking import TOP_K, rank_guesses
from .scoring import WordScore, score_candidates

logger = logging.getLogger(__name__)

DEFAULT_WORD_LENGTH = 5


@dataclass(frozen=True)
class EngineState:
    candidates: FrozenSet[str]
    scores: Mapping[str, WordScore]

    @classmethod
    def of(cls, candidates: FrozenSet[str], N: int) -> "EngineState":
        return cls(candidates, MappingProxyType(score_candidates(candidates, N)))


class CandidateEngine:
    def __init__(self, words: Iterable[str], N: int = DEFAULT_WORD_LENGTH,
                 absent_rule: str = "counted"):
        if not isinstance(N, int) or N <= 0:
            raise ValueError(f"word length must be a positive integer; got {N!r}")
        if absent_rule not in ABSENT_RULES:
            raise ValueError(f"absent_rule must be one of {ABSENT_RULES}; got {absent_rule!r}")

        dictionary = set()
        for raw in words:
            w = raw.strip().lower()
            if not is_word(w, N):
                raise DataSourceError(f"not a {N}-letter a-z word: {raw!r}")
            dictionary.add(w)
        if not dictionary:
            raise DataSourceError("word source is empty")

        self.N = N
        self.absent_rule = absent_rule
        self._dictionary: FrozenSet[str] = frozenset(dictionary)
        self._index = PositionIndex(self._dictionary, N)
        self._state = EngineState.of(self._dictionary, N)
        logger.info("Loaded %d words (N=%d).", len(self._dictionary), N)

    @classmethod
    def from_path(cls, path: Path | str | None = None, N: int = DEFAULT_WORD_LENGTH,
                  strict: bool = False, absent_rule: str = "counted") -> "CandidateEngine":
        """Build from a word-list file (bundled list when path is None)."""
        # Local import: datasets depends on engine.errors, not the other way round.
        from packages.datasets.io import load_words
        return cls(load_words(path, N=N, strict=strict), N=N, absent_rule=absent_rule)

    # ---- read-only views ----
    @property
    def word_length(self) -> int:
        return self.N

    @property
    def dictionary(self) -> FrozenSet[str]:
        return self._dictionary

    @property
    def index(self) -> PositionIndex:
        return self._index

    @property
    def candidates(self) -> FrozenSet[str]:
        return self._state.candidates

    @property
    def scores(self) -> Mapping[str, WordScore]:
        return self._state.scores

    def __len__(self) -> int:
        return len(self._state.candidates)

    def __contains__(self, word: object) -> bool:
        return word in self._state.candidates

    # ---- operations ----
    def update(self, guess: str, feedback: FeedbackLike) -> int:
        """
        Apply one feedback round and return the remaining candidate count.

        Raises InvalidFeedbackError (state unchanged) on a malformed round.
        0 is a normal return value: the feedback history is contradictory.
        """
        rnd = parse_round(guess, feedback, self.N)
        before = len(self._state.candidates)
        remaining = filter_candidates(self._state.candidates, rnd, self._index, self.absent_rule)
        self._state = EngineState.of(remaining, self.N)
        logger.debug("update %s %s: %d -> %d candidates", rnd.guess, rnd.code(), before, len(remaining))
        return len(remaining)

    def guess(self, k: int = TOP_K) -> Dict[str, int]:
        """Up to k best candidates -> frequency score, best first."""
        return rank_guesses(self._state.scores, k)

    def reset(self) -> int:
        """Restore the full dictionary and return its size."""
        self._state = EngineState.of(self._index.all_words(), self.N)
        logger.debug("reset: %d candidates", len(self._state.candidates))
        return len(self._state.candidates)
