"""
Top-k guess selection.

Order: frequency score (desc), positional score (desc), then word (asc).
"""

from __future__ import annotations

import heapq
from typing import Dict, Mapping

from .scoring import WordScore

TOP_K = 5


def rank_guesses(scores: Mapping[str, WordScore], k: int = TOP_K) -> Dict[str, int]:
    """
    Return up to k words mapped to their frequency score, best first.

    The dict's insertion order is the ranking; an empty `scores` gives {}.
    """
    if k <= 0:
        return {}
    # nlargest keeps input order among equal keys, so feed it sorted words.
    best = heapq.nlargest(k, sorted(scores), key=lambda w: scores[w])
    return {w: scores[w].frequency for w in best}
