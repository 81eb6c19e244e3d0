"""
Letter-statistics scoring over the CURRENT candidate set.

Two statistics, both rebuilt from scratch whenever the candidate set changes:
  - global letter frequency   : 26-vector, occurrences across all positions
  - positional letter ranking : N x 26, rank 1 = most common letter at that
                                position, 26 = least common / never seen.
                                Ties keep alphabetical order (stable sort).

Each candidate gets a WordScore(frequency, positional):
  - frequency  : sum of global frequencies of its letters; the first copy of a
                 letter counts in full, later copies count freq // divisor
  - positional : sum over positions of (27 - rank)

divisor = max_freq // (min_freq - 1), with the denominator floored at 1 and
the result floored at 1 (min_freq <= 1 is common once candidates shrink).

min_freq is taken over all 26 letters, not just the ones present. After the
first update some letter is almost always missing, so the divisor becomes
max_freq and a repeated copy is worth freq // max_freq, i.e. 0 or 1. This is
intended: once the field narrows, repeated letters add next to nothing.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, NamedTuple

import numpy as np

from .feedback import ALPHABET

NUM_LETTERS = len(ALPHABET)


class WordScore(NamedTuple):
    frequency: int
    positional: int


def encode(words: List[str], N: int) -> np.ndarray:
    """(len(words), N) array of letter ordinals 0..25."""
    if not words:
        return np.zeros((0, N), dtype=np.int64)
    raw = np.frombuffer("".join(words).encode("ascii"), dtype=np.uint8)
    return raw.reshape(len(words), N).astype(np.int64) - ord("a")


def positional_counts(codes: np.ndarray, N: int) -> np.ndarray:
    """counts[pos, letter] over the encoded candidates."""
    return np.stack([np.bincount(codes[:, i], minlength=NUM_LETTERS) for i in range(N)])


def letter_frequency(pos_counts: np.ndarray) -> np.ndarray:
    return pos_counts.sum(axis=0)


def positional_ranks(pos_counts: np.ndarray) -> np.ndarray:
    """ranks[pos, letter] in 1..26; higher count -> smaller rank."""
    order = np.argsort(-pos_counts, axis=1, kind="stable")
    ranks = np.empty_like(order)
    rows = np.arange(pos_counts.shape[0])[:, None]
    ranks[rows, order] = np.arange(1, NUM_LETTERS + 1)
    return ranks


def repeat_divisor(freq: np.ndarray) -> int:
    hi = int(freq.max())
    lo = int(freq.min())
    return max(hi // max(lo - 1, 1), 1)


def frequency_score(word: str, freq: np.ndarray, divisor: int) -> int:
    seen = set()
    s = 0
    for ch in word:
        f = int(freq[ord(ch) - ord("a")])
        s += f // divisor if ch in seen else f
        seen.add(ch)
    return s


def score_candidates(candidates: Iterable[str], N: int) -> Dict[str, WordScore]:
    """
    Score every candidate against the statistics of the whole candidate set.
    Returns {} for an empty set.
    """
    words = sorted(candidates)
    if not words:
        return {}

    codes = encode(words, N)
    pos_counts = positional_counts(codes, N)
    freq = letter_frequency(pos_counts)
    divisor = repeat_divisor(freq)

    ranks = positional_ranks(pos_counts)
    positional = (NUM_LETTERS + 1 - ranks[np.arange(N), codes]).sum(axis=1)

    return {
        w: WordScore(frequency_score(w, freq, divisor), int(p))
        for w, p in zip(words, positional)
    }
