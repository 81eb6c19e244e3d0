"""
Positional index over a fixed dictionary.

The index is a 26 x N table of frozensets: `matrix[letter][pos]` holds every
dictionary word with `letter` at `pos`. Union a row to get every word
containing a letter; union a column to get the whole dictionary back.

Built once; read-only afterwards.
"""

from __future__ import annotations

from functools import reduce
from operator import or_
from typing import FrozenSet, Iterable, List, Tuple

from .feedback import ALPHABET

Matrix = Tuple[Tuple[FrozenSet[str], ...], ...]


def _ord(ch: str) -> int:
    return ord(ch) - ord("a")


class PositionIndex:
    def __init__(self, words: Iterable[str], N: int):
        self.N = N
        cells: List[List[set]] = [[set() for _ in range(N)] for _ in ALPHABET]
        for w in words:
            for i, ch in enumerate(w):
                cells[_ord(ch)][i].add(w)
        self.matrix: Matrix = tuple(tuple(frozenset(s) for s in row) for row in cells)

    def at(self, letter: str, pos: int) -> FrozenSet[str]:
        """Words with `letter` at `pos`."""
        return self.matrix[_ord(letter)][pos]

    def containing(self, letter: str) -> FrozenSet[str]:
        """Words with `letter` anywhere."""
        return reduce(or_, self.matrix[_ord(letter)], frozenset())

    def elsewhere(self, letter: str, pos: int) -> FrozenSet[str]:
        """Words with `letter` at some position other than `pos`."""
        row = self.matrix[_ord(letter)]
        return reduce(or_, (s for j, s in enumerate(row) if j != pos), frozenset())

    def all_words(self) -> FrozenSet[str]:
        """Re-union the whole table (every word appears once per position)."""
        return reduce(or_, (s for row in self.matrix for s in row), frozenset())
