"""Data models shared by the indexer and the search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple

from .constants import Bounds

Grid = Tuple[str, ...]


@dataclass(frozen=True)
class WordIndex:
    """Row candidates and column prefix table built from one dictionary.

    ``rows`` is sorted ascending and fixes the order grids are emitted in.
    ``prefixes[i]`` holds every length ``i + 1`` prefix of a column word.
    """

    width: int
    height: int
    rows: Tuple[str, ...]
    prefixes: Tuple[FrozenSet[str], ...]

    @property
    def bounds(self) -> Bounds:
        return Bounds(rows=self.height, cols=self.width)

    @property
    def columns(self) -> FrozenSet[str]:
        """Full-length column words."""
        return self.prefixes[-1] if self.prefixes else frozenset()


@dataclass(frozen=True)
class GridState:
    """Rows chosen so far plus the row candidates still letter-disjoint from them."""

    candidates: Tuple[str, ...]
    rows: Tuple[str, ...] = ()

    @property
    def depth(self) -> int:
        return len(self.rows)

    def column_prefix(self, col: int, word: str) -> str:
        return "".join(row[col] for row in self.rows) + word[col]

    def extend(self, word: str) -> "GridState":
        """Return the child state with ``word`` appended as the next row."""

        letters = frozenset(word)
        narrowed = tuple(w for w in self.candidates if letters.isdisjoint(w))
        return GridState(
            candidates=narrowed,
            rows=self.rows + (word,),
        )
