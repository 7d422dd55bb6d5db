"""Depth-first backtracking search over row choices."""

from __future__ import annotations

from typing import FrozenSet, Iterator, Sequence

from ..core.models import Grid, GridState, WordIndex
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def fits_columns(state: GridState, word: str, prefixes: Sequence[FrozenSet[str]]) -> bool:
    """Return True when every partial column stays a known column prefix."""

    bucket = prefixes[state.depth]
    for col in range(len(word)):
        if state.column_prefix(col, word) not in bucket:
            return False
    return True


def find_grids(
    candidates: Sequence[str],
    prefixes: Sequence[FrozenSet[str]],
    height: int,
    rows: Sequence[str] = (),
) -> Iterator[Grid]:
    """Yield every completed grid reachable from ``rows``.

    ``candidates`` must already be letter-disjoint from ``rows`` and sorted;
    grids come out in that order, compared on the first differing row.
    Neither argument is modified.
    """

    yield from _descend(GridState(candidates=tuple(candidates), rows=tuple(rows)), prefixes, height)


def _descend(state: GridState, prefixes: Sequence[FrozenSet[str]], height: int) -> Iterator[Grid]:
    last_row = state.depth == height - 1
    for word in state.candidates:
        if not fits_columns(state, word, prefixes):
            continue
        if last_row:
            yield state.rows + (word,)
            continue
        yield from _descend(state.extend(word), prefixes, height)


def search(index: WordIndex) -> Iterator[Grid]:
    """Enumerate all grids for ``index`` starting from an empty grid."""

    LOGGER.debug(
        "Searching %dx%d grids over %d row candidates",
        index.width,
        index.height,
        len(index.rows),
    )
    return find_grids(index.rows, index.prefixes, index.height)


__all__ = ["find_grids", "fits_columns", "search"]
