"""Plain-text rendering and parsing of completed grids.

Each grid is written as one row word per line followed by a blank line, so
output can be split back into grids on blank lines.
"""

from __future__ import annotations

import sys
from typing import Iterable, List, Sequence

from ..core.models import Grid


def format_grid(grid: Sequence[str]) -> str:
    return "\n".join(grid) + "\n"


def write_grids(grids: Iterable[Sequence[str]], stream=None) -> int:
    """Write each grid followed by a blank separator line; return the count."""

    stream = stream or sys.stdout
    count = 0
    for grid in grids:
        print(format_grid(grid), file=stream, flush=True)
        count += 1
    return count


def parse_grids(text: str) -> List[Grid]:
    """Split blank-line delimited output back into grids."""

    grids: List[Grid] = []
    block: List[str] = []
    for line in text.splitlines():
        line = line.strip()
        if line:
            block.append(line)
            continue
        if block:
            grids.append(tuple(block))
            block = []
    if block:
        grids.append(tuple(block))
    return grids


__all__ = ["format_grid", "parse_grids", "write_grids"]
