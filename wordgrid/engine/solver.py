"""CP-SAT enumeration of word grids using OR-Tools.

Builds the same problem the backtracking search solves, as a constraint
model: one letter variable per cell, a table constraint per row and per
column, and all cells pairwise different. Used to cross-check the search.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from ortools.sat.python import cp_model

from ..core.constants import ALPHABET_LEN
from ..core.exceptions import SolverError
from ..core.models import Grid, WordIndex
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class _GridCollector(cp_model.CpSolverSolutionCallback):
    """Records every solution as a tuple of row words."""

    def __init__(self, cell_vars: Dict[Tuple[int, int], cp_model.IntVar], width: int, height: int) -> None:
        super().__init__()
        self._cell_vars = cell_vars
        self._width = width
        self._height = height
        self.grids: List[Grid] = []

    def on_solution_callback(self) -> None:
        self.grids.append(
            tuple(
                "".join(
                    chr(self.value(self._cell_vars[(r, c)]) + ord("A"))
                    for c in range(self._width)
                )
                for r in range(self._height)
            )
        )


def _as_tuples(words) -> List[List[int]]:
    return [[ord(ch) - ord("A") for ch in word] for word in words]


def solve_word_grids(index: WordIndex, timeout: float = 60.0) -> List[Grid]:
    """Return every grid for ``index``, sorted into search order.

    Returns an empty list when the model is infeasible. Raises
    :class:`SolverError` if the solver stops before proving the enumeration
    complete (for instance on timeout).
    """

    width, height = index.width, index.height
    columns = sorted(index.columns)
    if not index.rows or not columns or index.bounds.cells > ALPHABET_LEN:
        return []

    model = cp_model.CpModel()
    cell_vars: Dict[Tuple[int, int], cp_model.IntVar] = {
        (r, c): model.new_int_var(0, ALPHABET_LEN - 1, f"L_{r}_{c}")
        for r in range(height)
        for c in range(width)
    }

    row_tuples = _as_tuples(index.rows)
    for r in range(height):
        model.add_allowed_assignments([cell_vars[(r, c)] for c in range(width)], row_tuples)

    col_tuples = _as_tuples(columns)
    for c in range(width):
        model.add_allowed_assignments([cell_vars[(r, c)] for r in range(height)], col_tuples)

    model.add_all_different(list(cell_vars.values()))

    solver = cp_model.CpSolver()
    solver.parameters.enumerate_all_solutions = True
    solver.parameters.num_workers = 1
    solver.parameters.max_time_in_seconds = timeout

    LOGGER.info(
        "CP-SAT: %dx%d grid, %d row words, %d column words, enumerating...",
        width,
        height,
        len(index.rows),
        len(columns),
    )
    collector = _GridCollector(cell_vars, width, height)
    status = solver.solve(model, collector)

    if status == cp_model.INFEASIBLE:
        return []
    if status != cp_model.OPTIMAL:
        raise SolverError(
            f"CP-SAT enumeration incomplete (status={solver.status_name(status)})"
        )
    LOGGER.info("CP-SAT: %d grids in %.2fs", len(collector.grids), solver.wall_time)
    return sorted(collector.grids)
