"""Word grid generator: W x H grids of words with no repeated letter.

This package exposes the public API surface via:

- ``wordgrid.engine.generator.WordGridGenerator``: validates, indexes and searches.
- ``wordgrid.data.dictionary.build_index`` / ``load_index``: dictionary indexing.
- ``wordgrid.engine.search.find_grids``: the backtracking search itself.
- ``wordgrid.engine.solver.solve_word_grids``: CP-SAT enumeration used to cross-check the search.
"""

from .engine.generator import GeneratorConfig, WordGridGenerator
from .data.dictionary import DictionaryConfig, build_index, load_index
from .engine.search import find_grids, search
from .engine.solver import solve_word_grids

__all__ = [
    "WordGridGenerator",
    "GeneratorConfig",
    "DictionaryConfig",
    "build_index",
    "load_index",
    "find_grids",
    "search",
    "solve_word_grids",
]

__version__ = "0.1.0"
