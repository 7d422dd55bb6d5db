"""Word grid generator orchestration.

Three phases, each run once per generator:
  1. Validate the requested dimensions.
  2. Index the dictionary into row candidates and column prefixes.
  3. Enumerate grids with the backtracking search.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, Optional

from ..core.constants import ALPHABET_LEN, DEFAULT_DICTIONARY
from ..core.exceptions import ConfigurationError, ValidationError
from ..core.models import Grid, WordIndex
from ..data.dictionary import DictionaryConfig, load_index
from ..utils.logger import get_logger
from .search import search
from .validator import GridValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    width: int
    height: int
    dictionary_path: Path | str = DEFAULT_DICTIONARY
    strip_apostrophes: bool = True
    restrict_short_words: bool = True
    validate_grids: bool = False

    def validate(self) -> None:
        if self.width <= 0:
            raise ConfigurationError(f"Width is too small ({self.width}). Must be > 0")
        if self.height <= 0:
            raise ConfigurationError(f"Height is too small ({self.height}). Must be > 0")
        if self.width * self.height > ALPHABET_LEN:
            raise ConfigurationError(
                f"Width x Height is too large ({self.width * self.height}). "
                f"Must be <= {ALPHABET_LEN}"
            )

    def to_dictionary_config(self) -> DictionaryConfig:
        return DictionaryConfig(
            width=self.width,
            height=self.height,
            path=self.dictionary_path,
            strip_apostrophes=self.strip_apostrophes,
            restrict_short_words=self.restrict_short_words,
        )


class WordGridGenerator:
    """Validates the config, indexes the dictionary, then enumerates grids.

    ``index`` may be supplied directly, in which case no dictionary file is
    read. Configuration errors are raised from the constructor, before any
    dictionary access.
    """

    def __init__(self, config: GeneratorConfig, index: Optional[WordIndex] = None) -> None:
        config.validate()
        self.config = config
        self.index = index if index is not None else load_index(config.to_dictionary_config())
        self.validator = GridValidator(self.index) if config.validate_grids else None

    def generate(self) -> Iterator[Grid]:
        """Lazily yield every grid in search order. Each call restarts the search."""

        count = 0
        for grid in search(self.index):
            if self.validator is not None:
                result = self.validator.validate(grid)
                if not result.ok:
                    raise ValidationError(f"Grid validation failed: {result.messages}")
            count += 1
            yield grid
        LOGGER.info(
            "Search finished: %d grid(s) of %dx%d", count, self.config.width, self.config.height
        )

    def run(self, callback: Callable[[Grid], None]) -> int:
        """Invoke ``callback`` once per grid; return how many were found."""

        count = 0
        for grid in self.generate():
            callback(grid)
            count += 1
        return count
