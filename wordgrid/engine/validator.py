"""Deterministic rule validation for completed word grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..core.exceptions import ValidationError
from ..core.models import WordIndex
from ..data.normalization import WORD_RE
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Checks a grid against the index it was searched from."""

    def __init__(self, index: WordIndex) -> None:
        self.index = index
        self._row_words = frozenset(index.rows)

    def validate(self, grid: Sequence[str]) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_shape(grid)
            self._check_letters_valid(grid)
            self._check_unique_letters(grid)
            self._check_rows(grid)
            self._check_columns(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_shape(self, grid: Sequence[str]) -> None:
        bounds = self.index.bounds
        if len(grid) != bounds.rows:
            raise ValidationError(f"Grid has {len(grid)} rows, expected {bounds.rows}")
        for r, row in enumerate(grid):
            if len(row) != bounds.cols:
                raise ValidationError(
                    f"Row {r} '{row}' has length {len(row)}, expected {bounds.cols}"
                )

    def _check_letters_valid(self, grid: Sequence[str]) -> None:
        for r, row in enumerate(grid):
            if not WORD_RE.fullmatch(row):
                raise ValidationError(f"Invalid letters in row {r} '{row}'")

    def _check_unique_letters(self, grid: Sequence[str]) -> None:
        seen = {}
        for r, row in enumerate(grid):
            for c, letter in enumerate(row):
                if letter in seen:
                    raise ValidationError(
                        f"Letter '{letter}' at ({r},{c}) repeats {seen[letter]}"
                    )
                seen[letter] = (r, c)

    def _check_rows(self, grid: Sequence[str]) -> None:
        for r, row in enumerate(grid):
            if row not in self._row_words:
                raise ValidationError(f"Row {r} '{row}' is not a row candidate")

    def _check_columns(self, grid: Sequence[str]) -> None:
        columns = self.index.columns
        for c in range(self.index.width):
            column = "".join(row[c] for row in grid)
            if column not in columns:
                raise ValidationError(f"Column {c} '{column}' is not a column word")
