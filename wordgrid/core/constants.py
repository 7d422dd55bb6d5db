"""Shared constants for the word grid generator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet

ALPHABET_LEN = 26

DEFAULT_DICTIONARY = Path("/usr/share/dict/words")

# Short entries (<= 2 letters) are mostly abbreviations and numerals; only
# these are kept when short-word restriction is on.
LEGAL_SMALL_WORDS: FrozenSet[str] = frozenset(
    {
        "A", "I",
        "AH", "AM", "AN", "AS", "AT", "BE", "BY", "DC", "DO",
        "DR", "EX", "GO", "HA", "HE", "HI", "HO", "IF", "IN", "IS",
        "IT", "LA", "LO", "MA", "ME", "MR", "MS", "MY", "NO", "OF",
        "OH", "OK", "ON", "OR", "OW", "OX", "PA", "PI", "SO", "ST",
        "TO", "UP", "US", "WE",
    }
)

SHORT_WORD_MAX = 2


@dataclass(frozen=True)
class Bounds:
    """Grid dimensions helper."""

    rows: int
    cols: int

    @property
    def cells(self) -> int:
        return self.rows * self.cols
