"""Dictionary indexing: row candidates and column prefix tables."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, List, Set, Tuple

from ..core.constants import DEFAULT_DICTIONARY
from ..core.exceptions import DictionaryReadError
from ..core.models import WordIndex
from ..utils.logger import get_logger
from .normalization import normalize_entry


LOGGER = get_logger(__name__)


@dataclass
class DictionaryConfig:
    """Configuration for dictionary loading and filtering."""

    width: int
    height: int
    path: Path | str = DEFAULT_DICTIONARY
    strip_apostrophes: bool = True
    restrict_short_words: bool = True
    encoding: str = "utf-8"


def build_prefix_table(columns: Iterable[str], height: int) -> Tuple[FrozenSet[str], ...]:
    """Return ``height`` frozensets holding the length 1..height prefixes of ``columns``."""

    buckets: List[Set[str]] = [set() for _ in range(height)]
    for word in columns:
        for i in range(height):
            buckets[i].add(word[: i + 1])
    return tuple(frozenset(bucket) for bucket in buckets)


def build_index(
    lines: Iterable[str],
    width: int,
    height: int,
    *,
    strip_apostrophes: bool = True,
    restrict_short_words: bool = True,
) -> WordIndex:
    """Filter raw dictionary lines into a :class:`WordIndex`.

    Entries that are not pure A-Z after normalization, repeat a letter, or
    are disallowed short words are dropped silently. Row candidates collapse
    duplicates and come back sorted; column words only survive as prefixes.
    """

    row_words: Set[str] = set()
    col_words: Set[str] = set()
    rejected = 0

    for raw in lines:
        word = normalize_entry(
            raw,
            strip_apostrophes=strip_apostrophes,
            restrict_short_words=restrict_short_words,
        )
        if word is None:
            rejected += 1
            continue
        if len(word) == width:
            row_words.add(word)
        if len(word) == height:
            col_words.add(word)

    LOGGER.debug(
        "Indexed %d row words, %d column words (%d entries rejected)",
        len(row_words),
        len(col_words),
        rejected,
    )
    return WordIndex(
        width=width,
        height=height,
        rows=tuple(sorted(row_words)),
        prefixes=build_prefix_table(col_words, height),
    )


def load_index(config: DictionaryConfig) -> WordIndex:
    """Read ``config.path`` and index it; any I/O failure aborts the load."""

    source = Path(config.path)
    try:
        with source.open("r", encoding=config.encoding, errors="replace", newline="\n") as handle:
            index = build_index(
                handle,
                config.width,
                config.height,
                strip_apostrophes=config.strip_apostrophes,
                restrict_short_words=config.restrict_short_words,
            )
    except OSError as exc:
        raise DictionaryReadError(f"Error reading {source}: {exc.strerror or exc}") from exc

    LOGGER.info(
        "Loaded %s: %d row candidates of length %d, %d column words of length %d",
        source,
        len(index.rows),
        config.width,
        len(index.columns),
        config.height,
    )
    return index


__all__ = ["DictionaryConfig", "build_index", "build_prefix_table", "load_index"]
