"""Helpers for turning raw dictionary lines into candidate words."""

from __future__ import annotations

import re
from typing import Optional

from ..core.constants import LEGAL_SMALL_WORDS, SHORT_WORD_MAX

WORD_RE = re.compile(r"[A-Z]+")


def has_unique_letters(word: str) -> bool:
    return len(set(word)) == len(word)


def normalize_entry(
    raw: str,
    *,
    strip_apostrophes: bool = True,
    restrict_short_words: bool = True,
) -> Optional[str]:
    """Return the uppercase word for ``raw`` or ``None`` when it is filtered out.

    With ``strip_apostrophes`` off, contracted forms keep their apostrophe and
    fail the A-Z check, so they never reach the candidate sets.
    """

    word = raw.rstrip("\r\n")
    if strip_apostrophes:
        word = word.replace("'", "")
    # str.upper() maps some non-ASCII letters onto ASCII ones ("ß" -> "SS"),
    # so only ASCII is uppercased before the A-Z check.
    word = "".join(char.upper() if char.isascii() else char for char in word)
    if not WORD_RE.fullmatch(word):
        return None
    if not has_unique_letters(word):
        return None
    if restrict_short_words and len(word) <= SHORT_WORD_MAX and word not in LEGAL_SMALL_WORDS:
        return None
    return word


__all__ = ["has_unique_letters", "normalize_entry", "WORD_RE"]
