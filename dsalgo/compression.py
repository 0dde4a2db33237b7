"""Summarise a string as letters followed by their counts."""

from __future__ import annotations

import string
from collections import Counter
from itertools import groupby

from dsalgo.sorting import insertion_sort


def letter_counts(text: str) -> dict[str, int]:
    """Return counts of the lowercase letters in ``text``, in alphabetical order.

    Letters that do not occur are left out.
    """
    counts = Counter(text)
    return {letter: counts[letter] for letter in string.ascii_lowercase if counts[letter]}


def compress_by_table(text: str) -> str:
    """Write each lowercase letter of ``text`` followed by how often it occurs."""
    return "".join(f"{letter}{n}" for letter, n in letter_counts(text).items())


def compress_by_sorting(text: str) -> str:
    """Sort the characters of ``text`` and write each run as char plus length.

    Raises ValueError for an empty string.
    """
    if not text:
        raise ValueError("cannot compress an empty string")
    chars = list(text)
    insertion_sort(chars)
    return "".join(f"{char}{sum(1 for _ in run)}" for char, run in groupby(chars))