"""
Summary: Natural (human-friendly) ordering for filenames, e.g. track2 before track10.
Why: Track numbers follow the order a person reads the directory, not code-point order.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

_DIGIT_RUN = re.compile(r"([0-9]+)")
# Digit runs sit where the digit characters sit among code points.
_DIGIT_SLOT = ord("0")

NaturalToken = tuple[int | str, ...]
NaturalKey = tuple[tuple[NaturalToken, ...], str]


def _digit_token(digits: str) -> NaturalToken:
    # Runs with a leading zero read as a fraction and compare digit by digit,
    # so they sort before every run without one.
    if digits.startswith("0"):
        return (_DIGIT_SLOT, 0, digits)
    return (_DIGIT_SLOT, 1, int(digits))


def natural_sort_key(text: str) -> NaturalKey:
    """Generate a sort key for natural ordering.

    Whitespace is ignored. Other characters compare by code point, so the
    comparison is case-sensitive. A run of ASCII digits counts as one
    character placed between ``/`` and ``:``; two runs compare by value,
    except that a run with a leading zero compares digit by digit
    (``a010`` before ``a9``). The raw text is the final tie-break for names
    that differ only in whitespace.

    Example:
        >>> sorted(["track10.mp3", "track 2.mp3", "track1.mp3"], key=natural_sort_key)
        ['track1.mp3', 'track 2.mp3', 'track10.mp3']
    """
    tokens: list[NaturalToken] = []
    for index, fragment in enumerate(_DIGIT_RUN.split(text)):
        if index % 2:
            tokens.append(_digit_token(fragment))
            continue
        tokens.extend((ord(char),) for char in fragment if not char.isspace())
    return tuple(tokens), text


def natural_compare(left: str, right: str) -> int:
    """Three-way natural comparison: negative, zero or positive."""
    left_key = natural_sort_key(left)
    right_key = natural_sort_key(right)
    return (left_key > right_key) - (left_key < right_key)


def natural_sort(items: Iterable[str]) -> list[str]:
    """Sort strings using natural ordering.

    Example:
        >>> natural_sort(["b.mp3", "a.mp3", "c.mp3"])
        ['a.mp3', 'b.mp3', 'c.mp3']
    """
    return sorted(items, key=natural_sort_key)


def sort_paths_naturally(paths: Iterable[Path]) -> list[Path]:
    """Sort paths by filename in natural order, full path string last."""
    return sorted(paths, key=lambda path: (natural_sort_key(path.name), str(path)))


__all__ = [
    "NaturalKey",
    "natural_compare",
    "natural_sort",
    "natural_sort_key",
    "sort_paths_naturally",
]
