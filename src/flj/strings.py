"""Curried string functions."""

import re
from typing import Callable


def is_empty(s: str) -> bool:
    return len(s) == 0


def length(s: str) -> int:
    return len(s)


def contains(s1: str) -> Callable[[str], bool]:
    """``contains(s1)(s2)`` is true if ``s2`` contains ``s1``."""
    return lambda s2: s1 in s2


def matches(regex: str) -> Callable[[str], bool]:
    """``matches(regex)(s)`` is true if the whole of ``s`` matches ``regex``."""
    pattern = re.compile(regex)
    return lambda s: pattern.fullmatch(s) is not None
