"""
flj - functional helpers for Python iterables

Provides IterableW, a wrapper equipping any iterable with functor,
applicative and monad combinators and an immutable list view, together
with the lazy Stream and Zipper it is built on, category tagging for test
properties and a few curried string functions.
"""

__version__ = "2.20.0"

from .exceptions import (
    FljError,
    EmptySequenceError,
    IndexOutOfRangeError,
    NoSuchElementError,
    UnsupportedOperationError,
)
from .catpy import (
    Functor, Applicative, Monad,
    Maybe, Just, Nothing,
    compose, identity, curry,
)
from .config_loader import FljSettings, get_settings, reset_settings
from .logging_config import configure_logging
from .stream import Stream
from .zipper import Zipper
from .iterable_w import IterableW
from .standard_list import ImmutableList, ImmutableListIterator
from .category import category, categories_of
from . import strings

__all__ = [
    "FljError",
    "EmptySequenceError",
    "IndexOutOfRangeError",
    "NoSuchElementError",
    "UnsupportedOperationError",
    "Functor",
    "Applicative",
    "Monad",
    "Maybe",
    "Just",
    "Nothing",
    "compose",
    "identity",
    "curry",
    "FljSettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "Stream",
    "Zipper",
    "IterableW",
    "ImmutableList",
    "ImmutableListIterator",
    "category",
    "categories_of",
    "strings",
]
