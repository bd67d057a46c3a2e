"""
Immutable list view of an IterableW.

ImmutableList presents a wrapped iterable through the standard Sequence
protocol plus a Java-style list surface. Mutators come in two flavours:
the boolean ones (add, remove, add_all, remove_all, retain_all) report
rejection by returning False, the others raise UnsupportedOperationError.

ImmutableListIterator is a bidirectional iterator whose only state is an
optional Zipper: Nothing means the iterator sits before the first element
(or that there are no elements at all), Just(z) means ``z.focus()`` is the
element immediately to the left of the iterator.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Collection, Generic, Iterator, Optional, Tuple, TypeVar, Union, overload

from .catpy import Maybe, Nothing
from .exceptions import (
    IndexOutOfRangeError,
    NoSuchElementError,
    UnsupportedOperationError,
)
from .iterable_w import IterableW
from .stream import Stream
from .zipper import Zipper

logger = logging.getLogger(__name__)

A = TypeVar("A")

IMMUTABLE_LIST_MESSAGE = "Modifying an immutable List."


class ImmutableList(Sequence, Generic[A]):
    """
    Read-only random-access list over an IterableW.

    ::: This is-in-layer Core-Layer.
    ::: This is a adapter.
    ::: This is stateless.

    Every query traverses the underlying Stream again; nothing is cached
    beyond the Stream's own memoisation.
    """

    def __init__(self, wrapper: IterableW[A]):
        self._wrapper = wrapper

    def _stream(self) -> Stream[A]:
        return self._wrapper.to_stream()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def size(self) -> int:
        return self._stream().length()

    def is_empty(self) -> bool:
        return self._stream().is_empty()

    def contains(self, o: Any) -> bool:
        return self._stream().exists(lambda a: a == o)

    def contains_all(self, c: Collection[Any]) -> bool:
        elements = self.to_array()
        return all(o in elements for o in c)

    def to_array(self) -> Tuple[A, ...]:
        return self._stream().to_tuple()

    def get(self, index: int) -> A:
        """Element at ``index``; walks the sequence from the start."""
        return self._stream().index(index)

    def index_of(self, o: Any) -> int:
        for i, a in enumerate(self._wrapper):
            if a == o:
                return i
        return -1

    def last_index_of(self, o: Any) -> int:
        last = -1
        for i, a in enumerate(self._wrapper):
            if a == o:
                last = i
        return last

    def sub_list(self, from_index: int, to_index: int) -> "ImmutableList[A]":
        """View of the elements in ``[from_index, to_index)``."""
        if from_index < 0 or from_index > to_index:
            raise IndexOutOfRangeError(
                f"sub_list({from_index}, {to_index}) is not a valid range"
            )
        view = self._stream().drop(from_index).take(to_index - from_index)
        return IterableW.wrap(view).to_standard_list()

    def iterator(self) -> Iterator[A]:
        return iter(self._wrapper)

    def list_iterator(self, index: int = 0) -> "ImmutableListIterator[A]":
        """
        Bidirectional iterator positioned so that ``next()`` returns the
        element at ``index``.

        Raises:
            IndexOutOfRangeError: If ``index`` is outside ``[0, size()]``
        """
        origin = self._wrapper.to_zipper()
        if index == 0:
            return ImmutableListIterator(Nothing(), origin=origin)
        cursor = origin.bind(lambda z: z.move(index - 1)) if index > 0 else Nothing()
        if cursor.is_nothing():
            raise IndexOutOfRangeError(f"list_iterator index out of range: {index}")
        return ImmutableListIterator(cursor, origin=origin)

    # -------------------------------------------------------------------------
    # Boolean mutators: rejected with False
    # -------------------------------------------------------------------------

    def _reject(self, operation: str) -> bool:
        logger.debug("%s() rejected on immutable list", operation)
        return False

    def add(self, element: A) -> bool:
        return self._reject("add")

    def remove(self, o: Any) -> bool:
        return self._reject("remove")

    def add_all(self, c: Collection[A], index: Optional[int] = None) -> bool:
        """Rejected with False, with or without an insertion ``index``."""
        return self._reject("add_all")

    def remove_all(self, c: Collection[Any]) -> bool:
        return self._reject("remove_all")

    def retain_all(self, c: Collection[Any]) -> bool:
        return self._reject("retain_all")

    # -------------------------------------------------------------------------
    # Raising mutators
    # -------------------------------------------------------------------------

    def _unsupported(self, operation: str) -> UnsupportedOperationError:
        logger.debug("%s() refused on immutable list", operation)
        return UnsupportedOperationError(IMMUTABLE_LIST_MESSAGE)

    def clear(self) -> None:
        raise self._unsupported("clear")

    def set(self, index: int, element: A) -> A:
        raise self._unsupported("set")

    def add_at(self, index: int, element: A) -> None:
        raise self._unsupported("add_at")

    def remove_at(self, index: int) -> A:
        raise self._unsupported("remove_at")

    def insert(self, index: int, element: A) -> None:
        raise self._unsupported("insert")

    def pop(self, index: int = -1) -> A:
        raise self._unsupported("pop")

    def __setitem__(self, index: Any, value: Any) -> None:
        raise self._unsupported("__setitem__")

    def __delitem__(self, index: Any) -> None:
        raise self._unsupported("__delitem__")

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return self.size()

    @overload
    def __getitem__(self, index: int) -> A: ...

    @overload
    def __getitem__(self, index: slice) -> "ImmutableList[A]": ...

    def __getitem__(self, index: Union[int, slice]) -> Union[A, "ImmutableList[A]"]:
        if isinstance(index, slice):
            start, stop, step = index.start, index.stop, index.step
            if step in (None, 1) and (start is None or start >= 0) and stop is not None and stop >= 0:
                start = start or 0
                return self.sub_list(start, max(start, stop))
            return IterableW.wrap(self.to_array()[index]).to_standard_list()
        if index < 0:
            index += self.size()
            if index < 0:
                raise IndexOutOfRangeError("list index out of range")
        return self.get(index)

    def __contains__(self, o: Any) -> bool:
        return self.contains(o)

    def __iter__(self) -> Iterator[A]:
        return self.iterator()

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ImmutableList):
            return self._wrapper == other._wrapper
        if isinstance(other, (list, tuple)):
            return self.to_array() == tuple(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ImmutableList({self._wrapper!r})"


class ImmutableListIterator(Generic[A]):
    """
    Bidirectional iterator driven by an immutable Zipper.

    ::: This is-in-layer Core-Layer.
    ::: This is a iterator.
    ::: This is stateful.

    Not safe for concurrent use: the current cursor is owned by a single
    consumer.
    """

    def __init__(self, cursor: Maybe[Zipper[A]], origin: Maybe[Zipper[A]]):
        self._cursor = cursor
        self._origin = origin

    def has_next(self) -> bool:
        return self._cursor.fmap(lambda z: not z.at_end()).get_or_else(self._origin.is_just())

    def next(self) -> A:
        moved = self._cursor.fmap(lambda z: z.next()).get_or_else(self._origin)
        if moved.is_nothing():
            raise NoSuchElementError("next() past the end of the list")
        self._cursor = moved
        return moved.get().focus()

    def has_previous(self) -> bool:
        return self._cursor.is_just()

    def previous(self) -> A:
        if self._cursor.is_nothing():
            raise NoSuchElementError("previous() before the start of the list")
        z = self._cursor.get()
        self._cursor = z.previous()
        return z.focus()

    def next_index(self) -> int:
        return self._cursor.fmap(lambda z: z.index() + 1).get_or_else(0)

    def previous_index(self) -> int:
        return self._cursor.fmap(lambda z: z.index()).get_or_else(-1)

    def remove(self) -> None:
        raise UnsupportedOperationError("Remove on immutable ListIterator")

    def set(self, element: A) -> None:
        raise UnsupportedOperationError("Set on immutable ListIterator")

    def add(self, element: A) -> None:
        raise UnsupportedOperationError("Add on immutable ListIterator")

    def __iter__(self) -> "ImmutableListIterator[A]":
        return self

    def __next__(self) -> A:
        if not self.has_next():
            raise StopIteration
        return self.next()
