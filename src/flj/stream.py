"""
Stream - a lazy, memoising, possibly infinite sequence.

A Stream is a chain of cells. Each cell is computed on first demand and
remembered, so a Stream built over a one-shot iterator can be traversed any
number of times while pulling each source element only once.
"""

from __future__ import annotations

from itertools import chain, count, islice
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple, TypeVar

from .catpy import Monad
from .config_loader import get_settings
from .exceptions import EmptySequenceError, IndexOutOfRangeError

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

_Cell = Optional[Tuple[Any, "Stream[Any]"]]


def _failing(exc: Exception) -> Callable[[], _Cell]:
    def step() -> _Cell:
        raise exc
    return step


def bounded_repr(name: str, items: Iterable[Any]) -> str:
    """``name([a, b, ...])`` showing at most ``repr_limit`` elements."""
    limit = get_settings().repr_limit
    shown = list(islice(items, limit + 1))
    body = ", ".join(repr(a) for a in shown[:limit])
    if len(shown) > limit:
        body = f"{body}, ..." if body else "..."
    return f"{name}([{body}])"


class Stream(Monad[T]):
    """
    Lazy sequence of values.

    ::: This is-in-layer Foundation-Layer.
    ::: This is a monad.
    ::: This is stateful.

    The only state is the memoised cell; a forced Stream never changes.
    """

    def __init__(self, step: Callable[[], _Cell]):
        self._step: Optional[Callable[[], _Cell]] = step
        self._cell: _Cell = None

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def _forced(cls, cell: _Cell) -> "Stream[Any]":
        s = cls(lambda: cell)
        s._step = None
        s._cell = cell
        return s

    @classmethod
    def empty(cls) -> "Stream[Any]":
        return cls._forced(None)

    @classmethod
    def cons(cls, head: U, tail: "Stream[U]") -> "Stream[U]":
        return cls._forced((head, tail))

    @classmethod
    def from_iterable(cls, iterable: Iterable[U]) -> "Stream[U]":
        """
        Convert any iterable to a Stream without pulling any element.

        A Stream argument is returned as is.
        """
        if isinstance(iterable, Stream):
            return iterable
        iterator = iter(iterable)

        def step() -> _Cell:
            try:
                head = next(iterator)
            except StopIteration:
                return None
            return head, cls(step)

        return cls(step)

    @classmethod
    def pure(cls, x: U) -> "Stream[U]":  # type: ignore[override]
        return cls.cons(x, cls.empty())

    def _uncons(self) -> _Cell:
        if self._step is not None:
            try:
                self._cell = self._step()
            except Exception as exc:
                # a failed cell keeps failing; its source cannot be resumed
                self._step = _failing(exc)
                raise
            self._step = None
        return self._cell

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        s: Stream[T] = self
        while True:
            cell = s._uncons()
            if cell is None:
                return
            head, s = cell
            yield head

    def is_empty(self) -> bool:
        return self._uncons() is None

    def head(self) -> T:
        cell = self._uncons()
        if cell is None:
            raise EmptySequenceError("head of an empty stream")
        return cell[0]

    def tail(self) -> "Stream[T]":
        cell = self._uncons()
        if cell is None:
            raise EmptySequenceError("tail of an empty stream")
        return cell[1]

    def length(self) -> int:
        """Number of elements. Requires a finite stream."""
        return sum(1 for _ in self)

    def exists(self, pred: Callable[[T], bool]) -> bool:
        return any(pred(a) for a in self)

    def index(self, i: int) -> T:
        """Element at position ``i``, found by walking from the head."""
        if i < 0:
            raise IndexOutOfRangeError(f"Stream index out of range: {i}")
        for a in islice(self, i, None):
            return a
        raise IndexOutOfRangeError(f"Stream index out of range: {i}")

    def to_tuple(self) -> Tuple[T, ...]:
        return tuple(self)

    # -------------------------------------------------------------------------
    # Transformations (lazy)
    # -------------------------------------------------------------------------

    def append(self, other: Iterable[T]) -> "Stream[T]":
        return Stream.from_iterable(chain(self, other))

    def bind(self, f: Callable[[T], Iterable[U]]) -> "Stream[U]":  # type: ignore[override]
        return Stream.from_iterable(
            chain.from_iterable(Stream.from_iterable(f(a)) for a in self)
        )

    def fmap(self, f: Callable[[T], U]) -> "Stream[U]":  # type: ignore[override]
        return Stream.from_iterable(map(f, self))

    def ap(self: "Stream[Callable[[T], U]]", xs: Iterable[T]) -> "Stream[U]":  # type: ignore[override]
        values = Stream.from_iterable(xs)
        return self.bind(lambda f: values.fmap(f))

    def drop(self, n: int) -> "Stream[T]":
        return Stream.from_iterable(islice(self, max(n, 0), None))

    def take(self, n: int) -> "Stream[T]":
        return Stream.from_iterable(islice(self, max(n, 0)))

    def zip_with(self, bs: Iterable[U], f: Callable[[T, U], V]) -> "Stream[V]":
        """Combine position-wise; stops at the end of the shorter operand."""
        return Stream.from_iterable(map(f, self, bs))

    def zip(self, bs: Iterable[U]) -> "Stream[Tuple[T, U]]":
        return Stream.from_iterable(zip(self, bs))

    def zip_index(self) -> "Stream[Tuple[T, int]]":
        return self.zip(count())

    def zapp(self, fs: Iterable[Callable[[T], U]]) -> "Stream[U]":
        return self.zip_with(fs, lambda a, f: f(a))

    # -------------------------------------------------------------------------
    # Reductions (strict)
    # -------------------------------------------------------------------------

    def fold_left(self, f: Callable[[U, T], U], z: U) -> U:
        acc = z
        for a in self:
            acc = f(acc, a)
        return acc

    def fold_left1(self, f: Callable[[T, T], T]) -> T:
        cell = self._uncons()
        if cell is None:
            raise EmptySequenceError("fold_left1 on an empty stream")
        head, rest = cell
        return rest.fold_left(f, head)

    def __repr__(self) -> str:
        return bounded_repr("Stream", self)
