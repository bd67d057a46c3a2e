"""
IterableW - a wrapper that equips any iterable with monadic combinators.

The wrapper keeps a reference to the iterable it was given and converts it
to a Stream whenever a combinator needs one, so every combinator is lazy
except the folds. Monad laws hold with ``unit`` as pure:

  1) Left identity:  IterableW.unit(x).bind(f) == f(x)
  2) Right identity: m.bind(IterableW.unit)  == m
  3) Associativity:  m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import (
    TYPE_CHECKING, Any, Callable, Generic, Iterable, Iterator, Optional, Tuple, TypeVar,
)

from .catpy import Just, Maybe, Monad, curry, identity
from .stream import Stream, bounded_repr
from .zipper import Zipper

if TYPE_CHECKING:
    from .standard_list import ImmutableList

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

_MISSING = object()


def _run_steps(steps: Tuple[Callable[[Any], Any], ...]) -> Callable[[Any], Any]:
    def run(a: Any) -> Any:
        for step in steps:
            a = step(a)
        return a
    return run


@dataclass(frozen=True)
class _Continuation(Generic[A, B]):
    """
    One deferred step of a right fold: ``k(b) == then(f(element, b))``.

    Calling a continuation walks the chain in a loop rather than recursing.
    """
    f: Callable[[A, B], B]
    element: A
    then: Optional["_Continuation[A, B]"] = None

    def __call__(self, b: B) -> B:
        acc = b
        k: Optional[_Continuation[A, B]] = self
        while k is not None:
            acc = k.f(k.element, acc)
            k = k.then
        return acc


class IterableW(Monad[A]):
    """
    A wrapper for an iterable that equips it with functor, applicative and
    monad operations, folds, zips and an immutable list view.

    ::: This is-in-layer Core-Layer.
    ::: This is a monad.
    ::: This is stateless.

    One-shot iterators (generators, file objects...) are memoised through a
    Stream when wrapped, so the wrapper can be traversed repeatedly.
    """

    def __init__(self, iterable: Iterable[A]):
        if iter(iterable) is iterable:
            iterable = Stream.from_iterable(iterable)
        self._iterable = iterable
        # (source, steps) when this wrapper is a map over source
        self._mapped: Optional[Tuple[IterableW[Any], Tuple[Callable[[Any], Any], ...]]] = None

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def wrap(cls, iterable: Iterable[B]) -> "IterableW[B]":
        """Wrap the given iterable. A wrapper is returned unchanged."""
        if isinstance(iterable, IterableW):
            return iterable
        return cls(iterable)

    @classmethod
    def unit(cls, a: B) -> "IterableW[B]":
        """A wrapper yielding exactly ``a``."""
        return cls.wrap(Just(a))

    @classmethod
    def pure(cls, x: B) -> "IterableW[B]":  # type: ignore[override]
        return cls.unit(x)

    @classmethod
    def kleisli(cls, f: Callable[[A], B]) -> Callable[[A], "IterableW[B]"]:
        """Turn ``f`` into the equivalent function returning a singleton wrapper."""
        return lambda a: cls.unit(f(a))

    # -------------------------------------------------------------------------
    # Monad
    # -------------------------------------------------------------------------

    def bind(self, f: Callable[[A], Iterable[B]]) -> "IterableW[B]":  # type: ignore[override]
        """
        Bind ``f`` across the wrapped iterable with a final join.

        Results of ``f`` are concatenated in the order of the elements they
        came from; nothing is evaluated until the result is iterated.
        """
        return IterableW.wrap(self.to_stream().bind(f))

    def fmap(self, f: Callable[[A], B]) -> "IterableW[B]":  # type: ignore[override]
        """
        Map ``f`` over the elements, as ``bind(kleisli(f))``.

        A map over a mapped wrapper binds the accumulated functions over the
        first unmapped source in a single pass, so long chains of ``map``
        do not nest one generator per call.
        """
        source, steps = self._mapped if self._mapped is not None else (self, ())
        steps = steps + (f,)
        mapped = source.bind(IterableW.kleisli(_run_steps(steps)))
        mapped._mapped = (source, steps)
        return mapped

    def map(self, f: Callable[[A], B]) -> "IterableW[B]":  # type: ignore[override]
        return self.fmap(f)

    def apply(self, fs: Iterable[Callable[[A], B]]) -> "IterableW[B]":
        """
        Apply every function of ``fs`` to every element.

        Functions form the outer loop and elements the inner loop:
        ``wrap([1, 2]).apply([f, g]) == [f(1), f(2), g(1), g(2)]``.
        """
        return IterableW.wrap(fs).bind(lambda f: self.map(f))

    def ap(self: "IterableW[Callable[[B], C]]", xs: Iterable[B]) -> "IterableW[C]":  # type: ignore[override]
        return IterableW.wrap(xs).apply(self)

    @classmethod
    def bind2(cls, a: Iterable[A], b: Iterable[B], f: Callable[[A, B], C]) -> "IterableW[C]":
        """
        Apply the binary function ``f`` to every pair of values from ``a``
        and ``b``; ``a`` is the outer loop.
        """
        return cls.wrap(b).apply(cls.wrap(a).map(curry(f)))

    @classmethod
    def lift_m2(cls, f: Callable[[A, B], C]) -> Callable[[Iterable[A]], Callable[[Iterable[B]], "IterableW[C]"]]:
        """Promote a binary function to a curried function on iterables."""
        return curry(lambda a, b: cls.bind2(a, b, f))

    @classmethod
    def join(cls, iss: Iterable[Iterable[B]]) -> "IterableW[B]":
        """Flatten an iterable of iterables by one level."""
        return cls.wrap(iss).bind(identity)

    @classmethod
    def lift(cls, f: Callable[[A], B]) -> Callable[[Iterable[A]], "IterableW[B]"]:
        """Promote ``f`` to a function mapping over iterables."""
        return lambda it: cls.wrap(it).map(f)

    # -------------------------------------------------------------------------
    # Folds
    # -------------------------------------------------------------------------

    def fold_left(self, f: Callable[[B, A], B], z: B) -> B:
        """
        The catamorphism, as a left fold.

        Args:
            f: Combines the accumulator with the next element
            z: Initial accumulator, applied first (leftmost)
        """
        acc = z
        for a in self:
            acc = f(acc, a)
        return acc

    def fold_left1(self, f: Callable[[A, A], A]) -> A:
        """
        Left fold seeded with the first element.

        Raises:
            EmptySequenceError: If there are no elements
        """
        return self.to_stream().fold_left1(f)

    def fold_right(self, f: Callable[[A, B], B], z: B) -> B:
        """
        The catamorphism, as a right fold.

        A left-to-right pass builds the chain of deferred applications of
        ``f``, which is then run against ``z``.

        Args:
            f: Combines an element with the folded remainder
            z: Base value, applied last (rightmost)
        """
        k = self.fold_left(lambda then, a: _Continuation(f, a, then), None)
        return z if k is None else k(z)

    # -------------------------------------------------------------------------
    # Zips (truncate to the shorter operand)
    # -------------------------------------------------------------------------

    def zapp(self, fs: Iterable[Callable[[A], B]]) -> "IterableW[B]":
        """Apply the i-th function to the i-th element."""
        return IterableW.wrap(self.to_stream().zapp(fs))

    def zip_with(self, bs: Iterable[B], f: Callable[[A, B], C]) -> "IterableW[C]":
        return IterableW.wrap(self.to_stream().zip_with(bs, f))

    def zip(self, bs: Iterable[B]) -> "IterableW[Tuple[A, B]]":
        return IterableW.wrap(self.to_stream().zip(bs))

    def zip_index(self) -> "IterableW[Tuple[A, int]]":
        return IterableW.wrap(self.to_stream().zip_index())

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def to_stream(self) -> Stream[A]:
        return Stream.from_iterable(self._iterable)

    def to_zipper(self) -> Maybe[Zipper[A]]:
        return Zipper.from_stream(self.to_stream())

    def to_standard_list(self) -> "ImmutableList[A]":
        """An immutable list view of this iterable."""
        from .standard_list import ImmutableList
        return ImmutableList(self)

    def __iter__(self) -> Iterator[A]:
        return iter(self._iterable)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, IterableW):
            return NotImplemented
        return all(
            a is not _MISSING and b is not _MISSING and a == b
            for a, b in zip_longest(self, other, fillvalue=_MISSING)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return bounded_repr("IterableW", self)
