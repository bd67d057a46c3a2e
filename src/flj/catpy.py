"""
catpy.py — Category-theory-inspired programming foundations for flj.

This module provides the core typeclasses and types used throughout the package:
- Core typeclasses: Functor, Applicative, Monad
- Concrete instance: Maybe (Just/Nothing), the optional value
- Function helpers: compose, identity, curry
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Generic,
    Iterator,
    TypeVar,
)
from abc import ABC, abstractmethod

from .exceptions import NoSuchElementError

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

# ---------------------------------------------------------------------------
# Core typeclasses
# ---------------------------------------------------------------------------

class Functor(ABC, Generic[T]):
    """
    A structure that supports mapping a function over the values it contains.

    Laws (for all f: a->b, g: b->c):
      1) Identity:     fmap(id)      == id
      2) Composition:  fmap(g)∘fmap(f) == fmap(g∘f)

    ::: This is-in-layer Foundation-Layer.
    ::: This is a type-class.
    ::: This is stateless.
    """

    @abstractmethod
    def fmap(self, f: Callable[[T], U]) -> "Functor[U]":
        """Map a pure function over the structure."""
        raise NotImplementedError

    # Convenience alias
    def map(self, f: Callable[[T], U]) -> "Functor[U]":
        return self.fmap(f)


class Applicative(Functor[T], ABC):
    """
    A Functor that can lift pure values and apply wrapped functions.

    Additional operations:
      - pure: wrap a value in the context
      - ap: apply a wrapped function to a wrapped value

    ::: This is-in-layer Foundation-Layer.
    ::: This is a type-class.
    ::: This is stateless.
    """

    @classmethod
    @abstractmethod
    def pure(cls, x: U) -> "Applicative[U]":
        """Lift a value into the applicative context."""
        raise NotImplementedError

    @abstractmethod
    def ap(self: "Applicative[Callable[[T], U]]", x: "Applicative[T]") -> "Applicative[U]":
        """Apply a wrapped function to a wrapped value."""
        raise NotImplementedError

    @classmethod
    def liftA2(cls, f: Callable[[T, U], V], a: "Applicative[T]", b: "Applicative[U]") -> "Applicative[V]":
        """
        Lift a binary function into the applicative context.
        Equivalent to: pure(curry(f)).ap(a).ap(b)
        """
        return cls.pure(curry(f)).ap(a).ap(b)  # type: ignore[misc]


class Monad(Applicative[T], ABC):
    """
    A structure that supports flattening/sequencing (bind).

    Laws (for all x and functions f: a -> m b, g: b -> m c):
      1) Left identity:  pure(x).bind(f) == f(x)
      2) Right identity: m.bind(pure)    == m
      3) Associativity:  m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))

    ::: This is-in-layer Foundation-Layer.
    ::: This is a type-class.
    ::: This is stateless.
    """

    @abstractmethod
    def bind(self, f: Callable[[T], "Monad[U]"]) -> "Monad[U]":
        """Chain a function that returns a wrapped value (aka flatMap)."""
        raise NotImplementedError

    # Aliases / ergonomics
    def flat_map(self, f: Callable[[T], "Monad[U]"]) -> "Monad[U]":
        return self.bind(f)

    def __rshift__(self, f: Callable[[T], "Monad[U]"]) -> "Monad[U]":
        """Syntactic sugar: m >> f == m.bind(f)"""
        return self.bind(f)


# ---------------------------------------------------------------------------
# Maybe
# ---------------------------------------------------------------------------

class Maybe(Monad[T], ABC):
    """
    Optional value: either Just(value) or Nothing().

    A Maybe is also an iterable of zero or one element, which is what lets
    it stand in as a singleton sequence.

    ::: This is-in-layer Foundation-Layer.
    ::: This is a monad.
    ::: This is stateless.
    """

    @classmethod
    def pure(cls, x: U) -> "Maybe[U]":  # type: ignore[override]
        return Just(x)

    def is_just(self) -> bool:
        return isinstance(self, Just)

    def is_nothing(self) -> bool:
        return isinstance(self, Nothing)

    def get(self) -> T:
        """Get the value or raise NoSuchElementError if Nothing."""
        if isinstance(self, Just):
            return self.value
        raise NoSuchElementError("get() on Nothing")

    def get_or_else(self, default: T) -> T:
        """Get the value or return default if Nothing."""
        if isinstance(self, Just):
            return self.value
        return default

    def or_else(self, alternative: "Maybe[T]") -> "Maybe[T]":
        """Return self if Just, otherwise return alternative."""
        if isinstance(self, Just):
            return self
        return alternative

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        raise NotImplementedError


@dataclass(frozen=True)
class Just(Maybe[T]):
    """Represents a present value in a Maybe context.

    ::: This is-in-layer Foundation-Layer.
    ::: This is a monad.
    ::: This is stateless.
    """
    value: T

    def bind(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return f(self.value)

    def fmap(self, f: Callable[[T], U]) -> Maybe[U]:  # type: ignore[override]
        return Just(f(self.value))

    def ap(self, x: Maybe[T]) -> Maybe[U]:  # type: ignore[override]
        # self is expected to hold a function
        if callable(self.value):
            if isinstance(x, Just):
                return Just(self.value(x.value))  # type: ignore[misc]
            return Nothing()
        raise TypeError("Just.ap expects a Just(function).")

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __repr__(self) -> str:
        return f"Just({self.value!r})"


@dataclass(frozen=True)
class Nothing(Maybe[Any]):
    """Represents an absent value in a Maybe context.

    ::: This is-in-layer Foundation-Layer.
    ::: This is a monad.
    ::: This is stateless.
    """
    def bind(self, f: Callable[[Any], Maybe[U]]) -> Maybe[U]:
        return self  # type: ignore[return-value]

    def fmap(self, f: Callable[[Any], U]) -> Maybe[U]:  # type: ignore[override]
        return self  # type: ignore[return-value]

    def ap(self, x: Maybe[Any]) -> Maybe[Any]:  # type: ignore[override]
        return self

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __repr__(self) -> str:
        return "Nothing()"


# ---------------------------------------------------------------------------
# Function helpers
# ---------------------------------------------------------------------------

def compose(f: Callable[[U], V], g: Callable[[T], U]) -> Callable[[T], V]:
    """Function composition: compose(f, g)(x) == f(g(x))"""
    return lambda x: f(g(x))


def identity(x: T) -> T:
    """Identity function."""
    return x


def curry(f: Callable[[T, U], V]) -> Callable[[T], Callable[[U], V]]:
    """Curry a binary function: curry(f)(x)(y) == f(x, y)."""
    return lambda x: lambda y: f(x, y)
