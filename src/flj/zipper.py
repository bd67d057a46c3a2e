"""
Zipper - an immutable cursor over a Stream.

A Zipper holds the elements to the left of the focus (nearest first), the
focus itself and the elements to its right. Every navigation returns a new
Zipper wrapped in Maybe; Nothing means the move would leave the sequence.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from .catpy import Just, Maybe, Nothing
from .stream import Stream

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class Zipper(Generic[T]):
    """
    Persistent bidirectional position within a sequence.

    ::: This is-in-layer Foundation-Layer.
    ::: This is a value-object.
    ::: This is stateless.
    """
    lefts: Stream[T]
    current: T
    rights: Stream[T]
    position: int = 0

    @classmethod
    def from_stream(cls, s: Stream[T]) -> Maybe["Zipper[T]"]:
        """Zipper focused on the first element, or Nothing for an empty stream."""
        if s.is_empty():
            return Nothing()
        return Just(cls(Stream.empty(), s.head(), s.tail(), 0))

    def focus(self) -> T:
        return self.current

    def index(self) -> int:
        return self.position

    def at_start(self) -> bool:
        return self.lefts.is_empty()

    def at_end(self) -> bool:
        return self.rights.is_empty()

    def next(self) -> Maybe["Zipper[T]"]:
        if self.at_end():
            return Nothing()
        return Just(Zipper(
            Stream.cons(self.current, self.lefts),
            self.rights.head(),
            self.rights.tail(),
            self.position + 1,
        ))

    def previous(self) -> Maybe["Zipper[T]"]:
        if self.at_start():
            return Nothing()
        return Just(Zipper(
            self.lefts.tail(),
            self.lefts.head(),
            Stream.cons(self.current, self.rights),
            self.position - 1,
        ))

    def move(self, n: int) -> Maybe["Zipper[T]"]:
        """Zipper focused on absolute position ``n``, or Nothing if out of range."""
        if n < 0:
            return Nothing()
        z: Zipper[T] = self
        while z.position != n:
            step = z.next() if z.position < n else z.previous()
            if step.is_nothing():
                return Nothing()
            z = step.get()
        return Just(z)

    def length(self) -> int:
        return self.lefts.length() + 1 + self.rights.length()

    def to_stream(self) -> Stream[T]:
        """All elements, first to last."""
        before = Stream.from_iterable(reversed(self.lefts.to_tuple()))
        return before.append(Stream.cons(self.current, self.rights))

    def __repr__(self) -> str:
        return f"Zipper(index={self.position}, focus={self.current!r})"
