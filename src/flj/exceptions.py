"""
flj Exception Hierarchy

Contains all exception classes raised by the flj package. Each error also
derives from the builtin exception a Python caller would expect for the
same condition.
"""


class FljError(Exception):
    """
    Base exception for all flj operations.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """
    pass


class EmptySequenceError(FljError, ValueError):
    """
    Raised when a reduction without a seed is applied to an empty sequence,
    or when the head/tail of an empty stream is requested.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """
    pass


class IndexOutOfRangeError(FljError, IndexError):
    """
    Raised on positional access outside the bounds of a sequence.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """
    pass


class NoSuchElementError(FljError, LookupError):
    """
    Raised when an iterator is moved past one of its boundaries, or when the
    value of an empty optional is requested.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """
    pass


class UnsupportedOperationError(FljError, TypeError):
    """
    Raised when a mutation is attempted on an immutable list or iterator.

    ::: This is-in-layer Utility-Layer.
    ::: This is a exception.
    ::: This is stateless.
    """
    pass


__all__ = [
    "FljError",
    "EmptySequenceError",
    "IndexOutOfRangeError",
    "NoSuchElementError",
    "UnsupportedOperationError",
]
