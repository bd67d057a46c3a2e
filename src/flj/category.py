"""
Category tagging for test properties.

The categories of a property are the union of the categories declared on
the property itself and those declared on the class that holds it. A class
that declares no categories inherits those of its bases.

Example:
    @category("laws")
    class TestMonadLaws:
        @category("monad")
        def test_left_identity(self):
            ...

    categories_of(TestMonadLaws.test_left_identity, TestMonadLaws)
    # frozenset({"laws", "monad"})
"""

from typing import Any, Callable, FrozenSet, Optional, Tuple, TypeVar

CATEGORIES_ATTR = "__flj_categories__"

F = TypeVar("F", bound=Callable[..., Any])


def _declared(target: Any) -> Tuple[str, ...]:
    if isinstance(target, type):
        return target.__dict__.get(CATEGORIES_ATTR, ())
    return getattr(target, CATEGORIES_ATTR, ())


def category(*names: str) -> Callable[[F], F]:
    """
    Decorator recording the categories of a property (function, method or class).

    Stacked decorators accumulate. The target is returned unchanged apart
    from the recorded names.

    Args:
        *names: One or more non-empty category names

    Raises:
        ValueError: If no name, or an empty name, is given
        TypeError: If a name is not a string
    """
    if not names:
        raise ValueError("category() requires at least one name")
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"category name must be a string, got {type(name).__name__}")
        if not name:
            raise ValueError("category name must not be empty")

    def decorator(target: F) -> F:
        holder = getattr(target, "__func__", target)
        merged = _declared(holder) + tuple(n for n in names if n not in _declared(holder))
        setattr(holder, CATEGORIES_ATTR, merged)
        return target

    return decorator


def categories_of(prop: Any, owner: Optional[type] = None) -> FrozenSet[str]:
    """
    Categories of ``prop`` united with those of ``owner``.

    When ``prop`` is a bound method and no owner is given, the class of the
    bound instance is used.
    """
    if owner is None and hasattr(prop, "__self__") and not isinstance(prop.__self__, type):
        owner = type(prop.__self__)
    found = set(getattr(getattr(prop, "__func__", prop), CATEGORIES_ATTR, ()))
    if owner is not None:
        found.update(getattr(owner, CATEGORIES_ATTR, ()))
    return frozenset(found)
