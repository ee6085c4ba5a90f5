"""
Helpers standing in for optional chaining (?.), null coalescing (??)
and null-coalescing assignment (??=).
"""
from typing import Any, Callable, Optional, TypeVar

T = TypeVar('T')


def get_or_none(obj: Any, attribute: str) -> Any:
    """
    Return obj.<attribute>, or None when obj itself is None.

    A missing attribute on a real object still raises AttributeError.
    """
    if obj is None:
        return None
    return getattr(obj, attribute)


def coalesce(*values: Any) -> Any:
    """
    Return the first value that is not None. Falsy values such as '' or 0 count as present.
    """
    for value in values:
        if value is not None:
            return value
    return None


def coalesce_assign(value: Optional[T], factory: Callable[[], T]) -> T:
    """
    Return value when present, otherwise the result of factory().

    factory is only called when value is None.
    """
    if value is None:
        return factory()
    return value
