"""
Iteration protocol glue and the primitive combinators.

A sequence is anything with ``__iter__``; its cursor is a Python iterator
advanced with ``next()``. Everything in ``combinators`` reduces to
``entries`` and ``flat_map`` defined here.
"""

from typing import TYPE_CHECKING, Callable, Iterable, Iterator, Optional

from .sequence_types import Entry, R, T, positional

if TYPE_CHECKING:
    from .lazy_iterator import LazyIterator


class _Restartable:
    """Iterable that asks its factory for a fresh iterator on every pass."""

    def __init__(self, create_iterator: Callable[[], Iterator[T]]):
        self._create_iterator = create_iterator

    def __iter__(self) -> Iterator[T]:
        return iter(self._create_iterator())


def iterable(create_iterator: Callable[[], Iterator[T]]) -> "LazyIterator[T]":
    return chain(_Restartable(create_iterator))


def chain(items: Optional[Iterable[T]]) -> "LazyIterator[T]":
    # lazy_iterator imports this module
    from .lazy_iterator import LazyIterator
    return LazyIterator(items)


def empty() -> "LazyIterator":
    return iterable(lambda: iter(()))


def infinite() -> "LazyIterator[None]":
    def iterator():
        while True:
            yield None
    return iterable(iterator)


def entries(source: Optional[Iterable[T]]) -> "LazyIterator[Entry]":
    """Pair every element with its zero-based position in this traversal."""
    def iterator():
        if source is None:
            return
        for index, value in enumerate(source):
            yield Entry(index, value)
    return iterable(iterator)


def flat_map(
    source: Optional[Iterable[T]],
    func: Callable[[T, int], Optional[Iterable[R]]],
) -> "LazyIterator[R]":
    """Map each element to an iterable and yield the inner elements in order.

    ``func`` returning ``None`` ends the whole traversal at that element;
    ``take_while`` and ``generate`` rely on this.
    """
    call = positional(func, 2)

    def iterator():
        for index, value in entries(source):
            inner = call(value, index)
            if inner is None:
                return
            yield from inner
    return iterable(iterator)
