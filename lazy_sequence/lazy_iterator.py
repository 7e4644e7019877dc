import logging
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple

from . import combinators as C
from .primitives import entries, flat_map
from .sequence_types import NO_VALUE, Entry, T

logger = logging.getLogger(__name__)

Operation = Callable[[Iterator], Iterable]


class LazyIterator(Generic[T]):
    """
    A chainable, lazy sequence. Pipeline stages are stored and applied only
    when the sequence is iterated, so a re-iterable source can be traversed
    any number of times. Every sequence method returns a new LazyIterator
    and leaves this one untouched.
    """
    def __init__(self, iterable: Optional[Iterable[T]] = None, operations: Tuple[Operation, ...] = ()):
        self._src = iterable
        self._operations = tuple(operations)

    def __iter__(self) -> Iterator[T]:
        if self._src is None:
            return iter(())
        it = iter(self._src)
        if self._operations:
            logger.debug("building pipeline with %d stage(s)", len(self._operations))
        for operation in self._operations:
            it = iter(operation(it))
        return it

    def _extend(self, operation: Operation) -> "LazyIterator":
        return LazyIterator(self._src, self._operations + (operation,))

    # --------- chainable stages (lazy) ----------
    def entries(self) -> "LazyIterator[Entry]":
        return self._extend(entries)

    def map(self, func):
        return self._extend(lambda it: C.map(it, func))

    def flat_map(self, func):
        return self._extend(lambda it: flat_map(it, func))

    def filter(self, func):
        return self._extend(lambda it: C.filter(it, func))

    def filter_map(self, func):
        return self._extend(lambda it: C.filter_map(it, func))

    def flat(self):
        return self._extend(C.flat)

    def drop(self, n: int = 1):
        return self._extend(lambda it: C.drop(it, n))

    def concat(self, *inputs):
        return self._extend(lambda it: C.concat(it, *inputs))

    def take_while(self, func):
        return self._extend(lambda it: C.take_while(it, func))

    def take(self, n: int = 1):
        return self._extend(lambda it: C.take(it, n))

    def zip(self, *inputs):
        return self._extend(lambda it: C.zip(it, *inputs))

    def uniq(self, key=None):
        return self._extend(lambda it: C.uniq(it, key))

    def scan(self, func, init):
        return self._extend(lambda it: C.scan(it, func, init))

    def flat_scan(self, func, init):
        return self._extend(lambda it: C.flat_scan(it, func, init))

    # --------- terminal operations (force evaluation) ----------
    def first(self) -> Optional[T]:
        return C.first(self)

    def last(self) -> Optional[T]:
        return C.last(self)

    def find_entry(self, func) -> Optional[Entry]:
        return C.find_entry(self, func)

    def find(self, func) -> Optional[T]:
        return C.find(self, func)

    def fold(self, func, init):
        return C.fold(self, func, init)

    def reduce(self, func, init: Any = NO_VALUE):
        return C.reduce(self, func, init)

    def for_each(self, func) -> None:
        C.for_each(self, func)

    def some(self, func=None) -> bool:
        return C.some(self, func)

    def every(self, func) -> bool:
        return C.every(self, func)

    def is_equal(self, other, e=C.is_strict_equal) -> bool:
        return C.is_equal(self, other, e)

    def to_list(self) -> List[T]:
        return C.to_list(self)

    def reverse(self) -> List[T]:
        return C.reverse(self)

    def is_empty(self) -> bool:
        return C.is_empty(self)

    def sum(self):
        return C.sum(self)

    def min(self):
        return C.min(self)

    def max(self):
        return C.max(self)

    def join(self, separator: str) -> str:
        return C.join(self, separator)
