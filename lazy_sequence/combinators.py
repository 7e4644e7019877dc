"""
Derived combinators.

Sequence-producing functions are lazy: nothing is pulled from ``source``
until the result is iterated. Terminal functions (``fold``, ``to_list``,
``sum``, ...) consume their input immediately. A ``None`` source is an
empty sequence everywhere.
"""

import logging
import math
from collections.abc import Sized
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from .primitives import empty, entries, flat_map, infinite, iterable
from .sequence_types import ENTRY_VALUE, NO_VALUE, A, B, Entry, R, T, positional

logger = logging.getLogger(__name__)


def _always(*_) -> bool:
    return True


def optional_to_list(value: Optional[T]) -> List[T]:
    return [] if value is None else [value]


def map(source: Optional[Iterable[T]], func: Callable[[T, int], R]):
    call = positional(func, 2)
    return flat_map(source, lambda v, i: (call(v, i),))


def filter(source: Optional[Iterable[T]], func: Callable[[T, int], bool]):
    call = positional(func, 2)
    return flat_map(source, lambda v, i: (v,) if call(v, i) else ())


def filter_map(source: Optional[Iterable[T]], func: Callable[[T, int], Optional[R]]):
    """Map and drop the elements for which ``func`` returns ``None``."""
    call = positional(func, 2)
    return flat_map(source, lambda v, i: optional_to_list(call(v, i)))


def flat(source: Optional[Iterable[Optional[Iterable[T]]]]):
    return flat_map(source, lambda inner: () if inner is None else inner)


flatten = flat


def concat(*sources: Optional[Iterable[T]]):
    return flat(sources)


def take_while(source: Optional[Iterable[T]], func: Callable[[T, int], bool]):
    """Yield elements until ``func`` first fails; later elements are never read."""
    call = positional(func, 2)
    return flat_map(source, lambda v, i: (v,) if call(v, i) else None)


def take(source: Optional[Iterable[T]], n: int = 1):
    return take_while(source, lambda _, i: i < n)


def drop(source: Optional[Iterable[T]], n: int = 1):
    return filter(source, lambda _, i: n <= i)


def drop_right(items: Optional[Sequence[T]], n: int = 1):
    if items is None:
        return empty()
    if not isinstance(items, Sized):
        raise TypeError("drop_right requires a sized collection")
    if n > len(items):
        logger.debug("drop_right: dropping %d of %d items leaves nothing", n, len(items))
    return take(items, len(items) - n)


def generate(func: Callable[[int], T], count: Optional[int] = None):
    """``func(0), func(1), ...``; endless unless ``count`` is given.

    A ``count`` of zero or less yields nothing.
    """
    call = positional(func, 1)
    return flat_map(infinite(), lambda _, i: None if count is not None and i >= count else (call(i),))


def repeat(value: T, count: Optional[int] = None):
    return generate(lambda: value, count)


def zip(*sources: Optional[Iterable[Any]]):
    """Tuples of aligned elements; stops with the shortest source."""
    def iterator():
        if not sources:
            return
        cursors = [iter(()) if s is None else iter(s) for s in sources]
        while True:
            row = []
            for cursor in cursors:
                value = next(cursor, NO_VALUE)
                if value is NO_VALUE:
                    return
                row.append(value)
            yield tuple(row)
    return iterable(iterator)


def scan(source: Optional[Iterable[T]], func: Callable[[A, T, int], A], init: A):
    """Exclusive scan: ``init`` followed by every running accumulation."""
    call = positional(func, 3)

    def iterator():
        result = init
        yield result
        for index, value in entries(source):
            result = call(result, value, index)
            yield result
    return iterable(iterator)


def flat_scan(
    source: Optional[Iterable[T]],
    func: Callable[[A, T, int], Tuple[A, Iterable[R]]],
    init: A,
):
    call = positional(func, 3)

    def iterator():
        state = init
        for index, value in entries(source):
            state, result = call(state, value, index)
            yield from result
    return iterable(iterator)


def uniq(source: Optional[Iterable[T]], key: Optional[Callable[[T], Any]] = None):
    """Keep the first element for every distinct ``key(element)``.

    Keys must be hashable; the default key is the element itself.
    """
    get_key = (lambda v: v) if key is None else key

    def step(seen, v):
        k = get_key(v)
        if k in seen:
            return seen, ()
        seen.add(k)
        return seen, (v,)

    def iterator():
        return iter(flat_scan(source, step, set()))
    return iterable(iterator)


def fold(source: Optional[Iterable[T]], func: Callable[[A, T, int], A], init: A) -> A:
    call = positional(func, 3)
    result = init
    for index, value in entries(source):
        result = call(result, value, index)
    return result


def reduce(source: Optional[Iterable[T]], func: Callable[[T, T, int], T], init: Any = NO_VALUE):
    """Fold seeded with ``init``, or with the first element when it is omitted.

    Without ``init`` an empty source reduces to ``None``.
    """
    if init is not NO_VALUE:
        return fold(source, func, init)
    call = positional(func, 3)
    result = fold(source, lambda a, b, i: b if a is NO_VALUE else call(a, b, i), NO_VALUE)
    return None if result is NO_VALUE else result


def for_each(source: Optional[Iterable[T]], func: Callable[[T, int], Any]) -> None:
    call = positional(func, 2)
    fold(source, lambda _, v, i: call(v, i), None)


def sum(source: Optional[Iterable[float]]) -> float:
    return fold(source, lambda a, b: a + b, 0)


def _is_nan(value: Any) -> bool:
    return value != value


def min(source: Optional[Iterable[float]]) -> float:
    """Smallest element, ``math.inf`` when empty; any NaN makes the result NaN."""
    return fold(source, lambda a, b: a if _is_nan(a) else b if _is_nan(b) or b < a else a, math.inf)


def max(source: Optional[Iterable[float]]) -> float:
    """Largest element, ``-math.inf`` when empty; any NaN makes the result NaN."""
    return fold(source, lambda a, b: a if _is_nan(a) else b if _is_nan(b) or b > a else a, -math.inf)


def find_entry(source: Optional[Iterable[T]], func: Callable[[T, int], bool]) -> Optional[Entry]:
    """Like ``find`` but returns the ``Entry``, so a found ``None`` is visible."""
    call = positional(func, 2)
    for entry in entries(source):
        if call(entry.value, entry.key):
            return entry
    return None


def find(source: Optional[Iterable[T]], func: Callable[[T, int], bool]) -> Optional[T]:
    entry = find_entry(source, func)
    return None if entry is None else entry[ENTRY_VALUE]


def first(source: Optional[Iterable[T]]) -> Optional[T]:
    return find(source, _always)


def last(source: Optional[Iterable[T]]) -> Optional[T]:
    return reduce(source, lambda _, v: v)


def some(source: Optional[Iterable[T]], func: Optional[Callable[[T, int], bool]] = None) -> bool:
    return find_entry(source, _always if func is None else func) is not None


def every(source: Optional[Iterable[T]], func: Callable[[T, int], bool]) -> bool:
    call = positional(func, 2)
    return not some(source, lambda v, i: not call(v, i))


def is_strict_equal(a: Any, b: Any) -> bool:
    return a is b or a == b


def is_equal(
    a: Optional[Iterable[A]],
    b: Optional[Iterable[B]],
    e: Callable[[A, B], bool] = is_strict_equal,
) -> bool:
    if a is b:
        return True
    if a is None or b is None:
        return False
    call = positional(e, 2)
    ai = iter(a)
    bi = iter(b)
    while True:
        av = next(ai, NO_VALUE)
        bv = next(bi, NO_VALUE)
        if av is NO_VALUE or bv is NO_VALUE:
            return av is bv
        if not call(av, bv):
            return False


def array_equal(
    a: Optional[Sequence[A]],
    b: Optional[Sequence[B]],
    e: Callable[[A, B], bool] = is_strict_equal,
) -> bool:
    """``is_equal`` for sized collections: lengths are compared up front."""
    if a is b:
        return True
    if a is None or b is None:
        return False
    if len(a) != len(b):
        return False
    call = positional(e, 2)
    return every(a, lambda v, i: call(v, b[i]))


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def to_list(source: Optional[Iterable[T]]) -> List[T]:
    return [] if source is None else list(source)


def reverse(source: Optional[Iterable[T]]) -> List[T]:
    result = to_list(source)
    result.reverse()
    return result


def array_reverse(items: Optional[Sequence[T]]):
    """Lazily walk a sized collection from its last item to its first."""
    def iterator():
        if items is None:
            return
        for i in range(len(items) - 1, -1, -1):
            yield items[i]
    return iterable(iterator)


def is_empty(source: Optional[Iterable[T]]) -> bool:
    return not some(source)


def join(source: Optional[Iterable[str]], separator: str) -> str:
    result = reduce(source, lambda a, b: a + separator + b)
    return "" if result is None else result
