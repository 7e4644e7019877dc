"""
Conversions between string-keyed mappings and sequences of (name, value)
pairs.

``values`` and ``entries`` skip keys whose value is ``None``, the same way
``filter_map`` drops ``None`` results.
"""

import logging
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple

from .combinators import filter_map, fold
from .primitives import iterable
from .sequence_types import T, positional

logger = logging.getLogger(__name__)


def name_value(name: str, value: T) -> Tuple[str, T]:
    return name, value


def _names(source: Optional[Mapping[str, T]]):
    return iterable(lambda: iter(() if source is None else source))


def values(source: Optional[Mapping[str, T]]):
    return filter_map(_names(source), lambda name: source[name])


def entries(source: Optional[Mapping[str, T]]):
    def pair(name):
        value = source[name]
        return None if value is None else name_value(name, value)
    return filter_map(_names(source), pair)


def group_by(source: Optional[Iterable[Tuple[str, T]]], reducer: Callable[[T, T], T]) -> Dict[str, T]:
    """Fold (name, value) pairs into a dict.

    The first value seen for a name is stored as is; later ones are combined
    with ``reducer(prior, value)`` in encounter order.
    """
    call = positional(reducer, 2)

    def step(result, pair):
        name, value = pair
        result[name] = call(result[name], value) if name in result else value
        return result

    result = fold(source, step, {})
    logger.debug("grouped pairs into %d key(s)", len(result))
    return result


def to_dict(source: Optional[Iterable[Tuple[str, T]]]) -> Dict[str, T]:
    """Like ``group_by`` but the last value for a name wins."""
    return group_by(source, lambda _, value: value)
