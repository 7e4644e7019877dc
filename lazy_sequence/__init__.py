"""Lazy sequence combinators built on ``flat_map`` and ``entries``."""

__version__ = "0.4.0"

from .sequence_types import ENTRY_KEY, ENTRY_VALUE, Entry
from .primitives import chain, empty, entries, flat_map, iterable
from .combinators import (
    array_equal,
    array_reverse,
    concat,
    drop,
    drop_right,
    every,
    filter,
    filter_map,
    find,
    find_entry,
    first,
    flat,
    flat_scan,
    flatten,
    fold,
    for_each,
    generate,
    is_array,
    is_empty,
    is_equal,
    is_strict_equal,
    join,
    last,
    map,
    max,
    min,
    optional_to_list,
    reduce,
    repeat,
    reverse,
    scan,
    some,
    sum,
    take,
    take_while,
    to_list,
    uniq,
    zip,
)
from .lazy_iterator import LazyIterator
from . import keyed
from .keyed import group_by, name_value, to_dict, values
