import inspect
from typing import Any, Callable, NamedTuple, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")
A = TypeVar("A")
B = TypeVar("B")

ENTRY_KEY = 0
ENTRY_VALUE = 1


class Entry(NamedTuple):
    """Zero-based traversal position paired with the element found there"""
    key: int
    value: Any


def _accepted_positional(func: Callable, limit: int) -> Optional[int]:
    """How many leading positional arguments ``func`` requires, capped at ``limit``.

    A callable whose positional parameters all have defaults (``int``,
    ``str`` on some interpreters) takes one. ``None`` means the signature
    cannot be inspected.
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return None

    required = optional = 0
    variadic = False
    for p in sig.parameters.values():
        if p.kind is p.VAR_POSITIONAL:
            variadic = True
        if p.kind is p.KEYWORD_ONLY and p.default is p.empty:
            raise TypeError(
                f"callback {getattr(func, '__name__', func)!r} has a required "
                f"keyword-only parameter {p.name!r}; callbacks receive positional arguments"
            )
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD):
            if p.default is p.empty:
                required += 1
            else:
                optional += 1
    if variadic:
        return limit
    accepted = required if required else min(optional, 1)
    return min(accepted, limit)


def _probing(func: Callable, count: int) -> Callable:
    """Call an uninspectable builtin with the fewest leading arguments it accepts.

    ``max``, ``pow`` and friends are tried with one argument, then two, and
    so on up to ``count``. Only a ``TypeError`` raised by ``func`` itself
    moves on to the next width; the first width that succeeds is kept for
    later calls.
    """
    accepted = None

    def call(*args):
        nonlocal accepted
        if accepted is not None:
            return func(*args[:accepted])
        error = None
        for width in range(1, count + 1):
            try:
                result = func(*args[:width])
            except TypeError as exc:
                # raised below func means func itself accepted the arguments
                if exc.__traceback__.tb_next is not None:
                    raise
                error = exc
                continue
            accepted = width
            return result
        raise error
    return call


def positional(func: Callable, count: int) -> Callable:
    """Adapt ``func`` to be called with ``count`` positional arguments.

    Combinators hand callbacks ``(value, index)`` or ``(acc, value, index)``;
    a callback declaring fewer parameters only receives the leading ones.
    """
    accepted = _accepted_positional(func, count)
    if accepted is None:
        return func if count <= 1 else _probing(func, count)
    if accepted >= count:
        return func

    def call(*args):
        return func(*args[:accepted])
    return call


# Internal end-of-data marker, distinct from None so that None elements
# survive folding and lock-step comparisons.
NO_VALUE: Any = object()
