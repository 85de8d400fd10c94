"""Predicate search over keyed and ordered collections.

Every function walks the collection once, in its own iteration order, and
calls ``predicate(value, key)`` for each visited element until the outcome is
known:

    - **each_match**: first ``Match`` (key and value) accepted by the predicate.
    - **find_value**: value of the first match, wrapped in ``Some``.
    - **find_key**: key of the first match, wrapped in ``Some``.
    - **any_match**: whether at least one element is accepted.
    - **all_match**: whether every element is accepted (True when empty).

Absence is always ``None``. Because a found value is wrapped in ``Some``, a
collection holding ``None``, ``0`` or ``False`` can still be searched without
ambiguity. Exceptions raised by the predicate propagate to the caller and
stop the iteration at the element being processed.

Examples:
    >>> from predsearch import find_key, find_value, all_match
    >>>
    >>> find_key(["a", "b", "c"], lambda value, key: value == "b")
    Some(value=1)
    >>> find_value({"x": 1, "y": 2}, lambda value, key: value > 5) is None
    True
    >>> all_match([2, 4, 6], lambda value, key: value % 2 == 0)
    True
"""

import typing as tp

from predsearch.core.base_models import Match, Some
from predsearch.core.types import Collection, Predicate, K, V, T
from predsearch.functional.items import ensure_predicate, is_empty, iter_items
from predsearch.logger.logger import logger

__all__ = [
    "each_match",
    "find_value",
    "find_key",
    "any_match",
    "all_match",
    "value_or",
]


def each_match(
    collection: Collection, predicate: Predicate[V, K]
) -> tp.Optional[Match[K, V]]:
    """Returns the first element for which the predicate holds.

    Elements are visited in collection order and the iteration stops as soon
    as ``predicate(value, key)`` is truthy, so the predicate is called exactly
    ``index_of_match + 1`` times when a match exists and once per element
    otherwise.

    Args:
        collection: Mapping, pandas Series/DataFrame or any iterable.
        predicate: Callable taking ``(value, key)``.

    Returns:
        The ``Match`` of the first accepted element, or None if no element is
        accepted (including when the collection is empty).

    Raises:
        TypeError: If the predicate is not callable or the collection is not
            iterable.
    """
    ensure_predicate(predicate)
    return _each_match(collection, predicate)


def _each_match(
    collection: Collection, predicate: Predicate[V, K]
) -> tp.Optional[Match[K, V]]:
    # Callers have already validated the predicate
    visited = 0
    for key, value in iter_items(collection):
        visited += 1
        if predicate(value, key):
            logger.debug(f"each_match: matched key {key!r} after {visited} element(s)")
            return Match(key=key, value=value)

    logger.debug(f"each_match: no match among {visited} element(s)")
    return None


def find_value(
    collection: Collection, predicate: Predicate[V, K]
) -> tp.Optional[Some[V]]:
    """Finds the value of the first element for which the predicate holds.

    Args:
        collection: Mapping, pandas Series/DataFrame or any iterable.
        predicate: Callable taking ``(value, key)``.

    Returns:
        ``Some(value=...)`` holding the first matching value, or None.
    """
    ensure_predicate(predicate)
    if is_empty(collection):
        return None

    match = _each_match(collection, predicate)
    return None if match is None else Some(value=match.value)


def find_key(
    collection: Collection, predicate: Predicate[V, K]
) -> tp.Optional[Some[K]]:
    """Finds the key of the first element for which the predicate holds.

    Args:
        collection: Mapping, pandas Series/DataFrame or any iterable.
        predicate: Callable taking ``(value, key)``.

    Returns:
        ``Some(value=...)`` holding the first matching key, or None.
    """
    ensure_predicate(predicate)
    if is_empty(collection):
        return None

    match = _each_match(collection, predicate)
    return None if match is None else Some(value=match.key)


def any_match(collection: Collection, predicate: Predicate[V, K]) -> bool:
    """Checks whether at least one element satisfies the predicate."""
    ensure_predicate(predicate)
    if is_empty(collection):
        return False
    return _each_match(collection, predicate) is not None


def all_match(collection: Collection, predicate: Predicate[V, K]) -> bool:
    """Checks whether every element satisfies the predicate.

    Stops at the first element whose predicate result is falsy; no later
    element is visited. An empty collection is vacuously accepted without
    calling the predicate.

    Args:
        collection: Mapping, pandas Series/DataFrame or any iterable.
        predicate: Callable taking ``(value, key)``.

    Returns:
        False at the first failing element, True otherwise.
    """
    ensure_predicate(predicate)

    visited = 0
    for key, value in iter_items(collection):
        visited += 1
        if not predicate(value, key):
            logger.debug(f"all_match: key {key!r} failed after {visited} element(s)")
            return False

    logger.debug(f"all_match: all {visited} element(s) accepted")
    return True


def value_or(result: tp.Optional[Some[T]], default: T) -> T:
    """Unwraps a ``find_value``/``find_key`` result, or returns ``default``.

    Args:
        result: Result of ``find_value`` or ``find_key``.
        default: Returned when the result is absent.

    Returns:
        The wrapped value, or ``default``.
    """
    return default if result is None else result.value
