import typing as tp
from collections.abc import Mapping, Sized

import pandas as pd

from predsearch.core.types import Collection

__all__ = [
    "iter_items",
    "is_empty",
    "ensure_predicate",
]


def iter_items(collection: Collection) -> tp.Iterator[tp.Tuple[tp.Any, tp.Any]]:
    """Iterates ``(key, value)`` pairs of a collection in its own order.

    Args:
        collection: A mapping, a pandas Series or DataFrame, or any iterable.

    Returns:
        An iterator of ``(key, value)`` pairs. Mappings yield their keys,
        Series their index labels, DataFrames their column labels with each
        column, and every other iterable its positions starting at 0.

    Raises:
        TypeError: If the collection is not iterable.
    """
    if isinstance(collection, (pd.Series, pd.DataFrame, Mapping)):
        return iter(collection.items())
    return enumerate(collection)


def is_empty(collection: Collection) -> bool:
    """Returns True only when the collection is known to hold no elements.

    Iterables without a length (generators, iterators) are never reported as
    empty, since checking would consume them. DataFrames are iterated by
    column, so a frame with columns but no rows is not empty.
    """
    if isinstance(collection, pd.DataFrame):
        return len(collection.columns) == 0
    if isinstance(collection, Sized):
        return len(collection) == 0
    return False


def ensure_predicate(predicate: tp.Any) -> None:
    if not callable(predicate):
        raise TypeError(
            f"Predicate must be callable, got {type(predicate).__name__}."
        )
