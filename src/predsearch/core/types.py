"""Reusable type definitions for the predsearch package.

Type Aliases:
    Predicate: A callable invoked as ``predicate(value, key)``.
    Collection: Anything the search functions accept as input.

These aliases are shared by the core models and the functional helpers so the
public signatures stay consistent.
"""

import typing as tp
import pandas as pd

__all__ = [
    "K",
    "V",
    "T",
    "Predicate",
    "Collection",
]

K = tp.TypeVar("K")
V = tp.TypeVar("V")
T = tp.TypeVar("T")

Predicate = tp.Callable[[V, K], bool]

Collection = tp.Union[tp.Mapping[K, V], pd.Series, pd.DataFrame, tp.Iterable[V]]
