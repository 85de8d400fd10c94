"""Functional primitives for predsearch.

Stateless, side-effect-free search helpers over mappings, sequences and
pandas objects. Apart from the user-supplied predicate nothing here has side
effects, so the helpers compose freely.
"""

from predsearch.functional.search import (
    each_match,
    find_value,
    find_key,
    any_match,
    all_match,
    value_or,
)

__all__ = [
    "each_match",
    "find_value",
    "find_key",
    "any_match",
    "all_match",
    "value_or",
]
