"""Predicate search helpers for keyed and ordered collections."""

from predsearch.core.base_models import Match, Some
from predsearch.functional.search import (
    each_match,
    find_value,
    find_key,
    any_match,
    all_match,
    value_or,
)

__all__ = [
    "Match",
    "Some",
    "each_match",
    "find_value",
    "find_key",
    "any_match",
    "all_match",
    "value_or",
]
