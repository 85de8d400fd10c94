"""Result models returned by the search functions."""

import typing as tp

from pydantic import BaseModel, ConfigDict

from predsearch.core.types import K, V, T

__all__ = [
    "Match",
    "Some",
]


class Match(BaseModel, tp.Generic[K, V]):
    """Key and value of the first element accepted by a predicate.

    Attributes:
        key: Key of the matched element (position for plain sequences).
        value: The matched element itself, stored as given.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: K
    value: V

    def as_tuple(self) -> tp.Tuple[K, V]:
        """Return the match as a ``(key, value)`` pair."""
        return self.key, self.value


class Some(BaseModel, tp.Generic[T]):
    """A present result.

    ``None`` marks absence, so ``Some(value=None)`` still means a ``None``
    element was found. Instances are always truthy.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: T
