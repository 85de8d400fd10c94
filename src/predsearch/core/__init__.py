"""Core models, types and settings."""

from predsearch.core.base_models import Match, Some
from predsearch.core.config import Settings

__all__ = [
    "Match",
    "Some",
    "Settings",
]
