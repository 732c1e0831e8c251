"""Domain types for check trees."""

from checktree.domain.types import CheckInfo

__all__ = [
    'CheckInfo',
]
