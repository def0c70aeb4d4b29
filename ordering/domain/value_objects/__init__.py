"""Domain value objects."""

from .value_objects import Money

__all__ = [
    "Money",
]
