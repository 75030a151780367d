"""Aggregate application use cases."""

from .create_greeting import DEFAULT_GREETING, create_greeting

__all__ = [
    "DEFAULT_GREETING",
    "create_greeting",
]
