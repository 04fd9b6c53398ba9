"""Infrastructure patterns package."""

from patternkit.infrastructure.patterns.singleton_access import (
    Singleton,
    get_singleton,
    reset_singletons,
)
from patternkit.infrastructure.patterns.singleton_registry import SingletonRegistry

__all__ = ["Singleton", "SingletonRegistry", "get_singleton", "reset_singletons"]
