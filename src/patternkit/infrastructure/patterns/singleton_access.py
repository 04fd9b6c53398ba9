"""Standard singleton access functions."""

from typing import Any, Type, TypeVar

from patternkit.domain.core.exceptions import ConstructionNotAllowedError
from patternkit.infrastructure.logging.logger import get_logger
from patternkit.infrastructure.patterns.singleton_registry import SingletonRegistry

T = TypeVar("T")

logger = get_logger(__name__)


def get_singleton(singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """
    Standard way to get singleton instances.

    This function provides a consistent way to access singleton instances
    throughout the application. It uses the SingletonRegistry to ensure
    that only one instance of each singleton class is created and reused.

    Args:
        singleton_class: The class to get an instance of
        *args: Arguments to pass to the constructor if creating a new instance
        **kwargs: Keyword arguments to pass to the constructor if creating a new instance

    Returns:
        The singleton instance
    """
    registry = SingletonRegistry.get_instance()
    return registry.get(singleton_class, *args, **kwargs)


def reset_singletons() -> None:
    """Drop every registered singleton instance."""
    SingletonRegistry.get_instance().reset()


class Singleton:
    """
    Base class for restricted-construction singletons.

    Subclasses are obtained only through ``get_instance()``; calling the
    class directly raises ConstructionNotAllowedError. Each subclass is its
    own registration key, so a subclass never shares its parent's instance.

    Usage:
        class Settings(Singleton):
            def __init__(self, name: str = "default"):
                self.name = name

        settings = Settings.get_instance()
    """

    def __new__(cls, *args: Any, **kwargs: Any):
        if not SingletonRegistry.get_instance().claim_construction(cls):
            logger.warning("Rejected direct singleton construction", singleton=cls.__name__)
            raise ConstructionNotAllowedError(cls.__name__)
        return super().__new__(cls)

    @classmethod
    def get_instance(cls: Type[T], *args: Any, **kwargs: Any) -> T:
        """Return the process-wide instance, creating it on first call."""
        return get_singleton(cls, *args, **kwargs)
