"""Process-wide registry of singleton instances."""

import threading
from typing import Any, Dict, Optional, Set, Type, TypeVar

from patternkit.domain.core.exceptions import ConstructionNotAllowedError
from patternkit.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Registry holding at most one instance per registered class.

    Instances are created lazily on first request. Creation happens under a
    re-entrant lock with a double check, so concurrent first calls construct
    exactly once and a singleton may request other singletons while it is
    being built. Requesting the class that is itself under construction
    raises ConstructionNotAllowedError.

    The registry also tracks which classes are currently being constructed
    on the calling thread and grants each construction a single allocation.
    Restricted singletons claim it in __new__, so any other construction
    path, including a direct call made while the instance is being built,
    is rejected.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the process-wide registry, creating it on first use."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def __init__(self):
        self._instances: Dict[type, Any] = {}
        self._registry_lock = threading.RLock()
        self._local = threading.local()
        self.logger = get_logger(__name__)

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of singleton_class, constructing it on first call.

        Args:
            singleton_class: The class to get an instance of
            *args: Constructor arguments, used only when the instance is created
            **kwargs: Constructor keyword arguments, used only when the instance is created

        Returns:
            The singleton instance
        """
        instance = self._instances.get(singleton_class)
        if instance is not None:
            return instance

        with self._registry_lock:
            if singleton_class not in self._instances:
                self._instances[singleton_class] = self._construct(
                    singleton_class, *args, **kwargs
                )
            return self._instances[singleton_class]

    def _construct(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        constructing = self._constructing()
        if singleton_class in constructing:
            self.logger.warning(
                "Singleton requested while under construction",
                singleton=singleton_class.__name__,
            )
            raise ConstructionNotAllowedError(
                singleton_class.__name__, reason="requested again while under construction"
            )

        allowances = self._allowances()
        constructing.add(singleton_class)
        allowances.add(singleton_class)
        try:
            instance = singleton_class(*args, **kwargs)
        finally:
            constructing.discard(singleton_class)
            allowances.discard(singleton_class)
        self.logger.debug("Singleton created", singleton=singleton_class.__name__)
        return instance

    def _constructing(self) -> Set[type]:
        constructing = getattr(self._local, "constructing", None)
        if constructing is None:
            constructing = set()
            self._local.constructing = constructing
        return constructing

    def _allowances(self) -> Set[type]:
        allowances = getattr(self._local, "allowances", None)
        if allowances is None:
            allowances = set()
            self._local.allowances = allowances
        return allowances

    def is_constructing(self, singleton_class: type) -> bool:
        """Check whether the registry is building singleton_class on this thread."""
        return singleton_class in self._constructing()

    def claim_construction(self, singleton_class: type) -> bool:
        """
        Consume the one allocation the registry granted singleton_class.

        Returns True at most once per registry construction, and only on the
        thread performing it.
        """
        allowances = self._allowances()
        if singleton_class not in allowances:
            return False
        allowances.discard(singleton_class)
        return True

    def has_instance(self, singleton_class: type) -> bool:
        """Check if an instance of singleton_class has been created."""
        return singleton_class in self._instances

    def reset(self, singleton_class: Optional[type] = None) -> None:
        """
        Drop one cached instance, or all of them.

        Intended for tests; code holding a reference keeps its old instance.
        """
        with self._registry_lock:
            if singleton_class is None:
                self._instances.clear()
                self.logger.debug("Singleton registry cleared")
            else:
                self._instances.pop(singleton_class, None)
                self.logger.debug("Singleton reset", singleton=singleton_class.__name__)
