"""Tests for the singleton registry and restricted-construction singletons."""

import threading
import time

import pytest

from patternkit.domain.core.exceptions import ConstructionNotAllowedError
from patternkit.infrastructure.patterns import (
    Singleton,
    SingletonRegistry,
    get_singleton,
    reset_singletons,
)


class Settings(Singleton):
    def __init__(self, name="default"):
        self.name = name


class SlowSingleton(Singleton):
    constructed = 0

    def __init__(self):
        # Widen the window between the existence check and registration
        time.sleep(0.05)
        type(self).constructed += 1


class Parent(Singleton):
    pass


class Child(Parent):
    pass


class Inner(Singleton):
    pass


class Outer(Singleton):
    def __init__(self):
        self.inner = Inner.get_instance()


class SelfReferencing(Singleton):
    def __init__(self):
        self.me = SelfReferencing.get_instance()


class Duplicating(Singleton):
    rejected = []

    def __init__(self):
        try:
            Duplicating()
        except ConstructionNotAllowedError as e:
            type(self).rejected.append(e)


class PlainService:
    def __init__(self, value=0):
        self.value = value


class TestSingletonRegistry:
    """Test cases for SingletonRegistry."""

    def test_registry_is_itself_a_singleton(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()

    def test_get_returns_same_instance(self):
        """Test that repeated requests return one identity."""
        first = get_singleton(PlainService, 1)
        second = get_singleton(PlainService, 2)

        assert first is second
        assert first.value == 1

    def test_reset_single_class(self):
        registry = SingletonRegistry.get_instance()
        first = registry.get(PlainService)

        registry.reset(PlainService)

        assert not registry.has_instance(PlainService)
        assert registry.get(PlainService) is not first

    def test_reset_all(self):
        first = get_singleton(PlainService)

        reset_singletons()

        assert get_singleton(PlainService) is not first


class TestRestrictedSingleton:
    """Test cases for the Singleton base class."""

    def test_direct_construction_is_rejected(self):
        """Test that only the accessor can build the instance."""
        with pytest.raises(ConstructionNotAllowedError) as exc_info:
            Settings()

        assert exc_info.value.class_name == "Settings"

    def test_direct_construction_rejected_after_instance_exists(self):
        Settings.get_instance()

        with pytest.raises(ConstructionNotAllowedError):
            Settings("other")

    def test_get_instance_returns_same_identity(self):
        first = Settings.get_instance("primary")

        assert Settings.get_instance() is first
        assert Settings.get_instance("ignored").name == "primary"

    def test_subclasses_have_their_own_instance(self):
        assert Parent.get_instance() is not Child.get_instance()
        assert type(Child.get_instance()) is Child

    def test_self_request_during_construction_is_rejected(self):
        """Test that a singleton asking for itself while being built fails fast."""
        with pytest.raises(ConstructionNotAllowedError) as exc_info:
            SelfReferencing.get_instance()

        assert exc_info.value.class_name == "SelfReferencing"
        assert exc_info.value.reason is not None
        assert not SingletonRegistry.get_instance().has_instance(SelfReferencing)

    def test_direct_construction_rejected_while_being_built(self):
        """Test that the registry's allocation cannot be reused by a direct call."""
        Duplicating.rejected = []

        instance = Duplicating.get_instance()

        assert len(Duplicating.rejected) == 1
        assert Duplicating.get_instance() is instance

    def test_singleton_may_request_other_singletons_while_constructing(self):
        outer = Outer.get_instance()

        assert outer.inner is Inner.get_instance()

    def test_concurrent_first_access_constructs_once(self):
        """Test that racing first calls all observe one instance."""
        SlowSingleton.constructed = 0
        thread_count = 16
        barrier = threading.Barrier(thread_count)
        results = []
        results_lock = threading.Lock()

        def worker():
            barrier.wait()
            instance = SlowSingleton.get_instance()
            with results_lock:
                results.append(instance)

        threads = [threading.Thread(target=worker) for _ in range(thread_count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == thread_count
        assert all(instance is results[0] for instance in results)
        assert SlowSingleton.constructed == 1

    def test_other_thread_cannot_construct_during_first_access(self):
        """Test that the construction allowance is scoped to the registry's thread."""
        errors = []

        class Probe(Singleton):
            def __init__(self):
                thread = threading.Thread(target=self._construct_directly)
                thread.start()
                thread.join()

            @staticmethod
            def _construct_directly():
                try:
                    Probe()
                except ConstructionNotAllowedError as e:
                    errors.append(e)

        Probe.get_instance()

        assert len(errors) == 1
