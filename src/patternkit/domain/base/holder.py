"""Holder - one replaceable active unit with delegated invocation.

The Holder is the common mechanic behind Strategy contexts and Command
invokers: it stores a single reference typed by a contract and forwards calls
to whichever implementation is currently active.
"""

import threading
from typing import Any, Generic, Optional, Type, TypeVar

from patternkit.domain.core.exceptions import UnboundDelegateError
from patternkit.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class Holder(Generic[T]):
    """
    Holds zero or one active unit and delegates invocations to it.

    Args:
        contract: Optional type the active unit must be an instance of
        operation: Name of the unit method invoke() calls. When None the
                   unit itself is called.
        unit: Optional initial unit
    """

    def __init__(
        self,
        contract: Optional[Type[T]] = None,
        operation: Optional[str] = None,
        unit: Optional[T] = None,
    ):
        self._contract = contract
        self._operation = operation
        self._unit: Optional[T] = None
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)

        if unit is not None:
            self.set_active(unit)

    @property
    def contract(self) -> Optional[Type[T]]:
        return self._contract

    @property
    def operation(self) -> Optional[str]:
        return self._operation

    @property
    def active(self) -> Optional[T]:
        """The currently active unit, or None."""
        return self._unit

    @property
    def is_bound(self) -> bool:
        return self._unit is not None

    def set_active(self, unit: T) -> None:
        """
        Replace the active unit.

        Raises:
            TypeError: If a contract is declared and unit does not conform to it
        """
        if self._contract is not None and not isinstance(unit, self._contract):
            raise TypeError(
                f"{type(unit).__name__} does not implement {self._contract.__name__}"
            )
        with self._lock:
            self._unit = unit
        self.logger.debug(
            "Active unit replaced",
            holder=type(self).__name__,
            unit=type(unit).__name__,
        )

    def clear(self) -> None:
        """Unbind the active unit."""
        with self._lock:
            self._unit = None

    def invoke(self, *args: Any, **kwargs: Any) -> Any:
        """
        Delegate to the active unit and return its result.

        Raises:
            UnboundDelegateError: If no unit has been set
        """
        return self._dispatch(self._bound_unit(), *args, **kwargs)

    def _bound_unit(self) -> T:
        # Single read; callers dispatch to exactly the unit they were given
        unit = self._unit
        if unit is None:
            self.logger.warning(
                "Invoke on unbound holder",
                holder=type(self).__name__,
                operation=self._operation,
            )
            raise UnboundDelegateError(type(self).__name__, self._operation)
        return unit

    def _dispatch(self, unit: T, *args: Any, **kwargs: Any) -> Any:
        if self._operation is None:
            return unit(*args, **kwargs)
        return getattr(unit, self._operation)(*args, **kwargs)

    def __repr__(self) -> str:
        active = type(self._unit).__name__ if self._unit is not None else None
        return f"{type(self).__name__}(active={active})"
