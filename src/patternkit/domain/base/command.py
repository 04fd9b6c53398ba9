"""Command port and invoker."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

from .holder import Holder


class Command(ABC):
    """Port for an encapsulated request bound to its receiver."""

    @abstractmethod
    def execute(self) -> Any:
        """Perform the request."""


class Invoker(Holder[Command]):
    """
    Triggers the currently set command.

    The invoker knows nothing about receivers; it only calls execute() on
    whichever command is active and keeps an ordered history of executions.
    """

    def __init__(self, command: Optional[Command] = None):
        self._history: List[Command] = []
        super().__init__(contract=Command, operation="execute", unit=command)

    def set_command(self, command: Command) -> None:
        self.set_active(command)

    def invoke(self, *args: Any, **kwargs: Any) -> Any:
        command = self._bound_unit()
        result = self._dispatch(command, *args, **kwargs)
        with self._lock:
            self._history.append(command)
        self.logger.info("Command executed", command=type(command).__name__)
        return result

    @property
    def history(self) -> Tuple[Command, ...]:
        """Commands executed so far, oldest first."""
        with self._lock:
            return tuple(self._history)

    def clear_history(self) -> None:
        with self._lock:
            self._history.clear()
