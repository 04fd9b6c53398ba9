"""Subject / Subscriber fan-out."""

import threading
import types
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, List, Tuple, TypeVar, Union

from patternkit.infrastructure.logging.logger import get_logger

if TYPE_CHECKING:
    from patternkit.config.schemas import ObserverConfig

P = TypeVar("P")


class Subscriber(ABC, Generic[P]):
    """Port for anything that wants to be notified by a Subject."""

    @abstractmethod
    def update(self, payload: P) -> None:
        """Receive one notification."""


SubscriberLike = Union[Subscriber, Callable[[Any], Any]]


class Subject(Generic[P]):
    """
    Maintains an ordered set of subscribers and notifies them synchronously.

    - attach() is idempotent: a subscriber is delivered to at most once per notify.
    - detach() of a subscriber that is not attached is a no-op.
    - notify() delivers to a snapshot taken when it starts, so subscribers
      attached or detached during delivery only affect later notifications.

    Subscribers are matched by identity. They may be Subscriber instances or
    plain callables taking the payload; a bound method matches another bound
    method of the same function on the same object.

    Args:
        isolate_errors: When True a failing subscriber is logged and delivery
                        continues; otherwise the exception propagates and the
                        remaining subscribers are not notified.
    """

    def __init__(self, isolate_errors: bool = False):
        self._subscribers: List[SubscriberLike] = []
        self._lock = threading.Lock()
        self.isolate_errors = isolate_errors
        self.logger = get_logger(__name__)

    @classmethod
    def from_config(cls, config: "ObserverConfig", **kwargs: Any) -> "Subject":
        """Create a subject using the configured delivery policy."""
        return cls(isolate_errors=config.isolate_subscriber_errors, **kwargs)

    def attach(self, subscriber: SubscriberLike) -> None:
        with self._lock:
            if any(_same_subscriber(existing, subscriber) for existing in self._subscribers):
                return
            self._subscribers.append(subscriber)
        self.logger.debug("Subscriber attached", subscriber=_describe(subscriber))

    def detach(self, subscriber: SubscriberLike) -> None:
        with self._lock:
            for index, existing in enumerate(self._subscribers):
                if _same_subscriber(existing, subscriber):
                    del self._subscribers[index]
                    break
            else:
                return
        self.logger.debug("Subscriber detached", subscriber=_describe(subscriber))

    @property
    def subscribers(self) -> Tuple[SubscriberLike, ...]:
        with self._lock:
            return tuple(self._subscribers)

    def __len__(self) -> int:
        return len(self._subscribers)

    def __contains__(self, subscriber: object) -> bool:
        return any(_same_subscriber(existing, subscriber) for existing in self.subscribers)

    def notify(self, payload: P) -> None:
        """Deliver payload to every current subscriber, in attachment order."""
        snapshot = self.subscribers
        self.logger.debug(
            "Notifying subscribers",
            subject=type(self).__name__,
            subscriber_count=len(snapshot),
        )

        for subscriber in snapshot:
            try:
                _deliver(subscriber, payload)
            except Exception as e:
                if not self.isolate_errors:
                    raise
                self.logger.error(
                    "Subscriber failed",
                    subscriber=_describe(subscriber),
                    error=str(e),
                    exc_info=True,
                )


def _deliver(subscriber: SubscriberLike, payload: Any) -> None:
    if isinstance(subscriber, Subscriber):
        subscriber.update(payload)
    else:
        subscriber(payload)


def _same_subscriber(existing: SubscriberLike, candidate: SubscriberLike) -> bool:
    if existing is candidate:
        return True
    # Each attribute access creates a new bound method object
    if isinstance(existing, types.MethodType) and isinstance(candidate, types.MethodType):
        return existing.__self__ is candidate.__self__ and existing.__func__ is candidate.__func__
    return False


def _describe(subscriber: SubscriberLike) -> str:
    return getattr(subscriber, "__name__", None) or type(subscriber).__name__
