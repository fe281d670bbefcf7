"""
Observer abstraction used by the notification core.
Any object implementing IObserver, or any plain callable taking a single
notification argument, can be subscribed. Returning False (or raising)
from the update reports a failure; any other return value is a success.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Union


class IObserver(ABC):
    """Abstract observer interface."""

    @abstractmethod
    def update(self, notification: Any) -> Any:
        """Handle a single notification."""
        pass


Observer = Union[IObserver, Callable[[Any], Any]]


def is_observer(candidate: Any) -> bool:
    return isinstance(candidate, IObserver) or callable(candidate)


def notify(observer: Observer, notification: Any) -> Any:
    if isinstance(observer, IObserver):
        return observer.update(notification)
    return observer(notification)
