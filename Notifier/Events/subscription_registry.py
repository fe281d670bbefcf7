"""
Ordered, thread-safe registry of active observers.
Mutations replace an immutable tuple under a lock (copy-on-write), so
snapshot() is a single reference read and never waits on other readers.
"""
import itertools
import logging
from threading import Lock
from typing import Any, Optional, Tuple

from Notifier.Interface.IObserver import Observer, is_observer
from Notifier.Model.Subscription import DispatchSnapshot, Subscription, SubscriptionHandle

logger = logging.getLogger(__name__)

_ALL = object()


class SubscriptionRegistry:
    def __init__(self):
        self._entries: Tuple[Subscription, ...] = ()
        self._lock = Lock()
        # handles are never reused, even after clear()
        self._ids = itertools.count(1)

    def subscribe(self, observer: Observer, event_name: Optional[str] = None) -> SubscriptionHandle:
        if observer is None:
            raise ValueError("observer is required")
        if not is_observer(observer):
            raise ValueError(f"observer must be callable or implement IObserver, got {type(observer).__name__}")
        with self._lock:
            handle = SubscriptionHandle(next(self._ids))
            self._entries = self._entries + (Subscription(handle, observer, event_name),)
        logger.debug("Subscribed %r (event=%s)", handle, event_name or "*")
        return handle

    def unsubscribe(self, handle: Any) -> None:
        with self._lock:
            remaining = tuple(s for s in self._entries if s.handle is not handle)
            if len(remaining) == len(self._entries):
                logger.debug("Unsubscribe ignored, unknown handle %r", handle)
                return
            self._entries = remaining
        logger.debug("Unsubscribed %r", handle)

    def snapshot(self, notification: Any = _ALL) -> DispatchSnapshot:
        entries = self._entries
        if notification is not _ALL:
            entries = tuple(s for s in entries if s.matches(notification))
        return DispatchSnapshot(entries)

    def clear(self) -> None:
        with self._lock:
            self._entries = ()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, handle: Any) -> bool:
        return any(s.handle is handle for s in self._entries)
