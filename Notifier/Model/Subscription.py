from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple

from Notifier.Interface.IObserver import Observer


"""Opaque token identifying one registration. Compared by identity only."""
@dataclass(frozen=True, eq=False)
class SubscriptionHandle:
    id: int

    def __repr__(self) -> str:
        return f"SubscriptionHandle(#{self.id})"


"""One active registration held by the registry."""
@dataclass(frozen=True, eq=False)
class Subscription:
    handle: SubscriptionHandle
    observer: Observer
    event_name: Optional[str] = None

    def matches(self, notification: Any) -> bool:
        if self.event_name is None:
            return True
        return getattr(notification, "event", None) == self.event_name

    def __iter__(self) -> Iterator[Any]:
        # unpacks as (handle, observer)
        yield self.handle
        yield self.observer


class DispatchSnapshot:
    """Ordered, immutable copy of the registry taken at the start of a publish."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Tuple[Subscription, ...] = ()):
        self._entries = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Subscription]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> Subscription:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"DispatchSnapshot({[s.handle for s in self._entries]!r})"

    def handles(self) -> List[SubscriptionHandle]:
        return [s.handle for s in self._entries]
