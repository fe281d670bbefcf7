from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from Notifier.Exception.ObserverError import ObserverFailure, ObserverTimeout
from Notifier.Model.Subscription import SubscriptionHandle


"""Failure recorded against one handle during a publish call."""
@dataclass(frozen=True)
class DeliveryFailure:
    handle: SubscriptionHandle
    reason: ObserverFailure

    def __iter__(self):
        yield self.handle
        yield self.reason


"""Outcome of a single publish call."""
@dataclass(frozen=True)
class DeliveryReport:
    attempted: int = 0
    succeeded: int = 0
    failures: Tuple[DeliveryFailure, ...] = ()

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures

    def failed_handles(self) -> List[SubscriptionHandle]:
        return [f.handle for f in self.failures]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "attempted": self.attempted,
            "succeeded": self.succeeded,
            "failures": [
                {
                    "handle": f.handle.id,
                    "reason": f.reason.message,
                    "timeout": isinstance(f.reason, ObserverTimeout),
                }
                for f in self.failures
            ],
        }
