from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, set):
        return frozenset(_freeze(v) for v in value)
    return value


"""Immutable event payload delivered to every observer of one publish call."""
@dataclass(frozen=True)
class Notification:
    event: str
    data: Any = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not self.event:
            raise ValueError("Notification event is required")
        # frozen dataclass: bypass __setattr__ to store the read-only copy
        object.__setattr__(self, "data", _freeze(self.data))
