"""
Observer / Dispatcher implementation.
publish() delivers a notification to a snapshot of the registry taken when the
call starts, in registration order. Observers added during delivery wait for
the next publish; observers removed during delivery still receive the
in-flight notification. A failing observer never stops delivery to the rest:
its error is recorded in the returned DeliveryReport instead of being raised.
"""
import logging
from concurrent.futures import Future, TimeoutError as FutureTimeoutError
from threading import Event, Thread
from typing import Any, List, Optional

from Notifier.Events.subscription_registry import SubscriptionRegistry
from Notifier.Exception.ObserverError import ObserverFailure, ObserverTimeout
from Notifier.Interface.IObserver import Observer, notify
from Notifier.Model.DeliveryReport import DeliveryFailure, DeliveryReport
from Notifier.Model.Subscription import Subscription, SubscriptionHandle
from Notifier.Utility.config import DispatcherSettings

logger = logging.getLogger(__name__)


def _validate_timeout(timeout: Optional[float]) -> Optional[float]:
    if timeout is not None and timeout <= 0:
        raise ValueError("timeout must be greater than 0")
    return timeout


def _run_observer(future: Future, started: Event, observer: Observer, notification: Any) -> None:
    future.set_running_or_notify_cancel()
    started.set()
    try:
        result = notify(observer, notification)
    except BaseException as e:
        future.set_exception(e)
    else:
        future.set_result(result)


class Dispatcher:
    def __init__(self, registry: Optional[SubscriptionRegistry] = None, timeout: Optional[float] = None):
        self.registry = registry if registry is not None else SubscriptionRegistry()
        self.timeout = _validate_timeout(timeout)

    @classmethod
    def from_settings(cls, settings: DispatcherSettings, registry: Optional[SubscriptionRegistry] = None) -> "Dispatcher":
        return cls(registry=registry, timeout=settings.observer_timeout)

    def subscribe(self, observer: Observer, event_name: Optional[str] = None) -> SubscriptionHandle:
        return self.registry.subscribe(observer, event_name)

    def unsubscribe(self, handle: Any) -> None:
        self.registry.unsubscribe(handle)

    def publish(self, notification: Any, timeout: Optional[float] = None) -> DeliveryReport:
        timeout = _validate_timeout(timeout) if timeout is not None else self.timeout
        snapshot = self.registry.snapshot(notification)

        succeeded = 0
        failures: List[DeliveryFailure] = []
        for subscription in snapshot:
            failure = self._deliver(subscription, notification, timeout)
            if failure is None:
                succeeded += 1
            else:
                failures.append(DeliveryFailure(subscription.handle, failure))

        report = DeliveryReport(attempted=len(snapshot), succeeded=succeeded, failures=tuple(failures))
        logger.debug("Published %r: attempted=%d succeeded=%d failed=%d",
                     notification, report.attempted, report.succeeded, report.failed)
        return report

    def _deliver(self, subscription: Subscription, notification: Any,
                 timeout: Optional[float]) -> Optional[ObserverFailure]:
        handle = subscription.handle
        try:
            if timeout is None:
                result = notify(subscription.observer, notification)
            else:
                result = self._deliver_with_timeout(subscription, notification, timeout)
        except ObserverFailure as e:
            if e.handle is not handle:
                e = ObserverFailure(handle, f"{type(e).__name__}: {e}", cause=e)
            logger.debug("Observer %r failed: %s", handle, e.message)
            return e
        except Exception as e:
            logger.debug("Observer %r failed", handle, exc_info=True)
            return ObserverFailure(handle, f"{type(e).__name__}: {e}", cause=e)
        if result is False:
            logger.debug("Observer %r reported failure", handle)
            return ObserverFailure(handle, "Observer reported failure")
        return None

    def _deliver_with_timeout(self, subscription: Subscription, notification: Any, timeout: float) -> Any:
        # one daemon thread per delivery: an observer that never returns only loses its own thread
        future: Future = Future()
        started = Event()
        worker = Thread(target=_run_observer, args=(future, started, subscription.observer, notification),
                        name=f"notifier-observer-{subscription.handle.id}", daemon=True)
        worker.start()
        # the deadline counts from the moment the observer is invoked
        started.wait()
        try:
            return future.result(timeout=timeout)
        except FutureTimeoutError:
            if not future.done():
                raise ObserverTimeout(subscription.handle, timeout)
        # finished right at the deadline, or the observer raised TimeoutError itself
        return future.result()
