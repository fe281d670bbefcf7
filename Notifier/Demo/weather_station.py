"""
Small demo subjects built on the Dispatcher: a weather station broadcasting
readings to displays, and a notification service fanning a message out to
email / SMS channels. Observers only record what they were sent.
"""
import logging
from typing import Any, Dict, List, Optional

from Notifier.Events.dispatcher import Dispatcher
from Notifier.Interface.IObserver import IObserver
from Notifier.Model.DeliveryReport import DeliveryReport
from Notifier.Model.Notification import Notification

logger = logging.getLogger(__name__)

WEATHER_CHANGED = "weather_changed"
MESSAGE_SENT = "message"


class RecordingObserver(IObserver):
    channel = "observer"

    def __init__(self, name: Optional[str] = None, fail: bool = False):
        self.name = name or self.channel
        self.fail = fail
        self.received: List[Any] = []

    def update(self, notification: Any) -> bool:
        if self.fail:
            raise RuntimeError(f"{self.name} is unavailable")
        self.received.append(notification)
        # plain payloads (e.g. "Sunny") have no event/data, log them as-is
        event = getattr(notification, "event", None)
        data = getattr(notification, "data", notification)
        logger.info("[%s] %s: %s", self.name, event or "-", data)
        return True


class EmailObserver(RecordingObserver):
    channel = "email"


class SmsObserver(RecordingObserver):
    channel = "sms"


class PhoneDisplay(RecordingObserver):
    channel = "phone"


class TVDisplay(RecordingObserver):
    channel = "tv"


class WebDashboard(RecordingObserver):
    channel = "web"


DISPLAYS = {cls.channel: cls for cls in (PhoneDisplay, TVDisplay, WebDashboard)}


class WeatherStation:
    def __init__(self, dispatcher: Optional[Dispatcher] = None):
        self.dispatcher = dispatcher or Dispatcher()
        self.condition: Optional[str] = None
        self.temperature: Optional[float] = None

    def attach(self, observer: IObserver):
        return self.dispatcher.subscribe(observer, WEATHER_CHANGED)

    def detach(self, handle) -> None:
        self.dispatcher.unsubscribe(handle)

    def set_weather(self, condition: str, temperature: Optional[float] = None,
                    timeout: Optional[float] = None) -> DeliveryReport:
        if not condition:
            raise ValueError("condition is required")
        self.condition = condition
        self.temperature = temperature
        data: Dict[str, Any] = {"condition": condition, "temperature": temperature}
        return self.dispatcher.publish(Notification(WEATHER_CHANGED, data), timeout=timeout)


class NotificationService:
    def __init__(self, dispatcher: Optional[Dispatcher] = None):
        self.dispatcher = dispatcher or Dispatcher()

    def add_channel(self, observer: IObserver):
        return self.dispatcher.subscribe(observer, MESSAGE_SENT)

    def remove_channel(self, handle) -> None:
        self.dispatcher.unsubscribe(handle)

    def send(self, text: str, **extra: Any) -> DeliveryReport:
        return self.dispatcher.publish(Notification(MESSAGE_SENT, {"text": text, **extra}))
