"""Errors recorded against individual observers during a publish call."""
from typing import Any, Optional


class ObserverFailure(Exception):
    """Raised (and caught) when an observer fails to handle a notification.
    Attributes:
        handle: subscription handle of the failing observer
        message: human readable reason
        cause: original exception, None when the observer returned False
    """
    def __init__(self, handle: Any, message: str, cause: Optional[BaseException] = None):
        self.handle = handle
        self.message = message
        self.cause = cause
        super().__init__(self.message)


"""Raised when an observer exceeds the configured processing deadline."""
class ObserverTimeout(ObserverFailure):
    def __init__(self, handle: Any, timeout: float, message: Optional[str] = None):
        super().__init__(handle, message or f"Observer did not finish within {timeout}s")
        self.timeout = timeout
