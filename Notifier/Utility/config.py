"""Dispatcher settings read from the environment and an optional .env file."""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from Notifier.Utility.env import read_env_file

TIMEOUT_VAR = "NOTIFIER_OBSERVER_TIMEOUT"


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{TIMEOUT_VAR} must be a number of seconds, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{TIMEOUT_VAR} must be greater than 0")
    return value


@dataclass(frozen=True)
class DispatcherSettings:
    observer_timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DispatcherSettings":
        environ = os.environ if environ is None else environ
        return cls(observer_timeout=_parse_timeout(environ.get(TIMEOUT_VAR)))


def load_settings(env_file: Optional[str] = ".env") -> DispatcherSettings:
    """Settings from `env_file` overlaid by the process environment, which wins."""
    environ = dict(read_env_file(env_file)) if env_file else {}
    environ.update(os.environ)
    return DispatcherSettings.from_env(environ)
