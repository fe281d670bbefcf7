"""Environment helpers (env loading)"""
import os
import logging
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

_QUOTES = ('"', "'")


def _parse_assignment(line: str) -> Optional[Tuple[str, str]]:
    name, sep, value = line.partition("=")
    name = name.strip()
    if name.startswith("export "):
        name = name[len("export "):].strip()
    if not sep or not name:
        return None
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        value = value[1:-1]
    return name, value


def read_env_file(filepath: str = ".env") -> Dict[str, str]:
    """Return the KEY=VALUE assignments of `filepath` without touching os.environ.
    A missing file yields an empty mapping; malformed lines are skipped."""
    values: Dict[str, str] = {}
    if not os.path.exists(filepath):
        logger.debug(".env file not found: %s", filepath)
        return values
    with open(filepath, "r", encoding="utf-8") as f:
        for lineno, raw in enumerate(f, 1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            assignment = _parse_assignment(line)
            if assignment is None:
                logger.debug("Skipping malformed line %d in %s", lineno, filepath)
                continue
            values[assignment[0]] = assignment[1]
    return values
