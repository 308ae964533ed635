"""Environment variable helpers."""

from __future__ import annotations

import logging
import os
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)


def env_var(key: str, log: Optional[logging.Logger] = None) -> str:
    """Return the value of environment variable ``key``, or "" when unset."""
    try:
        return os.environ[key]
    except KeyError as exc:
        (log or logger).warning("helper: env_var failed for key %r with error %r", key, exc)
        return ""


def env_helpers(log: Optional[logging.Logger] = None) -> Dict[str, Callable[[str], str]]:
    def _env_var(key: str) -> str:
        return env_var(str(key), log=log)

    return {"env_var": _env_var}
