"""Environment-driven settings for the helper stack.

All values come from ``TMPLKIT_*`` environment variables. The memoized
:func:`get_settings` lets callers treat the settings like a constant; tests
reset it with ``get_settings.cache_clear()``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

GITIGNORE_API_URL = "https://www.gitignore.io/api"

ENV_GITIGNORE_API_URL = "TMPLKIT_GITIGNORE_API_URL"
ENV_HTTP_TIMEOUT = "TMPLKIT_HTTP_TIMEOUT"
ENV_LOG_LEVEL = "TMPLKIT_LOG_LEVEL"


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"{ENV_HTTP_TIMEOUT} must be a number, got {raw!r}") from None
    if timeout <= 0:
        raise ValueError(f"{ENV_HTTP_TIMEOUT} must be positive, got {raw!r}")
    return timeout


@dataclass(frozen=True)
class HelperSettings:
    gitignore_api_url: str = GITIGNORE_API_URL
    # None keeps the requests default (no timeout)
    http_timeout: Optional[float] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HelperSettings":
        env = os.environ if environ is None else environ
        return cls(
            gitignore_api_url=(env.get(ENV_GITIGNORE_API_URL) or GITIGNORE_API_URL).rstrip("/"),
            http_timeout=_parse_timeout(env.get(ENV_HTTP_TIMEOUT)),
            log_level=(env.get(ENV_LOG_LEVEL) or "WARNING").upper(),
        )

    def gitignore_url(self, name: str) -> str:
        """Return the gitignore.io API URL for a comma separated list of names."""
        return f"{self.gitignore_api_url}/{name}"


@lru_cache(maxsize=1)
def get_settings() -> HelperSettings:
    """Return settings read from the process environment (memoized)."""
    return HelperSettings.from_env()
