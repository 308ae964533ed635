"""HTTP fetch helpers.

Failures never reach the template: they are logged and replaced with an
empty string so a single unreachable URL degrades one value instead of
aborting the whole render.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

import requests

from ..config.settings import HelperSettings, get_settings

logger = logging.getLogger(__name__)


def http_get(
    url: str, log: Optional[logging.Logger] = None, timeout: Optional[float] = None
) -> str:
    """GET ``url`` and return the body as text, or "" on any failure."""
    log = log or logger
    # ValueError covers non-UTF-8 bodies and urllib3 LocationParseError on bad URLs
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
        return resp.content.decode("utf-8")
    except (requests.RequestException, ValueError) as exc:
        log.warning("helper: http_get failed for url %r with error %r", url, exc)
        return ""


def gitignore_io(
    name: str,
    log: Optional[logging.Logger] = None,
    settings: Optional[HelperSettings] = None,
) -> str:
    """Fetch the gitignore.io template(s) for ``name`` (e.g. ``python,node``)."""
    settings = settings or get_settings()
    return http_get(settings.gitignore_url(name), log=log, timeout=settings.http_timeout)


def http_helpers(
    log: Optional[logging.Logger] = None, settings: Optional[HelperSettings] = None
) -> Dict[str, Callable[[str], str]]:
    """Build the template-facing HTTP helpers bound to a logger and settings."""
    settings = settings or get_settings()

    def _http_get(url: str) -> str:
        return http_get(str(url), log=log, timeout=settings.http_timeout)

    def _gitignore_io(name: str) -> str:
        return gitignore_io(str(name), log=log, settings=settings)

    return {"http_get": _http_get, "gitignore_io": _gitignore_io}
