"""Filesystem path helpers.

``parent``, ``file_name`` and ``extension`` first canonicalize the input when
it exists on disk, so ``file_name(".")`` gives the name of the current
directory. Inputs that do not exist are decomposed lexically, as written.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)


def expand(value: str) -> str:
    """Canonicalize ``value`` when it exists, otherwise return it unchanged."""
    if not value:
        return value
    path = Path(value)
    try:
        if path.exists():
            return str(path.resolve(strict=True))
    except (OSError, ValueError, RuntimeError) as exc:
        # over-long names, NUL bytes, permission errors: use the literal input
        logger.debug("helper: cannot inspect path %r: %r", value, exc)
    return value


def _strip_trailing_sep(value: str) -> str:
    seps = os.sep + (os.altsep or "")
    stripped = value.rstrip(seps)
    # a trailing "." component names the same directory: "bar/foo/." is "bar/foo"
    while len(stripped) > 1 and stripped[-1] == os.curdir and stripped[-2] in seps:
        stripped = stripped[:-2].rstrip(seps)
    # keep a bare root as is
    return stripped or value[:1]


# os.path is used rather than pathlib: PurePath drops a leading "./" and the
# parent of "./foo" must stay ".".
def parent(value: str) -> str:
    """Parent directory of the path, "" when there is none."""
    path = _strip_trailing_sep(expand(value))
    if not path or path in (os.sep, os.altsep):
        return ""
    _, rest = os.path.splitdrive(path)
    if rest in (os.sep, os.altsep, ""):
        return ""
    return os.path.dirname(path)


def file_name(value: str) -> str:
    """Final component of the path, "" when there is none."""
    name = os.path.basename(_strip_trailing_sep(expand(value)))
    if name == os.pardir:
        return ""
    return name


def extension(value: str) -> str:
    """Extension without the leading dot, "" when there is none."""
    name = file_name(value)
    if name in ("", os.curdir):
        return ""
    return os.path.splitext(name)[1][1:]


def canonicalize(value: str, log: Optional[logging.Logger] = None) -> str:
    """Absolute, symlink-free form of an existing path, "" otherwise."""
    try:
        return str(Path(value).resolve(strict=True))
    except (OSError, ValueError, RuntimeError) as exc:
        (log or logger).debug("helper: canonicalize failed for path %r with error %r", value, exc)
        return ""


def path_helpers(log: Optional[logging.Logger] = None) -> Dict[str, Callable[[str], str]]:
    def _canonicalize(value: str) -> str:
        return canonicalize(str(value), log=log)

    return {
        "parent": lambda value: parent(str(value)),
        "file_name": lambda value: file_name(str(value)),
        "extension": lambda value: extension(str(value)),
        "canonicalize": _canonicalize,
    }
