"""Jinja environment construction and helper registration.

Helpers are exposed both as globals and as filters, so these are equivalent::

    {{ to_upper_case(to_singular(name)) }}
    {{ name | to_singular | to_upper_case }}

The environment uses ``StrictUndefined``: referencing a variable that is not
in the render context raises instead of rendering an empty string.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

import jinja2

from .config.settings import HelperSettings
from .errors import HelperRegistrationError
from .helpers import STRING_HELPERS, env_helpers, http_helpers, path_helpers

logger = logging.getLogger(__name__)

Helper = Callable[..., Any]

STRING_GROUP = "string"
HTTP_GROUP = "http"
PATH_GROUP = "path"
ENV_GROUP = "env"

# name -> group of every helper registered through tmplkit, kept on the env
_REGISTRY_ATTR = "tmplkit_helpers"


def _registry(env: jinja2.Environment) -> Dict[str, Optional[str]]:
    registry = getattr(env, _REGISTRY_ATTR, None)
    if registry is None:
        registry = {}
        setattr(env, _REGISTRY_ATTR, registry)
    return registry


def register_helper(
    env: jinja2.Environment, name: str, func: Helper, group: Optional[str] = None
) -> None:
    """Install ``func`` as global and filter ``name``.

    Registering the same helper again is a no-op. Any other name clash raises
    HelperRegistrationError.
    """
    registry = _registry(env)
    if name in env.globals or name in env.filters:
        same_func = env.globals.get(name) is func and env.filters.get(name) is func
        same_group = group is not None and registry.get(name) == group
        if not (same_func or same_group):
            raise HelperRegistrationError(f"helper {name!r} is already registered")
    env.globals[name] = func
    env.filters[name] = func
    registry[name] = group


def _register_all(
    env: jinja2.Environment, helpers: Mapping[str, Helper], group: str
) -> None:
    for name, func in helpers.items():
        register_helper(env, name, func, group=group)
    logger.debug("registered %d %s helpers", len(helpers), group)


def _text_helper(func: Callable[[str], str]) -> Helper:
    # str() on a StrictUndefined argument raises UndefinedError
    @functools.wraps(func)
    def helper(value: Any) -> str:
        return func(str(value))

    return helper


def register_string_helpers(
    env: jinja2.Environment,
    log: Optional[logging.Logger] = None,
    settings: Optional[HelperSettings] = None,
) -> None:
    helpers = {name: _text_helper(func) for name, func in STRING_HELPERS.items()}
    _register_all(env, helpers, STRING_GROUP)


def register_http_helpers(
    env: jinja2.Environment,
    log: Optional[logging.Logger] = None,
    settings: Optional[HelperSettings] = None,
) -> None:
    _register_all(env, http_helpers(log, settings), HTTP_GROUP)


def register_path_helpers(
    env: jinja2.Environment,
    log: Optional[logging.Logger] = None,
    settings: Optional[HelperSettings] = None,
) -> None:
    _register_all(env, path_helpers(log), PATH_GROUP)


def register_env_helpers(
    env: jinja2.Environment,
    log: Optional[logging.Logger] = None,
    settings: Optional[HelperSettings] = None,
) -> None:
    _register_all(env, env_helpers(log), ENV_GROUP)


REGISTRATIONS = (
    register_string_helpers,
    register_http_helpers,
    register_path_helpers,
    register_env_helpers,
)


def setup_engine(
    env: jinja2.Environment,
    log: Optional[logging.Logger] = None,
    settings: Optional[HelperSettings] = None,
) -> jinja2.Environment:
    """Enable strict mode on ``env`` and register every helper group.

    All groups are attempted, whatever a group raises; the first failure is
    raised afterwards. Groups registered before the failure stay registered.
    """
    env.undefined = jinja2.StrictUndefined

    errors: List[Exception] = []
    for register in REGISTRATIONS:
        try:
            register(env, log, settings)
        except Exception as exc:
            logger.error("%s failed: %s", register.__name__, exc)
            errors.append(exc)
    if errors:
        raise errors[0]
    return env


def new_engine(
    log: Optional[logging.Logger] = None, settings: Optional[HelperSettings] = None
) -> jinja2.Environment:
    """Create a strict Jinja environment with every helper registered."""
    env = jinja2.Environment(
        undefined=jinja2.StrictUndefined,
        autoescape=False,  # templates produce source files, not HTML
        keep_trailing_newline=True,
    )
    return setup_engine(env, log=log, settings=settings)


def render_template(
    env: jinja2.Environment, source: str, variables: Optional[Mapping[str, Any]] = None
) -> str:
    """Compile ``source`` with ``env`` and render it with ``variables``.

    Raises:
        jinja2.UndefinedError: If the template references an unset variable
        jinja2.TemplateSyntaxError: If the template cannot be compiled
    """
    return env.from_string(source).render(**dict(variables or {}))


def helper_names(env: jinja2.Environment) -> Dict[str, List[str]]:
    """Names of the helpers registered on ``env``, grouped by category."""
    grouped: Dict[str, List[str]] = {}
    for name, group in _registry(env).items():
        grouped.setdefault(group or "custom", []).append(name)
    return grouped
