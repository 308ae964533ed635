"""tmplkit: Jinja helpers and variable definitions for project templates."""

__version__ = "0.1.0"

from .engine import (
    helper_names,
    new_engine,
    register_env_helpers,
    register_helper,
    register_http_helpers,
    register_path_helpers,
    register_string_helpers,
    render_template,
    setup_engine,
)
from .errors import HelperRegistrationError, ManifestError, TmplkitError
from .variables import VariableDef

__all__ = [
    "helper_names",
    "new_engine",
    "register_env_helpers",
    "register_helper",
    "register_http_helpers",
    "register_path_helpers",
    "register_string_helpers",
    "render_template",
    "setup_engine",
    "HelperRegistrationError",
    "ManifestError",
    "TmplkitError",
    "VariableDef",
]
