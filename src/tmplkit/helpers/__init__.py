"""Helper functions callable from templates."""

from .env import env_helpers, env_var
from .http import gitignore_io, http_get, http_helpers
from .paths import canonicalize, expand, extension, file_name, parent, path_helpers
from .strings import STRING_HELPERS, split_words

__all__ = [
    "STRING_HELPERS",
    "split_words",
    "http_get",
    "gitignore_io",
    "http_helpers",
    "expand",
    "parent",
    "file_name",
    "extension",
    "canonicalize",
    "path_helpers",
    "env_var",
    "env_helpers",
]
