"""Configuration management for tmplkit."""

from .manifest import (
    MANIFEST_FILENAMES,
    TemplateManifest,
    default_context,
    find_manifest,
    load_manifest,
    parse_manifest,
)
from .settings import HelperSettings, get_settings

__all__ = [
    "MANIFEST_FILENAMES",
    "TemplateManifest",
    "default_context",
    "find_manifest",
    "load_manifest",
    "parse_manifest",
    "HelperSettings",
    "get_settings",
]
