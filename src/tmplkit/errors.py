"""Exceptions raised by tmplkit."""


class TmplkitError(Exception):
    """Base class for errors surfaced to callers of tmplkit."""


class HelperRegistrationError(TmplkitError):
    """Raise when a helper cannot be registered on a template environment"""


class ManifestError(TmplkitError, ValueError):
    """Raise when a template manifest cannot be read or fails validation"""
