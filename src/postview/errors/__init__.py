"""Exception hierarchy for postview.

Everything the application raises on purpose derives from
:class:`PostViewError`; request runners forward only these to failure
callbacks and let anything else propagate as a bug.
"""

from __future__ import annotations


class PostViewError(Exception):
    """Base class for all custom errors raised by postview."""


class InfrastructureError(PostViewError):
    """The backend or the network failed us."""


class FetchError(InfrastructureError):
    """Listing owners or posts failed (transport error, non-2xx, bad payload)."""


class DeleteError(InfrastructureError):
    """The remote delete of a post failed."""


class ApplicationError(PostViewError):
    """Unexpected failure inside a background request, wrapped for the UI thread."""


class SettingsError(PostViewError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""


__all__ = [
    "ApplicationError",
    "DeleteError",
    "FetchError",
    "InfrastructureError",
    "PostViewError",
    "SettingsError",
    "SettingsLoadError",
    "SettingsValidationError",
]
