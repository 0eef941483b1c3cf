"""
Domain-specific exceptions for entrypoint asset resolution.

Request handlers catch these to turn a broken build or a bad entrypoint name
into a failure response.  All exceptions inherit from ``EntrypointAssetsError``
so callers can also use a single broad catch when needed.
"""

from __future__ import annotations


class EntrypointAssetsError(Exception):
    """Base exception for all asset resolution errors."""


class ManifestLoadError(EntrypointAssetsError):
    """Raised when the consolidated manifest holds no builds."""


class EntrypointLookupError(EntrypointAssetsError, LookupError):
    """Raised when the resolved manifest has no entrypoint with the requested name.

    Attributes
    ----------
    name:
        The entrypoint that was requested.
    available:
        Entrypoint names present in the manifest, in manifest order.
    """

    def __init__(self, message: str, name: str, available: list[str] | None = None) -> None:
        super().__init__(message)
        self.name = name
        self.available: list[str] = available or []


class ManifestSchemaError(EntrypointAssetsError):
    """Raised when a manifest document fails JSON-Schema validation."""


class ConfigurationError(EntrypointAssetsError):
    """Raised when a configuration file is unreadable or malformed."""
