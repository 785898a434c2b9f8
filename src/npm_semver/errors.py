"""Exception hierarchy shared by the version, range and adapter layers."""

from __future__ import annotations


class SemverError(ValueError):
    """Base error for everything raised by npm-semver."""


class InvalidVersion(SemverError):
    """Raised when a string does not match the semantic version grammar."""


class InvalidRange(SemverError):
    """Raised when a string matches none of the recognised range forms."""


class UnrenderableRange(SemverError):
    """Raised when explicit range bounds have no canonical textual form."""
