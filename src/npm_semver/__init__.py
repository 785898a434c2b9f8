"""npm-semver core package.

Semantic version parsing and npm-style range matching. The value types live
in ``npm_semver.models``; string-level helpers in ``npm_semver.parsers.semver``.
"""

from .errors import InvalidRange, InvalidVersion, SemverError, UnrenderableRange
from .models import Range, RangeSet, Version

__all__ = [
    "InvalidRange",
    "InvalidVersion",
    "Range",
    "RangeSet",
    "SemverError",
    "UnrenderableRange",
    "Version",
]
