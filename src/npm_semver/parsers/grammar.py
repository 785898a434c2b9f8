"""Compiled grammars for versions and range operands.

Every pattern here is meant to be used with ``fullmatch``. Patterns are
ASCII-only so that ``\\d`` never matches non-ASCII digits.
"""

from __future__ import annotations

import re

_NUMERIC = r"0|[1-9]\d*"
_PRE_IDENTIFIER = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_PRE_RELEASE = rf"{_PRE_IDENTIFIER}(?:\.{_PRE_IDENTIFIER})*"
_BUILD = r"[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*"
_WILDCARD = r"[xX*]"

VERSION_PATTERN = re.compile(
    rf"(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{_PRE_RELEASE}))?"
    rf"(?:\+(?P<buildmetadata>{_BUILD}))?",
    re.ASCII,
)

PRE_RELEASE_PATTERN = re.compile(_PRE_RELEASE, re.ASCII)
BUILD_METADATA_PATTERN = re.compile(_BUILD, re.ASCII)

# 1, 1.2, 1.2.3, 1.2.3-pre+build; suffixes only attach to a full triple.
_PARTIAL = (
    rf"(?P<major>{_NUMERIC})"
    rf"(?:\.(?P<minor>{_NUMERIC})"
    rf"(?:\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{_PRE_RELEASE}))?"
    rf"(?:\+(?P<buildmetadata>{_BUILD}))?"
    r")?)?"
)
PARTIAL_PATTERN = re.compile(_PARTIAL, re.ASCII)

# 1.x, 1.x.x, 1.2.x with an optional suffix on the explicit prefix.
X_PATTERN = re.compile(
    rf"(?P<major>{_NUMERIC})\."
    rf"(?:(?P<minor_x>{_WILDCARD})(?:\.(?P<patch_x>{_WILDCARD}))?"
    rf"|(?P<minor>{_NUMERIC})\.(?P<patch>{_WILDCARD}))"
    rf"(?:-(?P<prerelease>{_PRE_RELEASE}))?"
    rf"(?:\+(?P<buildmetadata>{_BUILD}))?",
    re.ASCII,
)


def _numbered(pattern: str, suffix: str) -> str:
    """Rename every named group in ``pattern`` by appending ``suffix``."""
    return re.sub(r"\(\?P<(\w+)>", rf"(?P<\g<1>{suffix}>", pattern)


HYPHEN_PATTERN = re.compile(
    rf"{_numbered(_PARTIAL, '1')} - {_numbered(_PARTIAL, '2')}",
    re.ASCII,
)
