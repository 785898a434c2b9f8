"""String-level helpers built atop the version and range models.

Supported expressions are everything ``RangeSet.parse`` accepts, e.g.:
- exact versions ("1.2.3", "=1.2.3")
- caret ranges ^x.y.z → >=x.y.z,<x+1.0.0-0
- tilde ranges ~x.y.z → >=x.y.z,<x.y+1.0-0
- wildcard and hyphen ranges ("1.2.x", "1.2.3 - 2.0.0")
- unions joined with "||"
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import InvalidVersion
from ..models import RangeSet, Version

logger = logging.getLogger(__name__)


def _parse_version(v: str | Version) -> Version:
    return v if isinstance(v, Version) else Version.parse(v)


def _parse_range(expr: str | RangeSet, include_prereleases: bool) -> RangeSet:
    if isinstance(expr, RangeSet):
        return expr.with_prereleases(include_prereleases) if include_prereleases else expr
    return RangeSet.parse(expr.strip(), include_prereleases)


def satisfies(
    installed: str | Version,
    expr: str | RangeSet,
    include_prereleases: bool = False,
) -> bool:
    """Return True if ``installed`` is matched by the range expression ``expr``."""
    return _parse_range(expr, include_prereleases).includes(_parse_version(installed))


def _candidates(versions: Iterable[str | Version], ranges: RangeSet) -> list[Version]:
    matched: list[Version] = []
    for raw in versions:
        try:
            version = _parse_version(raw)
        except InvalidVersion:
            logger.debug("Skipping unparseable candidate %r", raw)
            continue
        if ranges.includes(version):
            matched.append(version)
    return matched


def max_satisfying(
    versions: Iterable[str | Version],
    expr: str | RangeSet,
    include_prereleases: bool = False,
) -> str | None:
    """Return the highest candidate matched by ``expr``, or None."""
    matched = _candidates(versions, _parse_range(expr, include_prereleases))
    return str(max(matched)) if matched else None


def min_satisfying(
    versions: Iterable[str | Version],
    expr: str | RangeSet,
    include_prereleases: bool = False,
) -> str | None:
    """Return the lowest candidate matched by ``expr``, or None."""
    matched = _candidates(versions, _parse_range(expr, include_prereleases))
    return str(min(matched)) if matched else None


def sort_versions(versions: Iterable[str | Version], reverse: bool = False) -> list[Version]:
    """Parse and sort ``versions`` by semver precedence; invalid input raises."""
    return sorted((_parse_version(v) for v in versions), reverse=reverse)
