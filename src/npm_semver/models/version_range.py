"""Single npm-style version range (no ``||`` and no comparator intersection).

A range is stored as a ``[min, max)`` interval in which either end may be
inactive (unbounded). Every textual form is reduced to that interval:

- ``*``, ``x``, ``X`` or an empty string: unbounded on both sides
- ``=V``, ``>=V``, ``>V``, ``<=V``, ``<V``: comparison against a partial version
- ``~V``: patch-level changes when minor is given, minor-level otherwise
- ``^V``: changes that keep the left-most non-zero component
- ``1.x``, ``1.2.x``: wildcard ranges
- ``1``, ``1.2``, ``1.2.3``: bare partial versions, matching exactly ``V``
- ``A - B``: inclusive hyphen ranges
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..errors import InvalidRange, InvalidVersion, UnrenderableRange
from ..parsers.grammar import (
    HYPHEN_PATTERN,
    PARTIAL_PATTERN,
    X_PATTERN,
)
from .version import Version

logger = logging.getLogger(__name__)

_Bounds = tuple[Version | None, bool, Version | None, bool]

_ANY = frozenset({"", "*", "x", "X"})


def _partial_version(match: re.Match[str], suffix: str = "") -> Version:
    """Zero-fill the components a partial match left out."""
    return Version(
        major=int(match[f"major{suffix}"]),
        minor=int(match[f"minor{suffix}"] or 0),
        patch=int(match[f"patch{suffix}"] or 0),
        pre_release=match[f"prerelease{suffix}"] or "",
        build_metadata=match[f"buildmetadata{suffix}"] or "",
    )


def _x_version(match: re.Match[str]) -> Version:
    # wildcard positions never populate "minor"; see X_PATTERN
    return Version(
        major=int(match["major"]),
        minor=int(match["minor"] or 0),
        patch=0,
        pre_release=match["prerelease"] or "",
        build_metadata=match["buildmetadata"] or "",
    )


_COMPARATORS: tuple[tuple[str, Callable[[Version], _Bounds]], ...] = (
    ("=", lambda v: (v, True, v.next(), True)),
    (">=", lambda v: (v, True, None, False)),
    (">", lambda v: (v.next(), True, None, False)),
    ("<=", lambda v: (None, False, v.next(), True)),
    ("<", lambda v: (None, False, v, True)),
)


def _parse_comparison(raw: str) -> _Bounds | None:
    for operator, build in _COMPARATORS:
        if not raw.startswith(operator):
            continue
        match = PARTIAL_PATTERN.fullmatch(raw[len(operator) :])
        if match is not None:
            return build(_partial_version(match))
    return None


def _parse_tilde(operand: str) -> _Bounds | None:
    match = PARTIAL_PATTERN.fullmatch(operand)
    if match is not None:
        minimum = _partial_version(match)
        minor_given = match["minor"] is not None
    else:
        match = X_PATTERN.fullmatch(operand)
        if match is None:
            return None
        minimum = _x_version(match)
        minor_given = match["minor"] is not None

    builder = minimum.to_builder()
    maximum = builder.bump_minor() if minor_given else builder.bump_major()
    return (minimum, True, maximum.freeze(), True)


def _parse_caret(operand: str) -> _Bounds | None:
    match = PARTIAL_PATTERN.fullmatch(operand)
    if match is not None:
        minimum = _partial_version(match)
        minor_given = match["minor"] is not None
        patch_given = match["patch"] is not None
    else:
        match = X_PATTERN.fullmatch(operand)
        if match is None:
            return None
        minimum = _x_version(match)
        minor_given = match["minor"] is not None
        patch_given = False

    builder = minimum.to_builder()
    if minimum.major != 0 or not minor_given:
        builder.bump_major()
    elif minimum.minor != 0 or not patch_given:
        builder.bump_minor()
    else:
        builder.bump_patch()
    return (minimum, True, builder.freeze(), True)


def _parse_partial(raw: str) -> _Bounds | None:
    match = PARTIAL_PATTERN.fullmatch(raw)
    if match is None:
        return None
    version = _partial_version(match)
    return (version, True, version.next(), True)


def _parse_x_range(raw: str) -> _Bounds | None:
    match = X_PATTERN.fullmatch(raw)
    if match is None:
        return None
    minimum = _x_version(match)
    builder = minimum.to_builder()
    if match["minor_x"] is not None:
        builder.bump_major()
    else:
        builder.bump_minor()
    return (minimum, True, builder.freeze(), True)


def _parse_hyphen(raw: str) -> _Bounds | None:
    match = HYPHEN_PATTERN.fullmatch(raw)
    if match is None:
        return None
    return (
        _partial_version(match, "1"),
        True,
        _partial_version(match, "2").next(),
        True,
    )


def _parse_bounds(raw: str) -> _Bounds | None:
    if raw in _ANY:
        return (None, False, None, False)

    bounds = _parse_comparison(raw)
    if bounds is None and raw.startswith("~"):
        bounds = _parse_tilde(raw[1:])
    if bounds is None and raw.startswith("^"):
        bounds = _parse_caret(raw[1:])
    if bounds is None:
        bounds = _parse_partial(raw)
    if bounds is None:
        bounds = _parse_x_range(raw)
    if bounds is None:
        bounds = _parse_hyphen(raw)
    return bounds


class Range:
    """An inclusive-min, exclusive-max interval of versions.

    ``include_prereleases`` is the only attribute callers may change after
    construction. When it is off, a pre-release version is only matched if an
    endpoint with the same ``major.minor.patch`` carries a real pre-release
    tag (npm's pre-release visibility rule).
    """

    __slots__ = ("_min", "_min_active", "_max", "_max_active", "_raw", "include_prereleases")

    def __init__(
        self,
        min: Version | None = None,
        min_active: bool = False,
        max: Version | None = None,
        max_active: bool = False,
        include_prereleases: bool = False,
        *,
        raw: str | None = None,
    ) -> None:
        if min_active and min is None:
            raise InvalidRange("An active lower bound needs a version")
        if max_active and max is None:
            raise InvalidRange("An active upper bound needs a version")
        self._min = min
        self._min_active = min_active
        self._max = max
        self._max_active = max_active
        self._raw = raw
        self.include_prereleases = include_prereleases

    @classmethod
    def parse(cls, raw: str, include_prereleases: bool = False) -> Range:
        """Parse one range expression, raising ``InvalidRange`` if no form matches."""
        if not isinstance(raw, str):
            raise InvalidRange(f"Invalid range: {raw!r}")
        try:
            bounds = _parse_bounds(raw)
        except InvalidVersion as exc:
            raise InvalidRange(f'Invalid range: "{raw}"') from exc
        if bounds is None:
            raise InvalidRange(f'Invalid range: "{raw}"')

        minimum, min_active, maximum, max_active = bounds
        logger.debug("Parsed range %r as min=%s max=%s", raw, minimum, maximum)
        return cls(
            minimum,
            min_active,
            maximum,
            max_active,
            include_prereleases,
            raw=raw,
        )

    @classmethod
    def from_bounds(
        cls,
        min: Version | None,
        min_active: bool,
        max: Version | None,
        max_active: bool,
        include_prereleases: bool = False,
    ) -> Range:
        return cls(min, min_active, max, max_active, include_prereleases)

    @property
    def min(self) -> Version | None:
        return self._min

    @property
    def min_active(self) -> bool:
        return self._min_active

    @property
    def max(self) -> Version | None:
        return self._max

    @property
    def max_active(self) -> bool:
        return self._max_active

    @property
    def raw(self) -> str | None:
        return self._raw

    def includes(self, version: Version | None) -> bool:
        """Return True if ``version`` lies in the range and is visible."""
        if version is None:
            return False
        if self._min_active and version < self._min:
            return False
        if self._max_active and version >= self._max:
            return False
        if self.include_prereleases or not version.pre_release:
            return True
        return self._prerelease_visible(version)

    def _prerelease_visible(self, version: Version) -> bool:
        anchors = [
            bound
            for active, bound in ((self._min_active, self._min), (self._max_active, self._max))
            if active and bound is not None and bound.release == version.release
        ]
        if not anchors:
            return False
        return all(bound.pre_release not in ("", "0") for bound in anchors)

    def with_prereleases(self, include_prereleases: bool) -> Range:
        """Return a copy of this range with a different pre-release flag."""
        return Range(
            self._min,
            self._min_active,
            self._max,
            self._max_active,
            include_prereleases,
            raw=self._raw,
        )

    def _key(self) -> tuple[object, ...]:
        return (self._min, self._min_active, self._max, self._max_active)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return self._key() == other._key() and self.include_prereleases == other.include_prereleases

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"Range(min={self._min!s}, min_active={self._min_active}, "
            f"max={self._max!s}, max_active={self._max_active}, "
            f"include_prereleases={self.include_prereleases})"
        )

    def __str__(self) -> str:
        if self._raw is not None:
            return self._raw
        if self._min_active and self._max_active:
            return f"{self._min} - {self._inclusive_max()}"
        if self._min_active:
            return f">={self._min}"
        if self._max_active:
            return f"<{self._max}"
        return "*"

    def _inclusive_max(self) -> Version:
        maximum = self._max
        if maximum is None or maximum.pre_release != "0" or maximum.patch == 0:
            raise UnrenderableRange(f"No inclusive upper bound below {maximum}")
        return Version(maximum.major, maximum.minor, maximum.patch - 1)
