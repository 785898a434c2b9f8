"""Semantic version model."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import InvalidVersion
from ..parsers.grammar import (
    BUILD_METADATA_PATTERN,
    PRE_RELEASE_PATTERN,
    VERSION_PATTERN,
)


def _is_component(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_numeric(identifier: str) -> bool:
    return identifier.isascii() and identifier.isdigit()


def _compare_pre_release(left: str, right: str) -> int:
    left_ids = left.split(".")
    right_ids = right.split(".")
    for a, b in zip(left_ids, right_ids):
        a_numeric = _is_numeric(a)
        b_numeric = _is_numeric(b)
        if a_numeric and not b_numeric:
            return -1
        if b_numeric and not a_numeric:
            return 1
        if a_numeric:
            diff = int(a) - int(b)
            if diff:
                return -1 if diff < 0 else 1
        elif a != b:
            # plain str ordering is ASCII code-unit order with shorter prefixes first
            return -1 if a < b else 1
    if len(left_ids) < len(right_ids):
        return -1
    if len(left_ids) > len(right_ids):
        return 1
    return 0


@dataclass(frozen=True)
class Version:
    """A semantic version as defined by https://semver.org.

    Equality and hashing ignore ``build_metadata``; it is kept only for
    rendering. ``None`` orders below every version.
    """

    major: int
    minor: int
    patch: int
    pre_release: str = ""
    build_metadata: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            if not _is_component(getattr(self, name)):
                raise InvalidVersion(f"{name} must be a non-negative integer")
        if self.pre_release is None:
            object.__setattr__(self, "pre_release", "")
        if self.build_metadata is None:
            object.__setattr__(self, "build_metadata", "")
        if self.pre_release and not PRE_RELEASE_PATTERN.fullmatch(self.pre_release):
            raise InvalidVersion(f"Invalid pre-release: {self.pre_release!r}")
        if self.build_metadata and not BUILD_METADATA_PATTERN.fullmatch(self.build_metadata):
            raise InvalidVersion(f"Invalid build metadata: {self.build_metadata!r}")

    @classmethod
    def parse(cls, raw: str) -> Version:
        """Parse ``raw`` as a complete ``major.minor.patch[-pre][+build]`` string."""
        if not isinstance(raw, str):
            raise InvalidVersion(f"Invalid version: {raw!r}")
        match = VERSION_PATTERN.fullmatch(raw)
        if match is None:
            raise InvalidVersion(f'Invalid version: "{raw}"')
        return cls(
            major=int(match["major"]),
            minor=int(match["minor"]),
            patch=int(match["patch"]),
            pre_release=match["prerelease"] or "",
            build_metadata=match["buildmetadata"] or "",
        )

    @property
    def release(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.pre_release)

    def compare(self, other: Version | None) -> int:
        """Return -1, 0 or 1 following semver precedence."""
        if other is None:
            return 1
        if self.release != other.release:
            return -1 if self.release < other.release else 1
        if self.pre_release and not other.pre_release:
            return -1
        if other.pre_release and not self.pre_release:
            return 1
        if not self.pre_release:
            return 0
        return _compare_pre_release(self.pre_release, other.pre_release)

    def next(self) -> Version:
        """Return the smallest version above this one and all its pre-release extensions."""
        if not self.pre_release:
            return Version(self.major, self.minor, self.patch + 1, "0")
        return Version(self.major, self.minor, self.patch, f"{self.pre_release}.0")

    def to_builder(self) -> VersionBuilder:
        return VersionBuilder(
            major=self.major,
            minor=self.minor,
            patch=self.patch,
            pre_release=self.pre_release,
            build_metadata=self.build_metadata,
        )

    def __lt__(self, other: object) -> bool:
        if other is not None and not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if other is not None and not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if other is not None and not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if other is not None and not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            text += f"-{self.pre_release}"
        if self.build_metadata:
            text += f"+{self.build_metadata}"
        return text


@dataclass(slots=True)
class VersionBuilder:
    """Mutable scratch copy of a version used while computing range bounds."""

    major: int
    minor: int
    patch: int
    pre_release: str = ""
    build_metadata: str = ""

    def bump_major(self) -> VersionBuilder:
        self.major += 1
        self.minor = 0
        self.patch = 0
        return self._mark_lower_bound()

    def bump_minor(self) -> VersionBuilder:
        self.minor += 1
        self.patch = 0
        return self._mark_lower_bound()

    def bump_patch(self) -> VersionBuilder:
        self.patch += 1
        return self._mark_lower_bound()

    def _mark_lower_bound(self) -> VersionBuilder:
        # "-0" is the lowest pre-release, so the bump excludes every pre-release of it.
        self.pre_release = "0"
        self.build_metadata = ""
        return self

    def freeze(self) -> Version:
        return Version(
            major=self.major,
            minor=self.minor,
            patch=self.patch,
            pre_release=self.pre_release,
            build_metadata=self.build_metadata,
        )
