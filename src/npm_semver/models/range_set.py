"""Union of ranges joined with ``||``."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable, Iterator

from ..errors import InvalidRange
from .version import Version
from .version_range import Range

SEPARATOR = "||"


@dataclass(frozen=True, eq=False)
class RangeSet:
    """Ordered, non-empty collection of ranges with OR semantics."""

    ranges: tuple[Range, ...]

    def __post_init__(self) -> None:
        if not self.ranges:
            raise InvalidRange("A range set must contain at least one range")

    @classmethod
    def parse(cls, raw: str, include_prereleases: bool = False) -> RangeSet:
        """Split ``raw`` on ``||`` and parse every trimmed piece as a range."""
        if not isinstance(raw, str):
            raise InvalidRange(f"Invalid range set: {raw!r}")
        return cls(
            ranges=tuple(
                Range.parse(piece.strip(), include_prereleases)
                for piece in raw.split(SEPARATOR)
            )
        )

    @classmethod
    def from_ranges(cls, ranges: Iterable[Range]) -> RangeSet:
        return cls(ranges=tuple(ranges))

    def includes(self, version: Version | None) -> bool:
        return any(item.includes(version) for item in self.ranges)

    def with_prereleases(self, include_prereleases: bool) -> RangeSet:
        return RangeSet.from_ranges(item.with_prereleases(include_prereleases) for item in self.ranges)

    def __iter__(self) -> Iterator[Range]:
        return iter(self.ranges)

    def __len__(self) -> int:
        return len(self.ranges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeSet):
            return NotImplemented
        return all(item in other.ranges for item in self.ranges) and all(
            item in self.ranges for item in other.ranges
        )

    def __hash__(self) -> int:
        return hash(frozenset(self.ranges))

    def __str__(self) -> str:
        return SEPARATOR.join(str(item) for item in self.ranges)
