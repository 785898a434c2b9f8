"""Version, range and range-set value types."""

from __future__ import annotations

from .constraints import ConstraintsDocument, Finding
from .range_set import RangeSet
from .version import Version, VersionBuilder
from .version_range import Range

__all__ = [
    "ConstraintsDocument",
    "Finding",
    "Range",
    "RangeSet",
    "Version",
    "VersionBuilder",
]
