"""Constraint document model: declared ranges checked against installed versions."""

from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Mapping

from .range_set import RangeSet
from .version import Version

_VALID_REASONS = {"unsatisfied", "missing"}


@dataclass(frozen=True)
class Finding:
    """A package whose installed version does not satisfy its constraint."""

    package: str
    constraint: str
    installed: str | None
    reason: str

    def __post_init__(self) -> None:
        if not self.package:
            raise ValueError("Package name must be non-empty")
        if self.reason not in _VALID_REASONS:
            raise ValueError(f"Invalid reason: {self.reason}")

    def to_dict(self) -> dict[str, object]:
        return {
            "package": self.package,
            "constraint": self.constraint,
            "installed": self.installed,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class ConstraintsDocument:
    """Parsed ``{"constraints": {...}, "installed": {...}}`` document."""

    constraints: Mapping[str, RangeSet]
    installed: Mapping[str, Version] = field(default_factory=dict)

    def check(self) -> list[Finding]:
        """Return findings sorted by package name."""
        findings: list[Finding] = []
        for name in sorted(self.constraints):
            ranges = self.constraints[name]
            version = self.installed.get(name)
            if version is None:
                findings.append(
                    Finding(package=name, constraint=str(ranges), installed=None, reason="missing")
                )
            elif not ranges.includes(version):
                findings.append(
                    Finding(
                        package=name,
                        constraint=str(ranges),
                        installed=str(version),
                        reason="unsatisfied",
                    )
                )
        return findings

    def to_dict(self) -> dict[str, object]:
        return {
            "constraints": {name: str(ranges) for name, ranges in self.constraints.items()},
            "installed": {name: str(version) for name, version in self.installed.items()},
        }
