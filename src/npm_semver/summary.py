"""Human-readable Markdown rendering of a check report."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and a table of failing packages."""
    totals = report.get("totals", {})
    findings = report.get("findings") or []

    lines = []
    lines.append("# npm-semver Summary")
    lines.append("")
    lines.append(
        f"Constraints: {totals.get('constraints', 0)} | "
        f"Unsatisfied: {totals.get('unsatisfied', 0)} | "
        f"Missing: {totals.get('missing', 0)}"
    )
    lines.append("")
    lines.append("| Package | Constraint | Installed | Result |")
    lines.append("| --- | --- | --- | --- |")

    for finding in findings:
        pkg = finding.get("package", "")
        constraint = str(finding.get("constraint", "")).replace("|", "\\|")
        installed = finding.get("installed") or "n/a"
        reason = finding.get("reason", "")
        lines.append(f"| {pkg} | `{constraint}` | {installed} | {reason} |")

    if not findings:
        lines.append("| (all constraints satisfied) | n/a | n/a | ok |")

    return "\n".join(lines) + "\n"
