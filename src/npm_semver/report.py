"""Report aggregation for constraint checks."""

from __future__ import annotations

from typing import Any

from .models import ConstraintsDocument, Finding


def aggregate(document: ConstraintsDocument, findings: list[Finding]) -> dict[str, Any]:
    """Aggregate check findings into a single JSON-friendly report.

    ``totals`` counts the constrained packages, the installed packages that
    were supplied, and the findings by reason.
    """

    unsatisfied = sum(1 for f in findings if f.reason == "unsatisfied")
    missing = sum(1 for f in findings if f.reason == "missing")

    report: dict[str, Any] = {
        "hasFindings": bool(findings),
        "findings": [f.to_dict() for f in findings],
        "totals": {
            "constraints": len(document.constraints),
            "installed": len(document.installed),
            "unsatisfied": unsatisfied,
            "missing": missing,
        },
    }

    return report
