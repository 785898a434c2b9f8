"""JSON adapters for the version types.

Versions, ranges and range sets travel as their rendered strings; reading
them back goes through the same ``parse`` constructors used everywhere else.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from jsonschema import Draft202012Validator

from .errors import SemverError
from .models import ConstraintsDocument, Range, RangeSet, Version

CONSTRAINTS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "npm-semver constraints document",
    "type": "object",
    "required": ["constraints"],
    "additionalProperties": False,
    "properties": {
        "constraints": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
        "installed": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
    },
}


class ConstraintsError(SemverError):
    """Raised when a constraints document fails schema or grammar checks."""


class SemverJSONEncoder(json.JSONEncoder):
    """Encode ``Version``, ``Range`` and ``RangeSet`` values as strings."""

    def default(self, o: Any) -> Any:
        if isinstance(o, (Version, Range, RangeSet)):
            return str(o)
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    kwargs.setdefault("cls", SemverJSONEncoder)
    return json.dumps(obj, **kwargs)


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_constraints(document: Any) -> None:
    """Raise ``ConstraintsError`` listing every schema violation in ``document``."""
    validator = Draft202012Validator(CONSTRAINTS_SCHEMA)
    errors = sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise ConstraintsError("\n" + _format_errors(errors))


def load_constraints(document: Any, include_prereleases: bool = False) -> ConstraintsDocument:
    """Validate and parse a decoded constraints document.

    Args:
        document: Decoded JSON/YAML content.
        include_prereleases: Applied to every parsed range.

    Raises:
        ConstraintsError: On schema violations or unparseable ranges/versions.
    """
    validate_constraints(document)

    problems: list[str] = []
    constraints: dict[str, RangeSet] = {}
    for name, expr in document["constraints"].items():
        try:
            constraints[name] = RangeSet.parse(expr.strip(), include_prereleases)
        except SemverError as exc:
            problems.append(f"- constraints/{name}: {exc}")

    installed: dict[str, Version] = {}
    for name, raw in (document.get("installed") or {}).items():
        try:
            installed[name] = Version.parse(raw.strip())
        except SemverError as exc:
            problems.append(f"- installed/{name}: {exc}")

    if problems:
        raise ConstraintsError("\n" + "\n".join(problems))

    return ConstraintsDocument(constraints=constraints, installed=installed)
