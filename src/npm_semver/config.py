"""Environment-driven settings for the command line front end.

The library itself never reads configuration; only ``npm_semver.cli`` calls
``load_settings``.

Recognised variables:
- ``NPM_SEMVER_INCLUDE_PRERELEASE``: match pre-releases outside the endpoints
- ``NPM_SEMVER_LOG_LEVEL``: logging level name (default ``WARNING``)
- ``NPM_SEMVER_WARN_ONLY``: ``check`` findings do not fail the run
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from collections.abc import Mapping

from .errors import SemverError

INCLUDE_PRERELEASE_ENV_VAR = "NPM_SEMVER_INCLUDE_PRERELEASE"
LOG_LEVEL_ENV_VAR = "NPM_SEMVER_LOG_LEVEL"
WARN_ONLY_ENV_VAR = "NPM_SEMVER_WARN_ONLY"

DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = {"1", "true", "yes", "y"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ConfigError(SemverError):
    """Raised when an environment variable holds an unusable value."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    include_prereleases: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    warn_only: bool = False

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def _flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "").strip().lower() in _TRUTHY


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from ``environ`` (defaults to ``os.environ``).

    Raises:
        ConfigError: If the log level is not a standard level name.
    """
    if environ is None:
        environ = os.environ

    log_level = environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper() or DEFAULT_LOG_LEVEL
    if log_level not in _LOG_LEVELS:
        known = ", ".join(sorted(_LOG_LEVELS))
        raise ConfigError(f"Unknown log level '{log_level}'. Known levels: {known}")

    return Settings(
        include_prereleases=_flag(environ, INCLUDE_PRERELEASE_ENV_VAR),
        log_level=log_level,
        warn_only=_flag(environ, WARN_ONLY_ENV_VAR),
    )
