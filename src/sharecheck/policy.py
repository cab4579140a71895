"""Runtime tunables for the consensus resolver.

Values come from defaults, then environment variables, then an optional YAML
file, so the command line and library callers share one source of truth.
Malformed environment values fall back to the defaults; malformed YAML is an
error because it was supplied explicitly.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from sharecheck.errors import ConfigurationError

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _load_int(name: str, default: int, *, minimum: int = 1) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed >= minimum else default


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    return default


def _load_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None or value.strip().upper() not in _LOG_LEVELS:
        return default
    return value.strip().upper()


@dataclass(frozen=True)
class ResolverPolicy:
    """Holds limits and switches for a consensus search."""

    max_subsets: int = 1_000_000
    workers: int = 1
    strict: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.max_subsets < 1:
            raise ConfigurationError("max_subsets must be at least 1")
        if self.workers < 1:
            raise ConfigurationError("workers must be at least 1")
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level {self.log_level!r}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    def with_overrides(self, **overrides: Any) -> ResolverPolicy:
        """Return a copy with every non-``None`` override applied."""

        changes = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)


def _read_yaml(path: str | os.PathLike[str]) -> dict[str, Any]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read policy file {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid policy file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Policy file {path} must contain a mapping")
    known = {field.name for field in dataclasses.fields(ResolverPolicy)}
    unknown = sorted(str(key) for key in set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown policy keys: {', '.join(unknown)}")
    for key in ("max_subsets", "workers"):
        if key in data and (isinstance(data[key], bool) or not isinstance(data[key], int)):
            raise ConfigurationError(f"Policy key {key!r} must be an integer")
    if "strict" in data and not isinstance(data["strict"], bool):
        raise ConfigurationError("Policy key 'strict' must be a boolean")
    if "log_level" in data:
        data["log_level"] = str(data["log_level"]).upper()
    return data


def load_policy(path: str | os.PathLike[str] | None = None) -> ResolverPolicy:
    """Load the resolver policy considering environment and file overrides."""

    base = ResolverPolicy(
        max_subsets=_load_int("SHARECHECK_MAX_SUBSETS", 1_000_000),
        workers=_load_int("SHARECHECK_WORKERS", 1),
        strict=_load_bool("SHARECHECK_STRICT", False),
        log_level=_load_level("SHARECHECK_LOG_LEVEL", "WARNING"),
    )
    if path is None:
        return base
    return base.with_overrides(**_read_yaml(path))


policy = load_policy()


__all__ = ["ResolverPolicy", "policy", "load_policy"]
