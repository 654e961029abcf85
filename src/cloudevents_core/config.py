"""Environment-driven settings for the JSON event format."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

_TRUTHY = {"1", "true", "yes", "on"}


def _env(key: str, default: str = "") -> str:
    """Read an environment variable, falling back to a default."""
    return os.environ.get(key, default)


def _env_flag(key: str, *, default: bool) -> bool:
    """Read a boolean environment flag."""
    raw = _env(key)
    if not raw:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class FormatConfig:
    """Behaviour switches for encoding and decoding JSON documents."""

    strict_data: bool = field(
        default_factory=lambda: _env_flag("CLOUDEVENTS_STRICT_DATA", default=False)
    )
    compact: bool = field(
        default_factory=lambda: _env_flag("CLOUDEVENTS_COMPACT_JSON", default=True)
    )


@dataclass(frozen=True)
class Settings:
    """Top-level settings container."""

    format: FormatConfig = field(default_factory=FormatConfig)
