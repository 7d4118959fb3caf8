# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Classifier configuration: defaults, YAML file and ``URLSIEVE_*`` environment.

Precedence (later wins): defaults < YAML file < environment < explicit overrides.
"""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

DEFAULT_THRESHOLD = 0.8
MIN_SEGMENT_LENGTH = 8

WORDS_ENV = "URLSIEVE_WORDS"

# field name -> environment variable
_ENV_VARS: dict[str, str] = {
    "threshold": "URLSIEVE_THRESHOLD",
    "min_segment_length": "URLSIEVE_MIN_SEGMENT_LENGTH",
    "hex_ratio": "URLSIEVE_HEX_RATIO",
    "digit_ratio": "URLSIEVE_DIGIT_RATIO",
    "digit_min_length": "URLSIEVE_DIGIT_MIN_LENGTH",
}

_RATIO_FIELDS = ("threshold", "hex_ratio", "digit_ratio")
_LENGTH_FIELDS = ("min_segment_length", "digit_min_length")


@dataclasses.dataclass(frozen=True, slots=True, kw_only=True)
class ClassifierConfig:
    """Decision boundaries for segment classification.

    threshold: coverage ratio a segment must strictly exceed to count as meaningful.
    min_segment_length: segments shorter than this are meaningful without analysis.
    hex_ratio / digit_ratio: share of hex / decimal digits above which a segment is random.
    digit_min_length: the digit rule only applies to segments longer than this.
    """

    threshold: float = DEFAULT_THRESHOLD
    min_segment_length: int = MIN_SEGMENT_LENGTH
    hex_ratio: float = 0.8
    digit_ratio: float = 0.8
    digit_min_length: int = 10

    def __post_init__(self) -> None:
        for name in _RATIO_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise ConfigError(f"{name} must be a number, got {value!r}")
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{name} must be between 0 and 1, got {value}")
        for name in _LENGTH_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ConfigError(f"{name} must be >= 0, got {value}")

    def replace(self, **changes: Any) -> ClassifierConfig:
        """Return a copy with *changes* applied; ``None`` values are ignored."""
        changes = {k: v for k, v in changes.items() if v is not None}
        unknown = set(changes) - _field_names()
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_mapping(cls, data: dict[str, Any], *, base: ClassifierConfig | None = None) -> ClassifierConfig:
        base = base or cls()
        return base.replace(**data)

    @classmethod
    def from_yaml(cls, path: str | Path, *, base: ClassifierConfig | None = None) -> ClassifierConfig:
        """Load config keys from a YAML mapping (keys equal field names)."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e.strerror or e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
        return cls.from_mapping(data, base=base)

    @classmethod
    def from_env(
        cls,
        environ: dict[str, str] | None = None,
        *,
        base: ClassifierConfig | None = None,
    ) -> ClassifierConfig:
        """Overlay ``URLSIEVE_*`` variables on *base*. Blank values are ignored."""
        env = os.environ if environ is None else environ
        changes: dict[str, Any] = {}
        for name, var in _ENV_VARS.items():
            raw = env.get(var, "").strip()
            if not raw:
                continue
            try:
                changes[name] = int(raw) if name in _LENGTH_FIELDS else float(raw)
            except ValueError:
                raise ConfigError(f"{var}={raw!r} is not a valid number") from None
        return (base or cls()).replace(**changes)


def _field_names() -> set[str]:
    return {f.name for f in dataclasses.fields(ClassifierConfig)}


def load_config(
    path: str | Path | None = None,
    *,
    environ: dict[str, str] | None = None,
    **overrides: Any,
) -> ClassifierConfig:
    """Resolve the effective config: defaults, then *path*, then environment, then *overrides*."""
    config = ClassifierConfig()
    if path is not None:
        config = ClassifierConfig.from_yaml(path, base=config)
    config = ClassifierConfig.from_env(environ, base=config)
    return config.replace(**overrides)
