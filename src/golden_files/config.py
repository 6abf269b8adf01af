"""
Configuration: golden.yaml + environment overrides.

Example golden.yaml:

    golden:
      base_dir: tests/golden
      color: false
      allow_update_in_ci: false
      uuid_threshold: 20
      timestamp_threshold: 20

Environment:
- GOLDEN_UPDATE=1            rewrite golden files
- GOLDEN_ALLOW_CI_UPDATE=1   allow rewriting inside CI
- NO_COLOR                   plain diff markers instead of ANSI colors
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from golden_files.domain.constants import (
    CI_INDICATORS,
    CONFIG_SECTION,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_TIMESTAMP_THRESHOLD,
    DEFAULT_UUID_THRESHOLD,
    ENV_ALLOW_CI_UPDATE,
    ENV_NO_COLOR,
    ENV_UPDATE,
)
from golden_files.domain.errors import ConfigError, UpdateBlockedError

logger = logging.getLogger(__name__)

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class GoldenConfig:
    """Resolved golden_files settings."""
    base_dir: Path | None = None
    update: bool = False
    color: bool = True
    allow_update_in_ci: bool = False
    uuid_threshold: int = DEFAULT_UUID_THRESHOLD
    timestamp_threshold: int = DEFAULT_TIMESTAMP_THRESHOLD

    def with_update(self, update: bool) -> "GoldenConfig":
        """Copy with update mode set."""
        return replace(self, update=update)


def is_truthy(value: str | None) -> bool:
    """Interpret an environment variable as a boolean flag."""
    return value is not None and value.strip().lower() in TRUTHY


def _read_yaml(config_path: Path) -> dict[str, Any]:
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError("failed to read config file", path=str(config_path), cause=e) from e

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError("config file must contain a mapping", path=str(config_path))

    section = data.get(CONFIG_SECTION, {}) or {}
    if not isinstance(section, Mapping):
        raise ConfigError(
            f"'{CONFIG_SECTION}' section must be a mapping", path=str(config_path)
        )
    return dict(section)


def _from_mapping(section: dict[str, Any], config_dir: Path) -> GoldenConfig:
    known = {f.name for f in fields(GoldenConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ConfigError("unknown config keys", keys=unknown)

    values: dict[str, Any] = {}
    for key, value in section.items():
        if key == "base_dir":
            if value is None:
                continue
            base_dir = Path(value)
            values[key] = base_dir if base_dir.is_absolute() else config_dir / base_dir
        elif key in ("update", "color", "allow_update_in_ci"):
            if not isinstance(value, bool):
                raise ConfigError("expected a boolean", key=key, value=value)
            values[key] = value
        else:
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ConfigError("expected a non-negative integer", key=key, value=value)
            values[key] = value

    return GoldenConfig(**values)


def _apply_env(config: GoldenConfig, environ: Mapping[str, str]) -> GoldenConfig:
    if ENV_UPDATE in environ:
        config = replace(config, update=is_truthy(environ[ENV_UPDATE]))
    if ENV_ALLOW_CI_UPDATE in environ:
        config = replace(config, allow_update_in_ci=is_truthy(environ[ENV_ALLOW_CI_UPDATE]))
    if environ.get(ENV_NO_COLOR):
        config = replace(config, color=False)
    return config


def load_config(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> GoldenConfig:
    """
    Load golden settings.

    Args:
        config_path: YAML file (default: ./golden.yaml; missing file → defaults)
        environ: Environment mapping (default: os.environ)

    Returns:
        GoldenConfig with environment overrides applied

    Raises:
        ConfigError: unreadable file, bad structure or unknown keys
    """
    environ = os.environ if environ is None else environ
    explicit = config_path is not None
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_FILENAME

    if config_path.exists():
        section = _read_yaml(config_path)
        config = _from_mapping(section, config_path.resolve().parent)
        logger.debug(f"Loaded golden config from {config_path}")
    elif explicit:
        raise ConfigError("config file not found", path=str(config_path))
    else:
        config = GoldenConfig()

    return _apply_env(config, environ)


def detect_ci(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the first CI indicator variable that is set, if any."""
    environ = os.environ if environ is None else environ
    for indicator in CI_INDICATORS:
        if environ.get(indicator):
            return indicator
    return None


def check_update_allowed(
    config: GoldenConfig,
    environ: Mapping[str, str] | None = None,
) -> None:
    """
    Block update mode inside CI environments.

    Golden files must be regenerated locally and reviewed before committing;
    rewriting them in CI would hide real failures.

    Raises:
        UpdateBlockedError: update requested, CI detected, not explicitly allowed
    """
    if not config.update or config.allow_update_in_ci:
        return

    indicator = detect_ci(environ)
    if indicator:
        raise UpdateBlockedError(
            "golden files cannot be updated in a CI environment; "
            f"regenerate locally or set {ENV_ALLOW_CI_UPDATE}=1",
            indicator=indicator,
        )
