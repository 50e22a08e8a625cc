"""Load and merge configuration from .gitscaffold.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from loguru import logger

from gitscaffold.config.schema import (
    STATUS_RULE_NAMES,
    BranchConfig,
    GitScaffoldConfig,
    PushConfig,
    ScaffoldConfig,
    StatusConfig,
    SwitchConfig,
)

CONFIG_FILE_NAME = ".gitscaffold.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(search_dirs: list[Path], override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence over *search_dirs*."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    for directory in search_dirs:
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _merge_env_overrides(cfg: GitScaffoldConfig) -> None:
    """Apply GITSCAFFOLD_* environment variable overrides."""
    if val := os.environ.get("GITSCAFFOLD_STATUS_RULES"):
        cfg.status.rules = val  # type: ignore[assignment]
    if val := os.environ.get("GITSCAFFOLD_MESSAGE_FILE"):
        cfg.scaffold.message_file = val
    if val := os.environ.get("GITSCAFFOLD_PUSH_ARGS"):
        cfg.push.args = val.split()


def _validate(cfg: GitScaffoldConfig) -> None:
    if cfg.status.rules not in STATUS_RULE_NAMES:
        raise ConfigError(
            f"Invalid status rules {cfg.status.rules!r}; expected one of {', '.join(STATUS_RULE_NAMES)}"
        )
    if not isinstance(cfg.push.args, list):
        raise ConfigError("[push] args must be a list of strings")
    if not cfg.scaffold.message_file:
        raise ConfigError("[scaffold] message_file must not be empty")


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
    workdir: Optional[Path] = None,
) -> GitScaffoldConfig:
    """Load, validate, and return a GitScaffoldConfig.

    The working directory is searched before the repository root.
    """
    search_dirs = [workdir, repo_root] if workdir and workdir != repo_root else [repo_root]
    config_path = find_config_file(search_dirs, config_override)

    if config_path is None:
        cfg = GitScaffoldConfig()
    else:
        logger.debug(f"Loading config from {config_path}")
        raw = _parse_toml(config_path)
        try:
            cfg = GitScaffoldConfig(
                version=raw.get("version", "1.0"),
                scaffold=_build_section(raw, ScaffoldConfig, "scaffold"),
                status=_build_section(raw, StatusConfig, "status"),
                push=_build_section(raw, PushConfig, "push"),
                switch=_build_section(raw, SwitchConfig, "switch"),
                branch=_build_section(raw, BranchConfig, "branch"),
            )
        except TypeError as exc:
            raise ConfigError(f"Invalid config in {config_path}: {exc}") from exc

    _merge_env_overrides(cfg)
    _validate(cfg)
    return cfg
