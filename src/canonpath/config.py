"""Configuration loader: YAML file with environment variable fallbacks."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CanonConfig:
    working_dir: str | None = None  # base for relative inputs; None = process cwd
    log_level: str = "WARNING"
    check_exists: bool = False  # flag canonical results that are not on disk

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def _resolve_data_dir() -> Path:
    env_dir = os.environ.get("CANONPATH_DATA_DIR")
    if env_dir:
        return Path(env_dir).expanduser()
    return Path.home() / ".canonpath"


def _get_config_path() -> Path:
    return _resolve_data_dir() / "config.yaml"


def load_config(config_path: Path | None = None) -> CanonConfig:
    raw: dict[str, Any] = {}
    path = config_path or _get_config_path()

    if path.exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Configuration in {path} must be a mapping, got {type(raw).__name__}")

    working_dir = raw.get("working_dir")
    source = str(path)
    if not working_dir:
        working_dir = os.environ.get("CANONPATH_WORKING_DIR") or None
        source = "CANONPATH_WORKING_DIR"
    if working_dir is not None:
        if not isinstance(working_dir, str):
            raise ValueError(f"'working_dir' in {source} must be a string")
        working_dir = os.path.normpath(os.path.expanduser(working_dir))
        if not os.path.isabs(working_dir):
            raise ValueError(f"'working_dir' must be an absolute path, got {working_dir!r} ({source})")

    log_level = str(raw.get("log_level") or os.environ.get("CANONPATH_LOG_LEVEL", "WARNING")).upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"'log_level' must be one of {', '.join(_LOG_LEVELS)}, got {log_level!r} ({path})")

    check_exists_raw = raw.get("check_exists", os.environ.get("CANONPATH_CHECK_EXISTS", "false"))
    check_exists = str(check_exists_raw).lower() in ("true", "1", "yes")

    return CanonConfig(
        working_dir=working_dir,
        log_level=log_level,
        check_exists=check_exists,
    )
