#!/usr/bin/env python3
"""Standalone settings loader for the German name generator.

The application config lives in ``namegen/configs/app.yaml``. Set
``NAMEGEN_CONFIG`` to point at a different YAML file.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
import os

import yaml

PROJECT_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PROJECT_ROOT / "namegen" / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"
CONFIG_ENV_VAR = "NAMEGEN_CONFIG"


def config_path() -> Path:
    """Path of the active app config (env override first)."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return resolve_path(override, base=Path.cwd())
    return APP_CONFIG_PATH


@lru_cache(maxsize=4)
def _read_config(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Missing app config: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"App config must be a mapping: {path}")
    return data or {}


def load_app_config() -> dict:
    return _read_config(config_path())


def reload_settings() -> None:
    """Drop cached config so the next lookup re-reads the file."""
    _read_config.cache_clear()


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def require_setting(path: str) -> Any:
    """Like get_setting, but a missing value is a configuration error."""
    value = get_setting(path)
    if value is None:
        raise ValueError(f"{path} must be set in {config_path().name}")
    return value


def resolve_path(value: str, base: Path | None = None) -> Path:
    """Resolve a path string relative to project root (unless absolute)."""
    if value is None:
        raise ValueError("path value is required")
    path = Path(os.path.expanduser(str(value)))
    if not path.is_absolute():
        path = ((base or PROJECT_ROOT) / path).resolve()
    return path


__all__ = [
    "load_app_config",
    "reload_settings",
    "get_setting",
    "require_setting",
    "resolve_path",
    "config_path",
    "PROJECT_ROOT",
    "APP_CONFIG_PATH",
    "CONFIG_ENV_VAR",
]
