# shellkit/utils/config.py
"""
Minimal config loader with caching and gentle fallbacks.

- Reads ./config.yaml if present.
- Merges simple environment overrides (SHELLKIT_*).
- Returns a plain dict so callers can do .get(...) safely.
- Exposes reload_config() for tests.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

_CONFIG_CACHE: Dict[str, Any] | None = None

_TRUTHY = {"1", "true", "on", "yes"}


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            return {}
        return data
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to parse %s: %s", path, e)
        return {}


def _apply_env_overrides(cfg: Dict[str, Any]) -> Dict[str, Any]:
    log_level = os.environ.get("SHELLKIT_LOG_LEVEL")
    if log_level:
        cfg["logging"] = {**(cfg.get("logging") or {}), "level": log_level}

    shell = dict(cfg.get("shell") or {})
    history_file = os.environ.get("SHELLKIT_HISTORY_FILE")
    if history_file:
        shell["history_file"] = history_file
    dev = os.environ.get("SHELLKIT_DEV")
    if dev:
        shell["development_mode"] = dev.strip().lower() in _TRUTHY
    if shell:
        cfg["shell"] = shell

    plugins_dir = os.environ.get("SHELLKIT_PLUGINS_DIR")
    if plugins_dir:
        cfg["plugins"] = {**(cfg.get("plugins") or {}), "dir": plugins_dir}
    return cfg


def get_config() -> Dict[str, Any]:
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    cfg = _read_yaml(Path("config.yaml"))
    cfg = _apply_env_overrides(cfg)
    _CONFIG_CACHE = cfg
    return _CONFIG_CACHE


def reload_config() -> Dict[str, Any]:
    """Clear cache and reload (primarily for tests)."""
    global _CONFIG_CACHE
    _CONFIG_CACHE = None
    return get_config()
