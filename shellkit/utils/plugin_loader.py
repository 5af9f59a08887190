# shellkit/utils/plugin_loader.py
"""
Utilities for discovering user command plugins and attaching them to a shell.

A plugin is any module exposing `register(app)`. Plugins come from two places:
- `.py` files and packages under a `plugins/` directory (optional).
- the `shellkit.plugins` entry-point group of installed distributions.

A broken plugin is logged and skipped; it never stops the shell from starting.
"""
from __future__ import annotations

import runpy
import sys
import traceback
from importlib import import_module
from importlib.metadata import entry_points
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from shellkit.exceptions import PluginLoadError
from shellkit.utils.logger import setup_logger

logger = setup_logger(__name__)

ENTRY_POINT_GROUP = "shellkit.plugins"


def _register_from_namespace(app: Any, namespace: Dict[str, Any], origin: str) -> bool:
    register: Optional[Callable[[Any], None]] = namespace.get("register")
    if not callable(register):
        logger.debug("Plugin %s has no register(app); skipping", origin)
        return False
    try:
        register(app)
    except Exception as e:
        raise PluginLoadError(f"register() failed for plugin {origin}: {e}") from e
    logger.info("Registered plugin: %s", origin)
    return True


def _load_module(name: str) -> Dict[str, Any]:
    return vars(import_module(name))


def _load_file(path: Path) -> Dict[str, Any]:
    return runpy.run_path(str(path), run_name=f"plugin:{path.stem}")


def load_plugins_from_dir(app: Any, plugins_dir: Path) -> List[str]:
    """Load every plugin module under `plugins_dir` and register it on `app`.

    Returns the names of the plugins that registered successfully.
    """
    loaded: List[str] = []
    if not plugins_dir.is_dir():
        return loaded

    is_package = (plugins_dir / "__init__.py").exists()
    if is_package:
        parent = str(plugins_dir.parent.resolve())
        if parent not in sys.path:
            sys.path.insert(0, parent)

    for p in sorted(plugins_dir.rglob("*.py")):
        rel = p.relative_to(plugins_dir)
        # Skip dunder & cache paths
        if any(part.startswith("__") for part in rel.parts):
            continue
        origin = str(rel.with_suffix(""))
        try:
            if is_package:
                mod_name = ".".join((plugins_dir.name,) + rel.with_suffix("").parts)
                namespace = _load_module(mod_name)
            else:
                namespace = _load_file(p)
            if _register_from_namespace(app, namespace, origin):
                loaded.append(origin)
        except Exception:
            logger.error("Error loading plugin %s\n%s", p, traceback.format_exc())
    return loaded


def load_entry_point_plugins(app: Any, group: str = ENTRY_POINT_GROUP) -> List[str]:
    """Register every plugin advertised under the `group` entry-point group."""
    loaded: List[str] = []
    for ep in entry_points(group=group):
        try:
            target = ep.load()
            if callable(target) and not hasattr(target, "register"):
                target(app)
                logger.info("Registered plugin: %s", ep.name)
            elif not _register_from_namespace(app, vars(target), ep.name):
                continue
            loaded.append(ep.name)
        except Exception:
            logger.error(
                "Error loading entry-point plugin %s\n%s", ep.name, traceback.format_exc()
            )
    return loaded


def load_all_plugins(app: Any, *, plugins_dir: Path | None = None) -> List[str]:
    """Discover and register plugins from entry points and a plugins directory."""
    loaded = load_entry_point_plugins(app)
    if plugins_dir is None:
        plugins_dir = Path.cwd() / "plugins"
    loaded.extend(load_plugins_from_dir(app, plugins_dir))
    return loaded


__all__ = ["load_all_plugins", "load_entry_point_plugins", "load_plugins_from_dir"]
