# shellkit/bootstrap.py
"""
Wires a `ShellComponent` together from a `CommandLine` and the loaded config.

Built-in command sets are registered unless internal commands are disabled,
then user plugins are attached. Failures building the shell itself surface as
`EngineInitializationError`; a broken command set or plugin is only reported.
"""
from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from shellkit.commands import register_internal_commands
from shellkit.exceptions import EngineInitializationError
from shellkit.schemas.command_line import CommandLine
from shellkit.shell import DEFAULT_BANNER, DEFAULT_PROMPT, ShellComponent
from shellkit.utils.config import get_config
from shellkit.utils.logger import setup_logger
from shellkit.utils.plugin_loader import load_all_plugins

logger = setup_logger(__name__)


class Bootstrap:
    """Builds the shell for one process run."""

    def __init__(self, command_line: CommandLine, config: Optional[Dict[str, Any]] = None):
        self.command_line = command_line
        self.config = config if config is not None else get_config()

    def _shell_settings(self) -> Dict[str, Any]:
        shell_cfg = self.config.get("shell") or {}
        return {
            "prompt": shell_cfg.get("prompt", DEFAULT_PROMPT),
            "banner": shell_cfg.get("banner", DEFAULT_BANNER),
            "history_file": str(shell_cfg.get("history_file") or ""),
            "history_size": self.command_line.history_size or shell_cfg.get("history_size"),
            "use_ansi": not self.command_line.no_ansi and shell_cfg.get("ansi", True),
            "max_background_jobs": int(shell_cfg.get("max_background_jobs", 4)),
        }

    def _plugins_dir(self) -> Path:
        plugins_cfg = self.config.get("plugins") or {}
        return Path(plugins_cfg.get("dir") or Path.cwd() / "plugins")

    def build(self) -> ShellComponent:
        try:
            shell = ShellComponent(**self._shell_settings())
        except Exception as e:
            raise EngineInitializationError(f"Failed to construct the shell: {e}") from e

        if self.command_line.disable_internal_commands:
            logger.info("Internal commands disabled")
        else:
            register_internal_commands(shell)

        plugins_cfg = self.config.get("plugins") or {}
        if plugins_cfg.get("enabled", True):
            loaded = load_all_plugins(shell, plugins_dir=self._plugins_dir())
            logger.debug("Loaded %d plugin(s)", len(loaded))
        return shell


@contextmanager
def shell_session(
    command_line: CommandLine, config: Optional[Dict[str, Any]] = None
) -> Iterator[ShellComponent]:
    """Build a shell for the duration of the block and always close it."""
    shell = Bootstrap(command_line, config).build()
    try:
        yield shell
    finally:
        shell.close()
