# shellkit/lifecycle.py
"""
Process lifecycle: one run of the shell from raw arguments to exit code.

Timing, guaranteed log flushing and delivery of the exit code live here. The
orchestrator decides what the run does; this module decides how the process
begins and ends around it.
"""
from __future__ import annotations

import sys
import time
from contextlib import AbstractContextManager
from typing import Any, Callable, Dict, NoReturn, Optional, Sequence

from rich.console import Console

from shellkit import orchestrator
from shellkit.bootstrap import shell_session
from shellkit.command_line import parse_command_line, usage
from shellkit.engine import ShellEngine
from shellkit.exceptions import EngineInitializationError, ParseError
from shellkit.schemas.command_line import CommandLine
from shellkit.schemas.exit_status import (
    ExitStatus,
    FATAL_EXIT,
    INTERRUPTED_EXIT,
    NORMAL_EXIT,
    USAGE_EXIT,
)
from shellkit.utils.config import get_config
from shellkit.utils.logger import configure_logging, flush_all_handlers, setup_logger

logger = setup_logger(__name__)

SessionFactory = Callable[
    [CommandLine, Optional[Dict[str, Any]]], AbstractContextManager[ShellEngine]
]


class ProcessLifecycle:
    """Wraps one orchestrator run with timing, log flushing and exit-code delivery."""

    def __init__(
        self,
        *,
        session_factory: Optional[SessionFactory] = None,
        config: Optional[Dict[str, Any]] = None,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ):
        self.session_factory = session_factory or shell_session
        self.config = config
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        self.elapsed_ms: Optional[float] = None

    def _config(self) -> Dict[str, Any]:
        if self.config is None:
            self.config = get_config()
        return self.config

    def _development_mode(self, command_line: CommandLine) -> bool:
        shell_cfg = self._config().get("shell") or {}
        return command_line.development_mode or bool(shell_cfg.get("development_mode"))

    def run(self, argv: Sequence[str]) -> int:
        """Execute one run and return the process exit code.

        Log handlers are flushed exactly once, on every path out of this
        method. `EngineInitializationError` is the only exception that escapes.
        """
        started = time.perf_counter()
        try:
            try:
                command_line = parse_command_line(argv)
            except ParseError as e:
                logger.error("Invalid arguments: %s", e)
                self.err_console.print(f"[bold red]Error:[/bold red] {e}")
                self.err_console.print(usage(), markup=False)
                return USAGE_EXIT.code

            if command_line.debug:
                configure_logging("debug")
            if command_line.show_help:
                self.console.print(usage(), markup=False)
                return NORMAL_EXIT.code

            status = self._run_session(command_line)
        finally:
            flush_all_handlers()

        self.elapsed_ms = (time.perf_counter() - started) * 1000
        if self._development_mode(command_line):
            self.console.print(f"Total execution time: {int(self.elapsed_ms)} ms")
        return status.code

    def _run_session(self, command_line: CommandLine) -> ExitStatus:
        try:
            with self.session_factory(command_line, self._config()) as shell:
                return orchestrator.run(command_line, shell)
        except EngineInitializationError:
            logger.exception("Shell initialization failed")
            raise
        except KeyboardInterrupt:
            logger.warning("Run interrupted")
            return INTERRUPTED_EXIT

    def execute(self, argv: Sequence[str]) -> NoReturn:
        """Run and terminate the process with the resulting exit code."""
        sys.exit(self.run(argv))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run shellkit and return an exit code suitable for sys.exit()."""
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        return ProcessLifecycle().run(argv)
    except EngineInitializationError as e:
        Console(stderr=True).print(f"[bold red]FATAL:[/bold red] {e}")
        return FATAL_EXIT.code
