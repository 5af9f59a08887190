# shellkit/engine.py
"""
The narrow surface the orchestrator drives.

`shellkit.shell.ShellComponent` is the real implementation; tests use small
fakes. Only the process lifecycle may close an engine.
"""
from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from shellkit.schemas.command_result import CommandResult
from shellkit.schemas.exit_status import ExitStatus


@runtime_checkable
class ShellEngine(Protocol):
    def execute_command(self, line: str) -> CommandResult:
        """Run one command line to completion and report its outcome."""
        ...

    def start(self) -> None:
        """Prepare the interactive session (terminal, history, banner)."""
        ...

    def prompt_loop(self) -> Optional[ExitStatus]:
        """Read and run commands until the user exits.

        Blocks until an exit action and returns the recorded exit request.
        """
        ...

    @property
    def exit_shell_request(self) -> Optional[ExitStatus]: ...

    def wait_for_complete(self, timeout: Optional[float] = None) -> None:
        """Block until background work started by commands has drained."""
        ...

    def close(self) -> None: ...
