# shellkit/orchestrator.py
"""
Chooses between batch and interactive mode and reduces the run to one
`ExitStatus`.

Batch mode executes the requested commands strictly in order and stops at the
first one that does not succeed. Interactive mode hands control to the shell's
prompt loop and passes the user's exit request through unchanged.
"""
from __future__ import annotations

from typing import Sequence

from shellkit.engine import ShellEngine
from shellkit.schemas.command_line import CommandLine
from shellkit.schemas.exit_status import ExitStatus, FATAL_EXIT, NORMAL_EXIT
from shellkit.utils.logger import setup_logger

logger = setup_logger(__name__)


def run_batch(commands: Sequence[str], shell: ShellEngine) -> ExitStatus:
    """Execute `commands` one at a time, failing fast."""
    all_succeeded = True
    for index, command in enumerate(commands):
        logger.debug("Executing batch command %d: %r", index, command)
        outcome = shell.execute_command(command)
        if not outcome.success:
            logger.info(
                "Batch command %d (%r) failed; skipping %d remaining",
                index,
                command,
                len(commands) - index - 1,
            )
            all_succeeded = False
            break

    return NORMAL_EXIT if all_succeeded else FATAL_EXIT


def run_interactive(shell: ShellEngine) -> ExitStatus:
    """Run the prompt loop until the user exits and return their exit request."""
    shell.start()
    exit_request = shell.prompt_loop()
    if exit_request is None:
        exit_request = shell.exit_shell_request
    if exit_request is None:
        # shouldn't happen, but a missing request is not a failure
        logger.warning("Prompt loop ended without an exit request; assuming normal exit")
        exit_request = NORMAL_EXIT
    shell.wait_for_complete()
    return exit_request


def run(command_line: CommandLine, shell: ShellEngine) -> ExitStatus:
    """Drive one run of the shell and return its exit status.

    The shell is only operated here, never closed.
    """
    if command_line.is_batch:
        logger.debug(
            "Batch mode: %d command(s)", len(command_line.commands_to_execute)
        )
        return run_batch(command_line.commands_to_execute, shell)

    logger.debug("Interactive mode")
    return run_interactive(shell)
