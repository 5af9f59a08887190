# shellkit/shell.py
"""
The interactive shell component, built with cmd2.

`ShellComponent` is the concrete `ShellEngine`: it executes single command
lines for batch runs, runs the prompt loop for interactive sessions, records
the user's exit request and tracks background jobs started by commands.
"""
from __future__ import annotations

import argparse
import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Callable, Optional, Set

import cmd2
from cmd2 import Cmd2ArgumentParser, ansi, with_argparser
from cmd2.exceptions import Cmd2ArgparseError, Cmd2ShlexError
from rich.console import Console

from shellkit.schemas.command_result import CommandResult
from shellkit.schemas.exit_status import ExitStatus, NORMAL_EXIT
from shellkit.utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_PROMPT = "shellkit> "
DEFAULT_BANNER = "Welcome to shellkit. Type 'help' for a list of commands."
DEFAULT_HISTORY_SIZE = 1000


def _terminal_supports_ansi() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    return os.environ.get("TERM", "") != "dumb"


@cmd2.with_default_category("Shell Commands")
class ShellComponent(cmd2.Cmd):
    """The main class for the shellkit command shell."""

    def __init__(
        self,
        *,
        prompt: str = DEFAULT_PROMPT,
        banner: Optional[str] = DEFAULT_BANNER,
        history_file: str = "",
        history_size: Optional[int] = None,
        use_ansi: bool = True,
        max_background_jobs: int = 4,
        **kwargs: Any,
    ):
        super().__init__(
            persistent_history_file=history_file,
            persistent_history_length=history_size or DEFAULT_HISTORY_SIZE,
            allow_cli_args=False,
            auto_load_commands=False,
            **kwargs,
        )
        self._prompt_text = prompt
        self.banner = banner
        self.use_ansi = use_ansi and _terminal_supports_ansi()
        self.console = Console(no_color=not self.use_ansi)
        if not self.use_ansi:
            ansi.allow_style = ansi.AllowStyle.NEVER
        self._exit_request: Optional[ExitStatus] = None
        self._failure: Optional[str] = None
        self._max_background_jobs = max_background_jobs
        self._executor: Optional[ThreadPoolExecutor] = None
        self._jobs: Set[Future] = set()
        self._jobs_lock = threading.Lock()
        self._closed = False

    @property
    def prompt(self) -> str:
        return ansi.style(self._prompt_text, bold=True)

    @prompt.setter
    def prompt(self, value: str) -> None:
        self._prompt_text = value

    @property
    def exit_shell_request(self) -> Optional[ExitStatus]:
        return self._exit_request

    # --- Batch execution ---

    def execute_command(self, line: str) -> CommandResult:
        """Execute one command line and report whether it succeeded."""
        if not line or not line.strip():
            return CommandResult.failed(line, "empty command")
        try:
            self.statement_parser.parse(line)
        except Cmd2ShlexError as e:
            self.perror(f"Invalid syntax: {e}")
            return CommandResult.failed(line, f"invalid syntax: {e}")

        self._failure = None
        self.last_result = None
        self.exit_code = 0
        try:
            self.onecmd_plus_hooks(line, raise_keyboard_interrupt=True)
        except KeyboardInterrupt:
            return CommandResult.failed(line, "interrupted")

        if self._failure is not None:
            return CommandResult.failed(line, self._failure)
        if self.exit_code != 0:
            return CommandResult.failed(line, f"exited with code {self.exit_code}")
        result = self.last_result
        if isinstance(result, CommandResult):
            return result if result.command else result.model_copy(update={"command": line})
        if result is False:
            return CommandResult.failed(line, "command reported failure")
        return CommandResult.ok(line, result)

    def onecmd(self, statement, *, add_to_history: bool = True) -> bool:
        try:
            return super().onecmd(statement, add_to_history=add_to_history)
        except Cmd2ArgparseError:
            self._failure = "invalid arguments"
            raise

    def default(self, statement: cmd2.Statement) -> Optional[bool]:
        self._failure = f"unknown command: {statement.command}"
        return super().default(statement)

    def pexcept(self, msg: Any, *, end: str = "\n", apply_style: bool = True) -> None:
        self._failure = str(msg) or type(msg).__name__
        logger.debug("Command raised %r", msg)
        super().pexcept(msg, end=end, apply_style=apply_style)

    # --- Interactive session ---

    def start(self) -> None:
        """Greet the user."""
        logger.info("Shell started")
        if self.banner:
            self.poutput(ansi.style(self.banner, bold=True))

    def prompt_loop(self) -> Optional[ExitStatus]:
        """Run the read-eval loop until the user exits.

        Returns the exit request recorded by `exit`, `quit` or end of input.
        """
        exit_code = self.cmdloop()
        if self._exit_request is None and exit_code:
            self._exit_request = ExitStatus.from_code(exit_code)
        return self._exit_request

    def record_exit_request(self, status: ExitStatus) -> None:
        self._exit_request = status

    exit_parser = Cmd2ArgumentParser(description="Exit the shell.")
    exit_parser.add_argument(
        "--code",
        type=int,
        default=0,
        help="Process exit code to report (default: 0)",
    )

    @with_argparser(exit_parser)
    @cmd2.with_category("Session Commands")
    def do_exit(self, args: argparse.Namespace) -> bool:
        """Exit the shell."""
        self.record_exit_request(ExitStatus.from_code(args.code))
        self.last_result = True
        return True

    @cmd2.with_category("Session Commands")
    def do_quit(self, _: Any) -> bool:
        """Exit the shell."""
        self.record_exit_request(NORMAL_EXIT)
        self.last_result = True
        return True

    # --- Background jobs ---

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Run `fn` on the shell's worker pool.

        The job is tracked until it finishes so that `wait_for_complete` can
        drain it before the process exits.
        """
        with self._jobs_lock:
            if self._closed:
                raise RuntimeError("shell is closed")
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_background_jobs,
                    thread_name_prefix="shellkit-job",
                )
            future = self._executor.submit(fn, *args, **kwargs)
            self._jobs.add(future)
        future.add_done_callback(self._job_done)
        return future

    def _job_done(self, future: Future) -> None:
        with self._jobs_lock:
            self._jobs.discard(future)
        if not future.cancelled() and future.exception() is not None:
            logger.error("Background job failed: %s", future.exception())

    @property
    def pending_jobs(self) -> int:
        with self._jobs_lock:
            return len(self._jobs)

    def wait_for_complete(self, timeout: Optional[float] = None) -> None:
        with self._jobs_lock:
            jobs = list(self._jobs)
        if jobs:
            logger.debug("Waiting for %d background job(s)", len(jobs))
            wait(jobs, timeout=timeout)

    def close(self) -> None:
        """Shut down the worker pool. Safe to call more than once."""
        with self._jobs_lock:
            if self._closed:
                return
            self._closed = True
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)
        logger.debug("Shell closed")
