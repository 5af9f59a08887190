# shellkit/tests/test_orchestrator.py
"""
Tests for batch/interactive mode dispatch and exit-status derivation.

Covers:
- Fail-fast batch execution and invocation counts.
- Interactive call ordering and the missing-exit-request fallback.
"""
import pytest

from shellkit import orchestrator
from shellkit.schemas.command_line import CommandLine
from shellkit.schemas.command_result import CommandResult
from shellkit.schemas.exit_status import ExitStatus, FATAL_EXIT, NORMAL_EXIT


class _FakeShell:
    """Minimal stand-in for ShellComponent that records every call."""

    def __init__(self, failing=(), loop_result=NORMAL_EXIT, stored_request=None):
        self.failing = set(failing)
        self.loop_result = loop_result
        self.stored_request = stored_request
        self.calls = []
        self.executed = []
        self.closed = False

    def execute_command(self, line):
        self.calls.append("execute_command")
        self.executed.append(line)
        if line in self.failing:
            return CommandResult.failed(line, "boom")
        return CommandResult.ok(line)

    def start(self):
        self.calls.append("start")

    def prompt_loop(self):
        self.calls.append("prompt_loop")
        return self.loop_result

    @property
    def exit_shell_request(self):
        return self.stored_request

    def wait_for_complete(self, timeout=None):
        self.calls.append("wait_for_complete")

    def close(self):
        self.closed = True


def _batch(*commands):
    return CommandLine(commands_to_execute=list(commands))


def test_all_commands_succeed_runs_each_once_in_order():
    shell = _FakeShell()
    status = orchestrator.run(_batch("help", "version"), shell)

    assert status == ExitStatus(succeeded=True, code=0)
    assert shell.executed == ["help", "version"]


def test_single_failing_command_is_fatal():
    shell = _FakeShell(failing={"bad-cmd"})
    status = orchestrator.run(_batch("bad-cmd"), shell)

    assert status == FATAL_EXIT
    assert status.succeeded is False
    assert shell.executed == ["bad-cmd"]


def test_batch_stops_at_first_failure():
    shell = _FakeShell(failing={"bad"})
    status = orchestrator.run(_batch("ok", "bad", "never-run"), shell)

    assert status == FATAL_EXIT
    assert shell.executed == ["ok", "bad"]
    assert "never-run" not in shell.executed


@pytest.mark.parametrize("fail_at", [0, 1, 3, 4])
def test_executes_exactly_up_to_first_failure(fail_at):
    commands = [f"cmd-{i}" for i in range(5)]
    shell = _FakeShell(failing={commands[fail_at]})

    status = orchestrator.run(_batch(*commands), shell)

    assert status == FATAL_EXIT
    assert shell.executed == commands[: fail_at + 1]


def test_batch_mode_never_touches_interactive_methods():
    shell = _FakeShell()
    orchestrator.run(_batch("a", "b"), shell)

    assert set(shell.calls) == {"execute_command"}
    assert shell.closed is False


@pytest.mark.parametrize("commands", [None, [], ()])
def test_absent_or_empty_commands_select_interactive_mode(commands):
    shell = _FakeShell()
    status = orchestrator.run(CommandLine(commands_to_execute=commands), shell)

    assert shell.calls == ["start", "prompt_loop", "wait_for_complete"]
    assert shell.executed == []
    assert status == NORMAL_EXIT


def test_interactive_exit_request_is_passed_through():
    custom = ExitStatus(succeeded=False, code=3)
    shell = _FakeShell(loop_result=custom)

    assert orchestrator.run(CommandLine(), shell) is custom


def test_missing_exit_request_defaults_to_normal_exit():
    shell = _FakeShell(loop_result=None, stored_request=None)
    status = orchestrator.run(CommandLine(), shell)

    assert status == NORMAL_EXIT
    assert shell.calls == ["start", "prompt_loop", "wait_for_complete"]


def test_stored_exit_request_used_when_loop_returns_nothing():
    stored = ExitStatus(succeeded=False, code=1)
    shell = _FakeShell(loop_result=None, stored_request=stored)

    assert orchestrator.run(CommandLine(), shell) == stored


def test_interactive_mode_does_not_close_the_shell():
    shell = _FakeShell()
    orchestrator.run(CommandLine(), shell)
    assert shell.closed is False
