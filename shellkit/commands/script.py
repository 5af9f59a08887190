# shellkit/commands/script.py
"""
The `script` command: run a file of shell commands, stopping at the first
failure.
"""
from __future__ import annotations

from pathlib import Path

import cmd2
from cmd2 import Cmd2ArgumentParser, with_argparser, with_default_category

from shellkit.schemas.command_result import CommandResult


def _make_parser() -> Cmd2ArgumentParser:
    p = Cmd2ArgumentParser(
        prog="script",
        description="Execute the commands in a file, one per line",
    )
    p.add_argument("file", type=Path, help="Script file ('#' starts a comment)")
    p.add_argument(
        "--line-numbers",
        dest="line_numbers",
        action="store_true",
        help="Echo each command with its line number before running it",
    )
    return p


@with_default_category("Essential Commands")
class ScriptCommandSet(cmd2.CommandSet):
    @with_argparser(_make_parser())
    def do_script(self, args) -> None:
        app = self._cmd
        try:
            text = args.file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            app.perror(f"Cannot read script {args.file}: {e}")
            app.last_result = CommandResult.failed("", f"cannot read {args.file}")
            return

        executed = 0
        for number, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            if args.line_numbers:
                app.poutput(f"{number}: {line}")
            outcome = app.execute_command(line)
            if not outcome.success:
                app.perror(f"Script {args.file} failed at line {number}: {line}")
                app.last_result = CommandResult.failed("", outcome.error or "failed")
                return
            executed += 1

        app.last_result = CommandResult.ok("", executed)


def register(app: cmd2.Cmd) -> None:
    app.register_command_set(ScriptCommandSet())
