# shellkit/commands/essential.py
"""
Everyday built-in commands: version, date, clear, sysinfo and jobs.
"""
from __future__ import annotations

import os
import platform
import sys
from datetime import datetime
from importlib.metadata import PackageNotFoundError, version as dist_version

import cmd2
from cmd2 import Cmd2ArgumentParser, with_argparser, with_default_category
from rich.table import Table

import shellkit


def shellkit_version() -> str:
    try:
        return dist_version("shellkit")
    except PackageNotFoundError:
        return shellkit.__version__


_sysinfo_parser = Cmd2ArgumentParser(description="Show interpreter and platform properties")
_sysinfo_parser.add_argument(
    "--env", action="store_true", help="Also list environment variables"
)


@with_default_category("Essential Commands")
class EssentialCommandSet(cmd2.CommandSet):
    def do_version(self, _: cmd2.Statement) -> None:
        """Show the shellkit version."""
        v = shellkit_version()
        self._cmd.poutput(f"shellkit {v}")
        self._cmd.last_result = v

    def do_date(self, _: cmd2.Statement) -> None:
        """Show the current local date and time."""
        now = datetime.now().astimezone()
        self._cmd.poutput(now.strftime("%a %b %d %H:%M:%S %Z %Y"))
        self._cmd.last_result = now

    def do_clear(self, _: cmd2.Statement) -> None:
        """Clear the terminal screen."""
        self._cmd.console.clear()
        self._cmd.last_result = True

    def do_cls(self, statement: cmd2.Statement) -> None:
        """Clear the terminal screen."""
        self.do_clear(statement)

    @with_argparser(_sysinfo_parser)
    def do_sysinfo(self, args) -> None:
        props = {
            "python.version": platform.python_version(),
            "python.implementation": platform.python_implementation(),
            "python.executable": sys.executable,
            "os.name": platform.system(),
            "os.release": platform.release(),
            "os.arch": platform.machine(),
            "user.dir": os.getcwd(),
        }
        if args.env:
            props.update({f"env.{k}": v for k, v in sorted(os.environ.items())})

        table = Table(title="System Properties")
        table.add_column("Property", style="cyan")
        table.add_column("Value")
        for key, value in props.items():
            table.add_row(key, value)
        self._cmd.console.print(table)
        self._cmd.last_result = props

    def do_jobs(self, _: cmd2.Statement) -> None:
        """Show how many background jobs are still running."""
        pending = self._cmd.pending_jobs
        self._cmd.poutput(f"{pending} background job(s) running")
        self._cmd.last_result = pending


def register(app: cmd2.Cmd) -> None:
    app.register_command_set(EssentialCommandSet())
