# shellkit/command_line.py
"""
Turns raw process arguments into a `CommandLine`.

Options must come before the command words; everything from the first
positional word onwards is joined into a single command, so that a command's
own flags are never mistaken for ours:

    shellkit --dev version
    shellkit -c "date" -c "version"
    shellkit --cmdfile setup.txt --disableInternalCommands
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, NoReturn, Optional, Sequence

from cmd2 import Cmd2ArgumentParser

from shellkit.exceptions import ParseError
from shellkit.schemas.command_line import CommandLine


class _RaisingArgumentParser(Cmd2ArgumentParser):
    """Argument parser that raises `ParseError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise ParseError(message)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value!r}")
    return number


def _make_parser() -> Cmd2ArgumentParser:
    p = _RaisingArgumentParser(
        prog="shellkit",
        description="Interactive command shell. With commands given, runs them in order and exits.",
        add_help=False,
    )
    p.add_argument(
        "-c",
        "--command",
        dest="commands",
        action="append",
        default=[],
        metavar="CMD",
        help="Command to execute and then quit (repeatable, runs in order)",
    )
    p.add_argument(
        "--cmdfile",
        type=Path,
        metavar="FILE",
        help="Execute the commands in FILE, one per line ('#' starts a comment)",
    )
    p.add_argument(
        "--histsize",
        type=_positive_int,
        metavar="N",
        help="Number of history entries to keep",
    )
    p.add_argument(
        "--disableInternalCommands",
        "--disable-internal-commands",
        dest="disable_internal_commands",
        action="store_true",
        help="Do not register the built-in command sets",
    )
    p.add_argument(
        "--dev",
        "--development",
        dest="development_mode",
        action="store_true",
        help="Development mode: report total execution time on exit",
    )
    p.add_argument("--debug", action="store_true", help="Log at DEBUG level")
    p.add_argument(
        "--no-ansi", dest="no_ansi", action="store_true", help="Disable styled output"
    )
    p.add_argument("-h", "--help", dest="show_help", action="store_true", help="Show this help")
    p.add_argument(
        "words",
        nargs=argparse.REMAINDER,
        help="A single command to execute and then quit",
    )
    return p


def usage() -> str:
    return _make_parser().format_help()


def _read_command_file(path: Path) -> List[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"cannot read command file {path}: {e}") from e
    lines = (line.strip() for line in text.splitlines())
    return [line for line in lines if line and not line.startswith("#")]


def parse_command_line(argv: Optional[Sequence[str]] = None) -> CommandLine:
    """Parse `argv` (without the program name) into a `CommandLine`.

    :raises ParseError: on unknown options, bad option values or an unreadable
        command file.
    """
    argv = list(argv or [])
    try:
        ns = _make_parser().parse_args(argv)
    except ParseError as e:
        raise ParseError(str(e), argv) from e

    commands: List[str] = []
    if ns.cmdfile is not None:
        commands.extend(_read_command_file(ns.cmdfile))
    commands.extend(ns.commands)
    words = ns.words[1:] if ns.words[:1] == ["--"] else ns.words
    if words:
        commands.append(" ".join(words))

    return CommandLine(
        commands_to_execute=commands,
        disable_internal_commands=ns.disable_internal_commands,
        development_mode=ns.development_mode,
        history_size=ns.histsize,
        command_file=ns.cmdfile,
        debug=ns.debug,
        no_ansi=ns.no_ansi,
        show_help=ns.show_help,
    )
