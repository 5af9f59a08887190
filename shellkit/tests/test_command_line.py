# shellkit/tests/test_command_line.py
"""
Unit tests for turning process arguments into a CommandLine.
"""
from pathlib import Path

import pytest

from shellkit.command_line import parse_command_line, usage
from shellkit.exceptions import ParseError


def test_no_arguments_means_interactive():
    cl = parse_command_line([])
    assert cl.commands_to_execute is None
    assert cl.disable_internal_commands is False
    assert cl.development_mode is False


def test_none_is_treated_as_no_arguments():
    assert parse_command_line(None).commands_to_execute is None


def test_repeated_command_option_keeps_order():
    cl = parse_command_line(["-c", "help", "--command", "version"])
    assert cl.commands_to_execute == ("help", "version")


def test_positional_words_form_one_command():
    cl = parse_command_line(["--dev", "script", "setup.txt", "--line-numbers"])
    assert cl.commands_to_execute == ("script setup.txt --line-numbers",)
    assert cl.development_mode is True


def test_flags():
    cl = parse_command_line(
        ["--disableInternalCommands", "--debug", "--no-ansi", "--histsize", "50"]
    )
    assert cl.disable_internal_commands is True
    assert cl.debug is True
    assert cl.no_ansi is True
    assert cl.history_size == 50
    assert cl.commands_to_execute is None


def test_kebab_case_alias_for_disable_internal_commands():
    assert parse_command_line(["--disable-internal-commands"]).disable_internal_commands


def test_help_flag():
    assert parse_command_line(["--help"]).show_help is True
    assert "--cmdfile" in usage()


def test_cmdfile_lines_run_before_other_commands(tmp_path: Path):
    cmdfile = tmp_path / "cmds.txt"
    cmdfile.write_text("# setup\nversion\n\n  date  \n", encoding="utf-8")

    cl = parse_command_line(["--cmdfile", str(cmdfile), "-c", "help", "jobs"])

    assert cl.commands_to_execute == ("version", "date", "help", "jobs")
    assert cl.command_file == cmdfile


def test_explicit_empty_command_is_kept():
    cl = parse_command_line(["-c", ""])
    assert cl.commands_to_execute == ("",)


@pytest.mark.parametrize(
    "argv",
    [
        ["--no-such-option"],
        ["-c"],
        ["--histsize", "lots"],
        ["--histsize", "0"],
        ["--histsize", "-3"],
    ],
)
def test_malformed_arguments_raise_parse_error(argv):
    with pytest.raises(ParseError) as exc:
        parse_command_line(argv)
    assert exc.value.argv == argv


def test_missing_cmdfile_raises_parse_error(tmp_path: Path):
    with pytest.raises(ParseError, match="cannot read command file"):
        parse_command_line(["--cmdfile", str(tmp_path / "missing.txt")])


def test_option_terminator_is_not_part_of_the_command():
    cl = parse_command_line(["--dev", "--", "version", "--json"])
    assert cl.commands_to_execute == ("version --json",)
