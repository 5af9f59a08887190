"""
Parsed process arguments.

A `CommandLine` is built once per process by
`shellkit.command_line.parse_command_line` and then handed explicitly to
whatever needs it. There is no shared module-level instance.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CommandLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    commands_to_execute: Optional[Tuple[str, ...]] = Field(
        None,
        description="Commands to run in order before exiting; None selects interactive mode",
    )
    disable_internal_commands: bool = Field(
        False, description="Skip registration of the built-in command sets"
    )
    development_mode: bool = Field(
        False, description="Report total execution time on exit"
    )
    history_size: Optional[int] = Field(
        None, gt=0, description="Maximum number of persisted history entries"
    )
    command_file: Optional[Path] = Field(
        None, description="File the batch commands were read from, if any"
    )
    debug: bool = Field(False, description="Log at DEBUG level")
    no_ansi: bool = Field(False, description="Disable styled terminal output")
    show_help: bool = Field(False, description="Print usage and exit")

    @field_validator("commands_to_execute", mode="before")
    @classmethod
    def _empty_means_interactive(cls, value):
        # An empty batch is the same as no batch at all.
        if value is None:
            return None
        value = tuple(value)
        return value or None

    @property
    def is_batch(self) -> bool:
        return self.commands_to_execute is not None
