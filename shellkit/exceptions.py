# shellkit/exceptions.py
"""
Defines custom exception classes for shellkit.

Only start-up failures are modelled as exceptions. Once a run is underway,
individual command failures travel as `CommandResult` values and are folded
into a single `ExitStatus`, so they never appear here.
"""
from typing import Optional, Sequence


class ShellkitError(Exception):
    """Base exception class for all custom errors in shellkit."""

    pass


class ParseError(ShellkitError):
    """Raised when the process arguments cannot be turned into a `CommandLine`.

    This covers unknown options, missing option values, a malformed
    `--histsize` and an unreadable `--cmdfile`. It is raised before any shell
    is constructed.
    """

    def __init__(self, message: str, argv: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.argv = list(argv) if argv is not None else None


class EngineInitializationError(ShellkitError):
    """Raised when the shell or one of its collaborators cannot be wired up."""

    pass


class PluginLoadError(ShellkitError):
    """Raised by the plugin loader for a single broken plugin.

    The loader logs and skips these; they never end the process.
    """

    pass
