"""
shellkit core package.

An interactive command shell that can also run a fixed list of commands in
one shot and exit with a single status.
"""

__version__ = "0.1.0"

__all__ = [
    "bootstrap",
    "command_line",
    "commands",
    "lifecycle",
    "orchestrator",
    "schemas",
    "shell",
    "utils",
]
