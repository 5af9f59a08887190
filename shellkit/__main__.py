# shellkit/__main__.py
"""
Main entry point for running the shellkit shell.

This allows the shell to be started by running `python -m shellkit`.
It supports both interactive mode and one-shot command execution.
"""
import sys

from shellkit.lifecycle import main

if __name__ == "__main__":
    sys.exit(main())
